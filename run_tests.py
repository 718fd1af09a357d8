#!/usr/bin/python3
"""Run the markup test suites by category, optionally under coverage."""

import argparse
import importlib.util
import os
import shutil
import sys
import tempfile
import unittest
from typing import List, Optional

import coverage

PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))
SRC_DIR = os.path.join(PROJECT_ROOT, 'src')
TEST_DIR = os.path.join(SRC_DIR, 'tests')
CATEGORIES = ['common', 'markup']

def find_test_modules(categories: List[str]) -> List[str]:
    """Paths of test_*.py modules under src/tests/<category>/."""
    paths = []
    for category in categories:
        category_dir = os.path.join(TEST_DIR, category)
        if os.path.isdir(category_dir):
            paths.extend(
                os.path.join(category_dir, name)
                for name in sorted(os.listdir(category_dir))
                if name.startswith('test_') and name.endswith('.py')
            )
    return paths

def load_suite(paths: List[str], pattern: Optional[str]) -> unittest.TestSuite:
    loader = unittest.TestLoader()
    if pattern:
        loader.testNamePatterns = [pattern]

    suite = unittest.TestSuite()
    for path in paths:
        module_name = os.path.splitext(os.path.basename(path))[0]
        spec = importlib.util.spec_from_file_location(module_name, path)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        suite.addTests(loader.loadTestsFromModule(module))
    return suite

def run(categories: Optional[List[str]], pattern: Optional[str],
        verbose: bool, with_coverage: bool, fail_fast: bool) -> bool:
    """
    Run the selected test categories.

    :return: True if all tests passed
    """
    # Test logs go to a throwaway directory; must be set before constants is imported
    log_dir = tempfile.mkdtemp(prefix='markup-logs-')
    os.environ['MARKUP_LOG_DIR'] = log_dir
    if SRC_DIR not in sys.path:
        sys.path.insert(0, SRC_DIR)

    cov = coverage.Coverage(source=[SRC_DIR], omit=[os.path.join(TEST_DIR, '*')]) if with_coverage else None
    try:
        if cov:
            cov.start()
        suite = load_suite(find_test_modules(categories or CATEGORIES), pattern)
        result = unittest.TextTestRunner(
            verbosity=2 if verbose else 1,
            failfast=fail_fast,
            buffer=not verbose,
        ).run(suite)
        if cov:
            cov.stop()
            cov.report()
        return result.wasSuccessful()
    finally:
        shutil.rmtree(log_dir, ignore_errors=True)

if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Run the markup test suite')
    parser.add_argument('--category', choices=CATEGORIES, action='append',
                        help='Test category to run (repeatable; default: all)')
    parser.add_argument('--pattern', help='Only run tests matching pattern (e.g. "*attribute*")')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable verbose output')
    parser.add_argument('--coverage', action='store_true', help='Report coverage of src/')
    parser.add_argument('--fail-fast', '-x', action='store_true', help='Stop on first test failure')
    args = parser.parse_args()

    success = run(args.category, args.pattern, args.verbose, args.coverage, args.fail_fast)
    sys.exit(0 if success else 1)
