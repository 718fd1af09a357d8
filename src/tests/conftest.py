"""Pytest configuration for all tests."""

import os
import tempfile

# Set before any project import so constants picks it up
os.environ.setdefault("MARKUP_LOG_DIR", tempfile.mkdtemp(prefix="markup-logs-"))
