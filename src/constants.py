import os
from typing import Optional

# Get the src directory
SRC_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(SRC_DIR)

LOG_DIR = os.getenv('MARKUP_LOG_DIR', os.path.join(PROJECT_ROOT, "logs"))
CONFIG_DIR = os.path.join(PROJECT_ROOT, "config")

def get_config_path() -> Optional[str]:
    """
    Get the renderer configuration path from the environment, if set.

    :return: Path from MARKUP_CONFIG_PATH, or None
    """
    return os.getenv('MARKUP_CONFIG_PATH') or None

MARKUP_CONFIG_PATH = get_config_path()
