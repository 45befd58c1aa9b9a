"""Application constants and configuration."""

import os
from pathlib import Path

# Application metadata
APP_NAME = "barkeep"
APP_VERSION = "0.3.0"
DEFAULT_LANGUAGE = "en"

# Smallest chat area a window may be left with once its bars are laid out
CHAT_MIN_WIDTH = 5
CHAT_MIN_HEIGHT = 2

# User data directories
APP_DATA_DIR = os.environ.get("BARKEEP_HOME") or str(Path.home() / ".local" / "share" / APP_NAME)
os.makedirs(APP_DATA_DIR, exist_ok=True)

# Application data files
LOG_PATH = os.path.join(APP_DATA_DIR, "barkeep.log")
BARS_CONFIG_PATH = Path(APP_DATA_DIR) / "bars.yaml"
LOCALES_DIR = Path(__file__).parent / "locales"
