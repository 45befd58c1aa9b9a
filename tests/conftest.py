"""
Shared test setup.

Points the data directory at a throwaway folder before any app module is
imported, so logs and bars.yaml never touch the real home directory, and
pins messages to English.
"""

import os
import sys
import tempfile
from pathlib import Path

os.environ["BARKEEP_HOME"] = tempfile.mkdtemp(prefix="barkeep-tests-")
os.environ["BARKEEP_LANG"] = "en"

sys.path.insert(0, str(Path(__file__).parent.parent / "app"))
