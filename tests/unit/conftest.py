"""Unit test configuration"""

import os
import tempfile
from pathlib import Path

# Set env vars BEFORE any test module imports src.main:
# main.py configures logging at module level (on import)
os.environ.setdefault("LOG_FILE", str(Path(tempfile.gettempdir()) / "porter2-tests" / "porter2.log"))
os.environ.setdefault("LOG_LEVEL", "WARNING")
