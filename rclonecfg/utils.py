"""Utility functions for rclonecfg."""

import os
import platform
import datetime
from pathlib import Path

from . import APPNAME


def app_home() -> Path:
    """Get platform-specific application data directory."""
    system = platform.system()

    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home()))
    elif system == "Darwin":
        base = Path.home() / "Library" / "Application Support"
    else:  # Linux and friends
        base = Path.home() / ".local" / "share"

    return base / APPNAME


LOG_FILE = app_home() / "rclonecfg.log"


def log(msg: str) -> None:
    """Append message to log file with timestamp.

    Never raises; a run must not fail because its log could not be written.
    """
    try:
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        with open(LOG_FILE, "a", encoding="utf-8", errors="backslashreplace") as f:
            timestamp = datetime.datetime.now().isoformat()
            f.write(f"{timestamp} {msg}\n")
    except Exception:
        pass
