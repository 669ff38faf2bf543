# infra/path.py
from __future__ import annotations
import os
import sys
from pathlib import Path

APP_NAME = "PertPlannerLite"
COMPANY_NAME = "TECHASH"


def user_data_dir() -> Path:
    """
    Returns a per-user data directory, e.g.:

    Windows:
        C:\\Users\\<User>\\AppData\\Roaming\\TECHASH\\PertPlannerLite

    macOS:
        ~/Library/Application Support/TECHASH/PertPlannerLite

    Linux:
        ~/.local/share/TECHASH/PertPlannerLite

    PM_DATA_DIR overrides the location entirely.
    """
    override = (os.getenv("PM_DATA_DIR") or "").strip()
    try:
        if override:
            path = Path(override)
        else:
            if sys.platform.startswith("win"):
                base = Path(os.getenv("APPDATA", Path.home() / "AppData" / "Roaming"))
            elif sys.platform == "darwin":
                base = Path.home() / "Library" / "Application Support"
            else:
                base = Path(os.getenv("XDG_DATA_HOME", Path.home() / ".local" / "share"))
            path = base / COMPANY_NAME / APP_NAME
        path.mkdir(parents=True, exist_ok=True)
        return path
    except OSError:
        # Last-resort fallback: use home directory
        fallback = Path.home() / f".{APP_NAME}"
        fallback.mkdir(parents=True, exist_ok=True)
        return fallback


def default_log_dir() -> Path:
    return user_data_dir() / "logs"
