# infra/path.py
from __future__ import annotations
import os
import sys
from pathlib import Path

APP_NAME = "StaffingCapacity"
COMPANY_NAME = "TECHASH"

DB_PATH_ENV = "STAFFING_DB_PATH"


def user_data_dir() -> Path:
    """
    Returns a per-user data directory, e.g.:

    Windows:
        C:\\Users\\<User>\\AppData\\Roaming\\TECHASH\\StaffingCapacity

    macOS:
        ~/Library/Application Support/TECHASH/StaffingCapacity

    Linux:
        ~/.local/share/TECHASH/StaffingCapacity
    """
    try:
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


def default_db_path() -> Path:
    """
    SQLite database file. ``STAFFING_DB_PATH`` overrides the per-user location.
    """
    override = os.getenv(DB_PATH_ENV)
    if override:
        return Path(override).expanduser()
    return user_data_dir() / "staffing.db"
