"""
Path management for ProjectBoard

Handles platform-specific user data directories following standard conventions:
- macOS: ~/Library/Application Support/ProjectBoard/
- Linux: ~/.local/share/ProjectBoard/ (config in ~/.config/projectboard/)
- Windows: %APPDATA%/ProjectBoard/

Setting PROJECTBOARD_HOME puts data, config and logs under that one directory
(used by tests and portable installs).
"""
import os
import sys
from pathlib import Path
from typing import Optional


APP_NAME = "ProjectBoard"
HOME_ENV_VAR = "PROJECTBOARD_HOME"


def _home_override() -> Optional[Path]:
    override = os.getenv(HOME_ENV_VAR)
    if override:
        path = Path(override).expanduser()
        path.mkdir(parents=True, exist_ok=True)
        return path
    return None


def get_user_data_dir() -> Path:
    """
    Get platform-specific user data directory.

    Returns:
        Path to user data directory where settings and logs are stored.
    """
    override = _home_override()
    if override is not None:
        return override

    system = sys.platform

    if system == "darwin":  # macOS
        base = Path.home() / "Library" / "Application Support"
    elif system == "win32":  # Windows
        base = Path(os.getenv("APPDATA", Path.home() / "AppData" / "Roaming"))
    else:  # Linux and other Unix-like
        base = Path.home() / ".local" / "share"

    user_data_dir = base / APP_NAME
    user_data_dir.mkdir(parents=True, exist_ok=True)
    return user_data_dir


def get_user_config_dir() -> Path:
    """
    Get platform-specific user config directory.

    Same as the data directory on macOS/Windows (and under PROJECTBOARD_HOME),
    ~/.config/projectboard/ on Linux.
    """
    if _home_override() is not None or sys.platform in ("darwin", "win32"):
        return get_user_data_dir()

    config_dir = Path.home() / ".config" / "projectboard"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_logs_dir() -> Path:
    """
    Get directory for application logs.

    Returns:
        Path to logs directory (stored in user data directory).
    """
    logs_dir = get_user_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    return logs_dir


def get_settings_path() -> Path:
    """
    Get path to settings file.

    Returns:
        Path to settings.json in user config directory.
    """
    return get_user_config_dir() / "settings.json"


def get_app_install_dir() -> Optional[Path]:
    """
    Get the application installation directory (where the code lives, not user data).

    Returns:
        Path to application installation directory, or None if not determinable.
    """
    if getattr(sys, 'frozen', False):
        bundle_dir = getattr(sys, '_MEIPASS', None)
        if bundle_dir:
            return Path(bundle_dir)
        return Path(sys.executable).parent

    # src/utils/paths.py -> project root
    return Path(__file__).resolve().parent.parent.parent
