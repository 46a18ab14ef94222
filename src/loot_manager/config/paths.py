"""Locations of LOOT's own files and folders"""

import os
import sys
from pathlib import Path

from ..logging_config import get_logger

logger = get_logger("paths")

DATA_DIR_NAME = "LOOT"
SETTINGS_FILE_NAME = "settings.xml"
PRELUDE_DIR_NAME = "prelude"


def get_executable_directory() -> Path:
    """Get the directory containing the running executable.

    For a frozen build this is the directory of the LOOT executable,
    otherwise it is the directory of the launching script.
    """
    if getattr(sys, 'frozen', False):
        return Path(sys.executable).resolve().parent
    return Path(sys.argv[0]).resolve().parent


def get_local_app_data_path() -> Path:
    """Get the per-user directory that LOOT's data directory lives in.

    On Windows this is %LOCALAPPDATA%. Elsewhere it is $XDG_CONFIG_HOME,
    falling back to $HOME/.config and then to the executable's directory.

    Raises:
        OSError: If %LOCALAPPDATA% is not set on Windows
    """
    if sys.platform == "win32":
        local_app_data = os.environ.get("LOCALAPPDATA")
        if not local_app_data:
            raise OSError("Failed to get %LOCALAPPDATA% path.")
        return Path(local_app_data)

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        return Path(xdg_config_home)

    home = os.environ.get("HOME")
    if home:
        return Path(home) / ".config"

    logger.warning("Neither XDG_CONFIG_HOME nor HOME is set, using the executable's directory")
    return get_executable_directory()


def expand_path(path_str: str) -> Path:
    """Expand environment variables and ~ in a path string.

    Args:
        path_str: Path string potentially containing environment variables

    Returns:
        Path object with expanded variables
    """
    return Path(os.path.expanduser(os.path.expandvars(path_str)))


class LootPaths:
    """Paths to the application directory and LOOT's data directory.

    Args:
        app_path: Directory holding the LOOT executable
        data_path: Directory holding settings, logs and per-game data
    """

    def __init__(self, app_path: Path, data_path: Path):
        self.app_path = app_path
        self.data_path = data_path

    @classmethod
    def default(cls) -> "LootPaths":
        """Build the paths used by an installed copy of LOOT."""
        return cls(get_executable_directory(), get_local_app_data_path() / DATA_DIR_NAME)

    @property
    def settings_path(self) -> Path:
        return self.data_path / SETTINGS_FILE_NAME

    @property
    def prelude_path(self) -> Path:
        return self.data_path / PRELUDE_DIR_NAME

    def game_data_path(self, game_id: str) -> Path:
        """Get the directory holding LOOT's metadata for one game.

        Args:
            game_id: Id of the game

        Returns:
            Path to the game's folder in the data directory
        """
        return self.data_path / game_id

    def __repr__(self) -> str:
        return f"LootPaths(app_path={self.app_path!r}, data_path={self.data_path!r})"
