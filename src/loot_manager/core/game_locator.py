"""Find where games are installed"""

import os
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Optional

from ..config.schema import GamePaths, GameSettings
from ..logging_config import get_logger
from .engine import LoadOrderEngine
from .game import Game
from .registry import is_registry_available, read_registry_key

logger = get_logger("game_locator")


class GameLocator(ABC):
    """Finds installed games and prepares them for use.

    Callers only depend on these two operations, so different platforms or
    test setups can supply their own locator.
    """

    @abstractmethod
    def find_game_paths(self, game_settings: GameSettings) -> Optional[GamePaths]:
        """Find a game's install and local data paths.

        Returns:
            The game's paths, or None if it isn't installed
        """

    @abstractmethod
    def initialise_game_data(self, game: Game) -> None:
        """Load the data LOOT needs to work with an installed game."""


class DefaultGameLocator(GameLocator):
    """Locates games using user overrides, the Registry and Xbox games folders.

    Args:
        engine: Load order engine that loads a game's data
        xbox_games_folders: Callable returning the Xbox games folders found
            on this machine's drives
    """

    def __init__(self, engine: LoadOrderEngine, xbox_games_folders: Callable[[], list[Path]]):
        self.engine = engine
        self.xbox_games_folders = xbox_games_folders

    def find_game_paths(self, game_settings: GameSettings) -> Optional[GamePaths]:
        """Find a game's paths, checking its install path in priority order.

        The install path is taken from the first of these that gives an
        existing directory: the user's override, the game's Registry
        entries, then the Xbox games folders.

        Raises:
            RegistryError: If a Registry value exists but can't be read
        """
        install_path = self.find_install_path(game_settings)
        if install_path is None:
            logger.debug(f"{game_settings.name} is not installed")
            return None

        return GamePaths(
            install_path=install_path,
            local_path=self.find_local_path(game_settings),
        )

    def find_install_path(self, game_settings: GameSettings) -> Optional[Path]:
        if game_settings.install_path is not None:
            if game_settings.install_path.exists():
                logger.info(f"Using the configured install path for {game_settings.name}: {game_settings.install_path}")
                return game_settings.install_path
            logger.warning(
                f"The configured install path for {game_settings.name} does not exist: {game_settings.install_path}"
            )

        path = self._find_registry_install_path(game_settings)
        if path is not None:
            return path

        return self._find_xbox_install_path(game_settings)

    def find_local_path(self, game_settings: GameSettings) -> Optional[Path]:
        """Find the folder the game keeps its load order and INI files in.

        Doesn't depend on the game being installed.
        """
        if game_settings.local_path is not None:
            return game_settings.local_path

        if sys.platform == "win32" and game_settings.local_folder:
            local_app_data = os.environ.get("LOCALAPPDATA")
            if local_app_data:
                return Path(local_app_data) / game_settings.local_folder

        return None

    def initialise_game_data(self, game: Game) -> None:
        """Create the game's data folder and have the engine load the game.

        Raises:
            OSError: If the game's data folder can't be created
        """
        game.data_path.mkdir(parents=True, exist_ok=True)
        self.engine.load_game(game)

    def _find_registry_install_path(self, game_settings: GameSettings) -> Optional[Path]:
        if not game_settings.registry_keys or not is_registry_available():
            return None

        for key in game_settings.registry_keys:
            value = read_registry_key(key)
            if not value:
                continue

            path = Path(value)
            if path.is_dir():
                logger.info(f"Found {game_settings.name} using the Registry value {key}: {path}")
                return path
            logger.debug(f"The Registry value {key} points to a missing directory: {path}")

        return None

    def _find_xbox_install_path(self, game_settings: GameSettings) -> Optional[Path]:
        if not game_settings.install_folder_name:
            return None

        for games_folder in self.xbox_games_folders():
            path = games_folder / game_settings.install_folder_name
            if path.is_dir():
                logger.info(f"Found {game_settings.name} in the Xbox games folder {games_folder}")
                return path

        return None
