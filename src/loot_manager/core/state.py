"""Session state shared between the UI and the startup thread.

LootState owns the settings, the installed and current games, the Xbox games
folders found on this machine and the messages collected during startup.
Startup (init) runs on a background thread while the UI thread calls the
getters. The mutex is only held while fields are read or written, never
during file, Registry or load order engine access, so the getters stay
responsive during a long startup.
"""

import dataclasses
import threading
from pathlib import Path
from typing import Optional

from ..config.manager import SettingsError, SettingsManager
from ..config.paths import LootPaths
from ..config.schema import GameSettings, LootSettings
from ..logging_config import get_logger
from .change_counter import UnappliedChangeCounter
from .drives import DriveRootEnumerator, get_drive_enumerator
from .engine import LoadOrderEngine, NullLoadOrderEngine
from .filenames import filenames_equal
from .game import Game
from .game_locator import DefaultGameLocator, GameLocator
from .games_manager import GamesManager
from .messages import MessageType, SimpleMessage
from .xbox import XboxManifestEntry, XboxManifestError, find_xbox_gaming_root_path

logger = get_logger("state")


class StateInitError(RuntimeError):
    """Raised when startup can't continue"""
    pass


class LootState:
    """The state of a LOOT session.

    Create one per process and pass it to whatever needs it.

    Args:
        paths: LOOT's application and data paths
        engine: Load order engine, defaults to one that does nothing
        drive_enumerator: Lists drive roots, defaults to the platform's
        locator: Finds games, defaults to a DefaultGameLocator
    """

    def __init__(
        self,
        paths: LootPaths,
        engine: Optional[LoadOrderEngine] = None,
        drive_enumerator: Optional[DriveRootEnumerator] = None,
        locator: Optional[GameLocator] = None,
    ):
        self.paths = paths
        self.unapplied_changes = UnappliedChangeCounter()

        self._settings_manager = SettingsManager(paths.settings_path)
        self._drive_enumerator = drive_enumerator or get_drive_enumerator()
        self._locator = locator or DefaultGameLocator(
            engine or NullLoadOrderEngine(),
            self.get_xbox_gaming_root_paths,
        )
        self._games = GamesManager(self._locator, paths)

        self._mutex = threading.Lock()
        self._settings = LootSettings()
        self._auto_sort = False
        self._game_path_overrides: dict[str, Path] = {}
        self._xbox_gaming_roots: list[XboxManifestEntry] = []
        self._init_messages: list[SimpleMessage] = []
        self._initialized = False

    # Startup

    def init(self, cmd_line_game: str = "", cmd_line_game_path: Optional[Path] = None,
             auto_sort: bool = False) -> None:
        """Run startup: load settings, find games and select the initial game.

        Must not be called concurrently with itself.

        Args:
            cmd_line_game: Id of the game to start with, if any
            cmd_line_game_path: Install path to use for cmd_line_game
            auto_sort: Sort the load order once the game is loaded

        Raises:
            StateInitError: If a directory LOOT needs can't be created, or
                the drives can't be listed
        """
        logger.info("Initialising LOOT")

        self._create_loot_data_path()
        self._load_settings(auto_sort)
        self._find_xbox_gaming_root_paths()
        self._create_prelude_directory()

        if cmd_line_game_path is not None:
            self._override_game_path(cmd_line_game, cmd_line_game_path)

        messages = self._set_initial_game(cmd_line_game)
        with self._mutex:
            self._init_messages.extend(messages)

        if self.has_current_game():
            self.init_current_game()

        with self._mutex:
            self._initialized = True
            message_count = len(self._init_messages)

        logger.info(f"Initialisation complete with {message_count} message(s)")

    def init_current_game(self) -> None:
        """Have the load order engine load the current game's data.

        Failures are recorded as init messages. Does nothing if there is no
        current game.
        """
        with self._mutex:
            if not self._games.has_current_game():
                return
            game = self._games.get_current_game()

        logger.info(f"Initialising game data for {game.name}")
        try:
            self._locator.initialise_game_data(game)
        except Exception as e:
            logger.exception(f"Failed to initialise game data for {game.name}")
            self._add_init_message(MessageType.ERROR, f"Failed to load the data for {game.name}: {e}")
            return

        with self._mutex:
            game.loaded = True

    def _create_loot_data_path(self) -> None:
        data_path = self.paths.data_path
        if data_path.is_dir():
            return

        logger.info(f"Creating LOOT data directory at {data_path}")
        try:
            data_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Failed to create the LOOT data directory: {e}")
            raise StateInitError(f"Could not create LOOT data directory at \"{data_path}\": {e}") from e

    def _load_settings(self, auto_sort: bool) -> None:
        messages = []
        manager = self._settings_manager

        if not manager.exists():
            logger.info(f"No settings file found at {manager.settings_path}, using default settings")
            settings = manager.create_default()
        else:
            try:
                settings = manager.load()
            except (SettingsError, OSError) as e:
                logger.error(f"Failed to load settings, using defaults instead: {e}")
                messages.append(SimpleMessage(
                    MessageType.ERROR,
                    f"Your settings file could not be loaded and default settings are being used instead: {e}",
                ))
                settings = manager.create_default()

        with self._mutex:
            self._settings = settings
            self._auto_sort = auto_sort or settings.auto_sort
            self._init_messages.extend(messages)

    def _find_xbox_gaming_root_paths(self) -> None:
        messages = []
        roots = []

        try:
            drive_roots = self._drive_enumerator.list_roots()
        except RuntimeError as e:
            logger.error(f"Failed to list drive root paths: {e}")
            messages.append(SimpleMessage(
                MessageType.WARN,
                f"Could not look for games installed using the Xbox app: {e}",
            ))
            drive_roots = []
        except OSError as e:
            logger.error(f"Failed to list drive root paths: {e}")
            raise StateInitError(f"Could not list the drives on this computer: {e}") from e

        for drive_root in drive_roots:
            try:
                games_folder = find_xbox_gaming_root_path(drive_root)
            except (XboxManifestError, OSError) as e:
                messages.append(SimpleMessage(
                    MessageType.WARN,
                    f"Skipping the drive at \"{drive_root}\" when looking for Xbox games: {e}",
                ))
                continue

            if games_folder is not None:
                logger.info(f"Found Xbox gaming root at {games_folder}")
                roots.append(XboxManifestEntry(drive_root, games_folder))

        with self._mutex:
            self._xbox_gaming_roots = roots
            self._init_messages.extend(messages)

    def _create_prelude_directory(self) -> None:
        prelude_path = self.paths.prelude_path
        try:
            prelude_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Failed to create the prelude directory: {e}")
            raise StateInitError(f"Could not create the prelude directory at \"{prelude_path}\": {e}") from e

    def _override_game_path(self, game_id: str, game_path: Path) -> None:
        """Use a different install path for a game, for this session only."""
        with self._mutex:
            game_settings = self._find_game_settings(game_id) if game_id else None
            if game_settings is None:
                logger.error(f"Cannot override the install path of unrecognised game \"{game_id}\"")
                self._init_messages.append(SimpleMessage(
                    MessageType.ERROR,
                    f"The game path \"{game_path}\" was given for an unrecognised game \"{game_id}\" and was ignored.",
                ))
                return

            logger.info(f"Overriding the install path of {game_settings.name} with {game_path}")
            self._game_path_overrides[game_settings.id] = game_path

    def _set_initial_game(self, requested_game: str, keep_current: bool = False) -> list[SimpleMessage]:
        """Detect the installed games and select the current one.

        With keep_current, a current game that is still installed stays
        selected.

        Returns:
            Messages about games that couldn't be checked or selected
        """
        messages = []
        with self._mutex:
            game_settings = self._session_game_settings()
            preferred_game = self._settings.preferred_game()

        installed, failures = self._games.detect_installed_games(game_settings)

        for settings, error in failures:
            messages.append(SimpleMessage(
                MessageType.WARN,
                f"Could not check if {settings.name} is installed: {error}",
            ))

        with self._mutex:
            self._games.set_installed_games(installed)
            if keep_current and self._games.has_current_game():
                return messages

            game_id = self._select_initial_game(requested_game, preferred_game, messages)
            if game_id is None:
                self._games.clear_current_game()
                logger.warning("None of the supported games were detected")
                messages.append(SimpleMessage(
                    MessageType.ERROR,
                    "None of the supported games were detected.",
                ))
                return messages

            game = self._games.set_current_game(game_id)
            self._settings.last_game = game.id

        return messages

    def _select_initial_game(self, requested_game: str, preferred_game: str,
                             messages: list[SimpleMessage]) -> Optional[str]:
        """Choose the first game to activate. Must hold the mutex."""
        if requested_game:
            if self._games.is_game_installed(requested_game):
                return requested_game

            logger.warning(f"The requested game \"{requested_game}\" is not installed")
            messages.append(SimpleMessage(
                MessageType.WARN,
                f"The game \"{requested_game}\" was requested but is not installed.",
            ))

        if preferred_game and self._games.is_game_installed(preferred_game):
            return preferred_game

        return self._games.get_first_installed_game_id()

    def _session_game_settings(self) -> list[GameSettings]:
        """Get the game settings with session overrides applied. Must hold the mutex."""
        games = []
        for game in self._settings.games:
            override = self._game_path_overrides.get(game.id)
            if override is not None:
                game = dataclasses.replace(game, install_path=override)
            games.append(game)
        return games

    def _find_game_settings(self, game_id: str) -> Optional[GameSettings]:
        for game in self._settings.games:
            if filenames_equal(game.id, game_id):
                return game
        return None

    def _add_init_message(self, message_type: MessageType, text: str) -> None:
        with self._mutex:
            self._init_messages.append(SimpleMessage(message_type, text))

    # After startup

    def change_game(self, game_id: str) -> None:
        """Make another installed game the current game and load its data.

        Raises:
            GameNotInstalledError: If the game isn't installed
        """
        with self._mutex:
            game = self._games.set_current_game(game_id)
            self._settings.last_game = game.id

        self.init_current_game()

    def update_settings(self, settings: LootSettings) -> list[SimpleMessage]:
        """Replace the settings and look for installed games again.

        The current game stays active if it is still installed. Messages
        from looking for the games are returned, not added to the init
        messages.

        Returns:
            Messages about games that couldn't be checked or selected
        """
        with self._mutex:
            self._settings = settings

        return self._set_initial_game("", keep_current=True)

    def store_settings(self) -> None:
        """Write the current settings to the settings file.

        Session overrides of game paths are not saved.
        """
        settings = self.get_settings()
        self._settings_manager.settings = settings
        self._settings_manager.save()

    # Getters

    def get_settings(self) -> LootSettings:
        """Get a copy of the current settings."""
        with self._mutex:
            return dataclasses.replace(self._settings, games=list(self._settings.games))

    def get_init_messages(self) -> list[SimpleMessage]:
        with self._mutex:
            return list(self._init_messages)

    def get_xbox_gaming_root_paths(self) -> list[Path]:
        with self._mutex:
            return [entry.games_folder for entry in self._xbox_gaming_roots]

    def get_installed_game_ids(self) -> list[str]:
        with self._mutex:
            return self._games.get_installed_game_ids()

    def has_current_game(self) -> bool:
        with self._mutex:
            return self._games.has_current_game()

    def get_current_game(self) -> Game:
        """Get the active game.

        Raises:
            NoCurrentGameError: If no game is active
        """
        with self._mutex:
            return self._games.get_current_game()

    def should_auto_sort(self) -> bool:
        with self._mutex:
            return self._auto_sort

    def is_initialized(self) -> bool:
        with self._mutex:
            return self._initialized
