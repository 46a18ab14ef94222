"""Track which games are installed and which one is active"""

from typing import Optional

from ..config.paths import LootPaths
from ..config.schema import GameSettings
from ..logging_config import get_logger
from .filenames import filenames_equal
from .game import Game
from .game_locator import GameLocator
from .registry import RegistryError

logger = get_logger("games_manager")


class GameNotInstalledError(LookupError):
    """Raised when selecting a game that wasn't found installed"""
    pass


class NoCurrentGameError(LookupError):
    """Raised when asking for the current game before one is set"""
    pass


class GamesManager:
    """Holds the installed games, in settings order, and the current game.

    Game ids are matched case-insensitively, the same way the filesystem
    matches the names of the game folders in LOOT's data directory.

    This class does no locking of its own; LootState guards it.

    Args:
        locator: Used to find each game's paths
        paths: LOOT's paths, giving each game's data folder
    """

    def __init__(self, locator: GameLocator, paths: LootPaths):
        self.locator = locator
        self.paths = paths
        self._installed_games: list[Game] = []
        self._current_game: Optional[Game] = None

    def detect_installed_games(
        self, game_settings: list[GameSettings]
    ) -> tuple[list[Game], list[tuple[GameSettings, Exception]]]:
        """Look for each game without changing the manager's state.

        A game that can't be checked is reported as a failure and treated as
        not installed, so one bad Registry entry doesn't hide other games.

        Args:
            game_settings: Settings of the games to look for

        Returns:
            The installed games, and the games that couldn't be checked
            paired with their errors
        """
        installed = []
        failures = []
        for settings in game_settings:
            try:
                paths = self.locator.find_game_paths(settings)
            except (RegistryError, OSError, ValueError) as e:
                logger.error(f"Failed to check if {settings.name} is installed: {e}")
                failures.append((settings, e))
                continue

            if paths is not None:
                logger.info(f"Found {settings.name} installed at {paths.install_path}")
                installed.append(Game(settings, paths, self.paths.game_data_path(settings.id)))

        return installed, failures

    def set_installed_games(self, games: list[Game]) -> None:
        """Replace the installed games.

        The current game is kept if it's still installed, matched by id.
        """
        self._installed_games = list(games)

        if self._current_game is not None:
            current_id = self._current_game.id
            self._current_game = self._find_game(current_id)
            if self._current_game is None:
                logger.info(f"The current game {current_id} is no longer installed")

    def get_installed_game_ids(self) -> list[str]:
        return [game.id for game in self._installed_games]

    def is_game_installed(self, game_id: str) -> bool:
        return self._find_game(game_id) is not None

    def get_first_installed_game_id(self) -> Optional[str]:
        if not self._installed_games:
            return None
        return self._installed_games[0].id

    def has_current_game(self) -> bool:
        return self._current_game is not None

    def get_current_game(self) -> Game:
        """Get the active game.

        Raises:
            NoCurrentGameError: If no game is active
        """
        if self._current_game is None:
            raise NoCurrentGameError("No game has been selected")
        return self._current_game

    def set_current_game(self, game_id: str) -> Game:
        """Make an installed game the active one.

        Args:
            game_id: Id of the game, matched case-insensitively

        Returns:
            The newly active game

        Raises:
            GameNotInstalledError: If no installed game has that id
        """
        game = self._find_game(game_id)
        if game is None:
            raise GameNotInstalledError(f"The game \"{game_id}\" is not installed")

        logger.info(f"Setting the current game to {game.name}")
        self._current_game = game
        return game

    def clear_current_game(self) -> None:
        self._current_game = None

    def _find_game(self, game_id: str) -> Optional[Game]:
        for game in self._installed_games:
            if filenames_equal(game.id, game_id):
                return game
        return None
