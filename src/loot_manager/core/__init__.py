"""Core business logic module.

This module contains game discovery and the session state.

Submodules:
    drives: Drive root enumeration (logical drives or the mount table)
    xbox: Parser for the .GamingRoot files that locate Xbox games folders
    registry: Registry string lookups in the 32-bit and 64-bit views
    filenames: Case-insensitive filename comparison matching the filesystem
    game_locator: GameLocator interface and the default implementation
    games_manager: Installed and current game tracking
    change_counter: Thread-safe count of unapplied UI changes
    engine: Interface to the external load order sorting engine
    state: LootState, which sequences startup and guards shared state
"""

from .change_counter import UnappliedChangeCounter
from .filenames import compare_filenames
from .game import Game
from .game_locator import DefaultGameLocator, GameLocator
from .games_manager import GameNotInstalledError, GamesManager, NoCurrentGameError
from .state import LootState, StateInitError
from .xbox import XboxManifestError, find_xbox_gaming_root_path

__all__ = [
    "UnappliedChangeCounter",
    "compare_filenames",
    "Game",
    "DefaultGameLocator",
    "GameLocator",
    "GameNotInstalledError",
    "GamesManager",
    "NoCurrentGameError",
    "LootState",
    "StateInitError",
    "XboxManifestError",
    "find_xbox_gaming_root_path",
]
