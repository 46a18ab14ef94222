"""Interface to the load order sorting engine.

The engine that reads masterlists and sorts plugins lives outside this
package. LOOT only needs to hand it a resolved game to load.
"""

from typing import Protocol

from .game import Game
from ..logging_config import get_logger

logger = get_logger("engine")


class LoadOrderEngine(Protocol):
    """The operations LOOT needs from a load order sorting engine."""

    def load_game(self, game: Game) -> None:
        """Load a game's plugins and metadata so it can be sorted."""
        ...


class NullLoadOrderEngine:
    """Engine used when no sorting engine is available.

    Loading only logs.
    """

    def load_game(self, game: Game) -> None:
        logger.info(f"No load order engine configured, not loading data for {game.name}")
