"""An installed game"""

from dataclasses import dataclass
from pathlib import Path

from ..config.schema import GamePaths, GameSettings


@dataclass
class Game:
    """A supported game that was found installed.

    Attributes:
        settings: The game's settings for this session
        paths: Where the game is installed
        data_path: LOOT's own folder for the game's metadata
        loaded: Whether the load order engine has loaded the game's data
    """
    settings: GameSettings
    paths: GamePaths
    data_path: Path
    loaded: bool = False

    @property
    def id(self) -> str:
        return self.settings.id

    @property
    def name(self) -> str:
        return self.settings.name
