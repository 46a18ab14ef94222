"""Configuration data models"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

# Value of LootSettings.game that means "use whichever game was last active"
AUTO_GAME = "auto"


@dataclass(frozen=True)
class RegistryKey:
    """Location of a registry string value that holds a game's install path"""
    root_key: str  # e.g. HKEY_LOCAL_MACHINE
    subkey: str
    value_name: str

    def __str__(self) -> str:
        return f"{self.root_key}\\{self.subkey}\\{self.value_name}"


@dataclass(frozen=True)
class GameSettings:
    """Settings for one supported game.

    Instances are never modified in place: a reload or a command-line
    override replaces the whole record.
    """
    id: str  # Also the name of the game's folder in the LOOT data directory
    name: str
    install_folder_name: str
    master: str = ""
    registry_keys: tuple[RegistryKey, ...] = ()
    local_folder: str = ""
    install_path: Optional[Path] = None
    local_path: Optional[Path] = None


@dataclass(frozen=True)
class GamePaths:
    """Resolved locations of an installed game"""
    install_path: Path
    local_path: Optional[Path] = None


@dataclass
class LootSettings:
    """Application settings"""
    game: str = AUTO_GAME
    last_game: str = ""
    auto_sort: bool = False
    enable_debug_logging: bool = False
    language: str = "en"
    games: list[GameSettings] = field(default_factory=list)

    def preferred_game(self) -> str:
        """The game to start with when none is requested explicitly."""
        if self.game == AUTO_GAME:
            return self.last_game
        return self.game
