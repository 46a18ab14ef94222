"""Settings management - load/save XML settings"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional
from xml.dom import minidom

from .defaults import default_games
from .paths import expand_path
from .schema import AUTO_GAME, GameSettings, LootSettings, RegistryKey
from ..logging_config import get_logger

logger = get_logger("settings_manager")


class SettingsError(ValueError):
    """Raised when the settings file exists but cannot be interpreted"""
    pass


class SettingsManager:
    """Manages settings persistence.

    Handles loading and saving settings in XML format, and creating
    default settings when no usable settings file exists.

    Args:
        settings_path: Path of the XML settings file
    """

    def __init__(self, settings_path: Path):
        self.settings_path = settings_path
        self.settings: Optional[LootSettings] = None

    def exists(self) -> bool:
        return self.settings_path.is_file()

    def load(self) -> LootSettings:
        """Load settings from the XML file.

        Returns:
            LootSettings object with loaded settings

        Raises:
            FileNotFoundError: If the settings file doesn't exist
            SettingsError: If the file is malformed
        """
        logger.debug(f"Loading settings from {self.settings_path}")
        try:
            tree = ET.parse(self.settings_path)
        except ET.ParseError as e:
            raise SettingsError(f"The settings file at \"{self.settings_path}\" is not valid XML: {e}") from e

        root = tree.getroot()
        if root.tag != "LOOT":
            raise SettingsError(f"Unexpected root element <{root.tag}> in \"{self.settings_path}\"")

        settings_elem = root.find("Settings")
        if settings_elem is not None:
            settings = LootSettings(
                game=self._get_text(settings_elem, "Game", AUTO_GAME),
                last_game=self._get_text(settings_elem, "LastGame", ""),
                auto_sort=self._parse_bool(settings_elem, "AutoSort", False),
                enable_debug_logging=self._parse_bool(settings_elem, "EnableDebugLogging", False),
                language=self._get_text(settings_elem, "Language", "en"),
            )
        else:
            # Missing Settings element - use all defaults
            settings = LootSettings()

        games = []
        games_elem = root.find("Games")
        if games_elem is not None:
            for game_elem in games_elem.findall("Game"):
                game_id = game_elem.get("id")
                if not game_id:
                    # Skip entries that can't be identified
                    logger.warning("Skipping game entry with no id")
                    continue
                games.append(self._parse_game(game_elem, game_id))

        settings.games = games or default_games()

        self.settings = settings
        logger.debug(f"Settings loaded: {len(settings.games)} games")
        return self.settings

    def save(self) -> None:
        """Save current settings to the XML file.

        Creates the settings file's directory if it doesn't exist.
        """
        if self.settings is None:
            raise ValueError("No settings to save")

        logger.debug(f"Saving settings to {self.settings_path}")
        self.settings_path.parent.mkdir(parents=True, exist_ok=True)

        root = ET.Element("LOOT", version="1.0")

        settings_elem = ET.SubElement(root, "Settings")
        ET.SubElement(settings_elem, "Game").text = self.settings.game
        ET.SubElement(settings_elem, "LastGame").text = self.settings.last_game
        ET.SubElement(settings_elem, "AutoSort").text = str(self.settings.auto_sort).lower()
        ET.SubElement(settings_elem, "EnableDebugLogging").text = str(self.settings.enable_debug_logging).lower()
        ET.SubElement(settings_elem, "Language").text = self.settings.language

        games_elem = ET.SubElement(root, "Games")
        for game in self.settings.games:
            game_elem = ET.SubElement(games_elem, "Game", id=game.id)
            ET.SubElement(game_elem, "Name").text = game.name
            ET.SubElement(game_elem, "InstallFolderName").text = game.install_folder_name
            ET.SubElement(game_elem, "Master").text = game.master
            ET.SubElement(game_elem, "LocalFolder").text = game.local_folder
            ET.SubElement(game_elem, "InstallPath").text = str(game.install_path) if game.install_path else ""
            ET.SubElement(game_elem, "LocalPath").text = str(game.local_path) if game.local_path else ""

            keys_elem = ET.SubElement(game_elem, "RegistryKeys")
            for key in game.registry_keys:
                ET.SubElement(
                    keys_elem,
                    "RegistryKey",
                    root=key.root_key,
                    subkey=key.subkey,
                    value=key.value_name,
                )

        # Write pretty-printed XML
        xml_str = minidom.parseString(ET.tostring(root, encoding="unicode")).toprettyxml(indent="  ")
        # Remove extra blank lines that minidom adds
        lines = [line for line in xml_str.split('\n') if line.strip()]
        xml_str = '\n'.join(lines)

        self.settings_path.write_text(xml_str, encoding="utf-8")

    def create_default(self) -> LootSettings:
        """Create default settings listing the built-in games.

        Returns:
            New LootSettings with default values
        """
        self.settings = LootSettings(games=default_games())
        return self.settings

    def _parse_game(self, game_elem: ET.Element, game_id: str) -> GameSettings:
        registry_keys = []
        keys_elem = game_elem.find("RegistryKeys")
        if keys_elem is not None:
            for key_elem in keys_elem.findall("RegistryKey"):
                root_key = key_elem.get("root")
                subkey = key_elem.get("subkey")
                value_name = key_elem.get("value")
                if not root_key or subkey is None or value_name is None:
                    raise SettingsError(f"Incomplete registry key for game \"{game_id}\"")
                registry_keys.append(RegistryKey(root_key, subkey, value_name))

        return GameSettings(
            id=game_id,
            name=self._get_text(game_elem, "Name", game_id),
            install_folder_name=self._get_text(game_elem, "InstallFolderName", game_id),
            master=self._get_text(game_elem, "Master", ""),
            registry_keys=tuple(registry_keys),
            local_folder=self._get_text(game_elem, "LocalFolder", ""),
            install_path=self._parse_path(game_elem, "InstallPath"),
            local_path=self._parse_path(game_elem, "LocalPath"),
        )

    # Helper methods for XML parsing
    @staticmethod
    def _get_text(parent: ET.Element, tag: str, default: str = "") -> str:
        """Get text content of a child element."""
        elem = parent.find(tag)
        return elem.text if elem is not None and elem.text else default

    @staticmethod
    def _parse_bool(parent: ET.Element, tag: str, default: bool = False) -> bool:
        """Parse a boolean value from child element."""
        elem = parent.find(tag)
        if elem is not None and elem.text:
            return elem.text.lower() == "true"
        return default

    @staticmethod
    def _parse_path(parent: ET.Element, tag: str) -> Optional[Path]:
        """Parse a path value from child element."""
        elem = parent.find(tag)
        if elem is not None and elem.text and elem.text.strip():
            return expand_path(elem.text.strip())
        return None
