"""Configuration management module.

This module provides settings storage, data paths and data models.

Submodules:
    manager: SettingsManager for loading/saving the XML settings file
    schema: Data classes describing games and settings (GameSettings, etc.)
    paths: LootPaths for the application and data directories
    defaults: Built-in settings for every supported game

The settings are stored as XML in <local app data>/LOOT/settings.xml.
"""

from .manager import SettingsError, SettingsManager
from .paths import LootPaths
from .schema import GamePaths, GameSettings, LootSettings, RegistryKey

__all__ = [
    "SettingsError",
    "SettingsManager",
    "LootPaths",
    "GamePaths",
    "GameSettings",
    "LootSettings",
    "RegistryKey",
]
