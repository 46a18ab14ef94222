"""Built-in settings for the games LOOT supports"""

from .schema import GameSettings, RegistryKey

_BETHESDA_KEY = r"Software\Bethesda Softworks"
_STEAM_UNINSTALL_KEY = r"Software\Microsoft\Windows\CurrentVersion\Uninstall\Steam App"
_GOG_KEY = r"Software\GOG.com\Games"

DEFAULT_GAMES: tuple[GameSettings, ...] = (
    GameSettings(
        id="Morrowind",
        name="TES III: Morrowind",
        install_folder_name="Morrowind",
        master="Morrowind.esm",
        registry_keys=(
            RegistryKey("HKEY_LOCAL_MACHINE", rf"{_BETHESDA_KEY}\Morrowind", "Installed Path"),
            RegistryKey("HKEY_LOCAL_MACHINE", f"{_STEAM_UNINSTALL_KEY} 22320", "InstallLocation"),
            RegistryKey("HKEY_LOCAL_MACHINE", rf"{_GOG_KEY}\1440163901", "path"),
        ),
        local_folder="",
    ),
    GameSettings(
        id="Oblivion",
        name="TES IV: Oblivion",
        install_folder_name="Oblivion",
        master="Oblivion.esm",
        registry_keys=(
            RegistryKey("HKEY_LOCAL_MACHINE", rf"{_BETHESDA_KEY}\Oblivion", "Installed Path"),
            RegistryKey("HKEY_LOCAL_MACHINE", f"{_STEAM_UNINSTALL_KEY} 22330", "InstallLocation"),
            RegistryKey("HKEY_LOCAL_MACHINE", rf"{_GOG_KEY}\1458058109", "path"),
        ),
        local_folder="Oblivion",
    ),
    GameSettings(
        id="Skyrim",
        name="TES V: Skyrim",
        install_folder_name="Skyrim",
        master="Skyrim.esm",
        registry_keys=(
            RegistryKey("HKEY_LOCAL_MACHINE", rf"{_BETHESDA_KEY}\Skyrim", "Installed Path"),
            RegistryKey("HKEY_LOCAL_MACHINE", f"{_STEAM_UNINSTALL_KEY} 72850", "InstallLocation"),
        ),
        local_folder="Skyrim",
    ),
    GameSettings(
        id="Skyrim Special Edition",
        name="TES V: Skyrim Special Edition",
        install_folder_name="The Elder Scrolls V Skyrim Special Edition (PC)",
        master="Skyrim.esm",
        registry_keys=(
            RegistryKey("HKEY_LOCAL_MACHINE", rf"{_BETHESDA_KEY}\Skyrim Special Edition", "Installed Path"),
            RegistryKey("HKEY_LOCAL_MACHINE", f"{_STEAM_UNINSTALL_KEY} 489830", "InstallLocation"),
            RegistryKey("HKEY_LOCAL_MACHINE", rf"{_GOG_KEY}\1711230643", "path"),
        ),
        local_folder="Skyrim Special Edition",
    ),
    GameSettings(
        id="Skyrim VR",
        name="TES V: Skyrim VR",
        install_folder_name="Skyrim VR",
        master="Skyrim.esm",
        registry_keys=(
            RegistryKey("HKEY_LOCAL_MACHINE", rf"{_BETHESDA_KEY}\Skyrim VR", "Installed Path"),
            RegistryKey("HKEY_LOCAL_MACHINE", f"{_STEAM_UNINSTALL_KEY} 611670", "InstallLocation"),
        ),
        local_folder="Skyrim VR",
    ),
    GameSettings(
        id="Fallout3",
        name="Fallout 3",
        install_folder_name="Fallout 3",
        master="Fallout3.esm",
        registry_keys=(
            RegistryKey("HKEY_LOCAL_MACHINE", rf"{_BETHESDA_KEY}\Fallout3", "Installed Path"),
            RegistryKey("HKEY_LOCAL_MACHINE", f"{_STEAM_UNINSTALL_KEY} 22300", "InstallLocation"),
        ),
        local_folder="Fallout3",
    ),
    GameSettings(
        id="FalloutNV",
        name="Fallout: New Vegas",
        install_folder_name="Fallout New Vegas",
        master="FalloutNV.esm",
        registry_keys=(
            RegistryKey("HKEY_LOCAL_MACHINE", rf"{_BETHESDA_KEY}\FalloutNV", "Installed Path"),
            RegistryKey("HKEY_LOCAL_MACHINE", f"{_STEAM_UNINSTALL_KEY} 22380", "InstallLocation"),
            RegistryKey("HKEY_LOCAL_MACHINE", rf"{_GOG_KEY}\1454587428", "path"),
        ),
        local_folder="FalloutNV",
    ),
    GameSettings(
        id="Fallout4",
        name="Fallout 4",
        install_folder_name="Fallout 4 (PC)",
        master="Fallout4.esm",
        registry_keys=(
            RegistryKey("HKEY_LOCAL_MACHINE", rf"{_BETHESDA_KEY}\Fallout4", "Installed Path"),
            RegistryKey("HKEY_LOCAL_MACHINE", f"{_STEAM_UNINSTALL_KEY} 377160", "InstallLocation"),
        ),
        local_folder="Fallout4",
    ),
    GameSettings(
        id="Fallout4VR",
        name="Fallout 4 VR",
        install_folder_name="Fallout 4 VR",
        master="Fallout4.esm",
        registry_keys=(
            RegistryKey("HKEY_LOCAL_MACHINE", rf"{_BETHESDA_KEY}\Fallout 4 VR", "Installed Path"),
            RegistryKey("HKEY_LOCAL_MACHINE", f"{_STEAM_UNINSTALL_KEY} 611660", "InstallLocation"),
        ),
        local_folder="Fallout4VR",
    ),
)


def default_games() -> list[GameSettings]:
    """Get a fresh list of the built-in game settings."""
    return list(DEFAULT_GAMES)
