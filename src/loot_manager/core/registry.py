"""Read game install paths from the Windows Registry"""

import sys
from typing import Optional

from ..config.schema import RegistryKey
from ..logging_config import get_logger

if sys.platform == "win32":
    import winreg
else:
    winreg = None

logger = get_logger("registry")

ROOT_KEY_NAMES = (
    "HKEY_CLASSES_ROOT",
    "HKEY_CURRENT_CONFIG",
    "HKEY_CURRENT_USER",
    "HKEY_LOCAL_MACHINE",
    "HKEY_USERS",
)


class RegistryError(OSError):
    """Raised when a registry value exists but can't be read as a string"""
    pass


def is_registry_available() -> bool:
    return winreg is not None


def get_registry_root_key(root_key: str) -> int:
    """Get the predefined handle for a root key name.

    Args:
        root_key: One of ROOT_KEY_NAMES

    Returns:
        The winreg HKEY_* constant

    Raises:
        ValueError: If the name isn't a supported root key
        OSError: If the registry isn't available on this platform
    """
    if root_key not in ROOT_KEY_NAMES:
        raise ValueError(f"Invalid registry key given: {root_key}")
    if winreg is None:
        raise OSError("The Windows Registry is not available on this platform")
    return getattr(winreg, root_key)


def reg_key_string_value(root_key: str, subkey: str, value_name: str) -> Optional[str]:
    """Read a string value, trying the 32-bit registry view then the 64-bit view.

    Args:
        root_key: Root key name, e.g. HKEY_LOCAL_MACHINE
        subkey: Path of the subkey below the root key
        value_name: Name of the value to read

    Returns:
        The string value, or None if it doesn't exist in either view

    Raises:
        ValueError: If the root key name is invalid
        RegistryError: If the value exists but couldn't be read as a string
    """
    hkey = get_registry_root_key(root_key)

    logger.debug(f"Getting string for registry key, subkey and value: {root_key}, {subkey}, {value_name}")

    views = (("32-bit", winreg.KEY_WOW64_32KEY), ("64-bit", winreg.KEY_WOW64_64KEY))
    for view_name, view_flag in views:
        try:
            with winreg.OpenKey(hkey, subkey, 0, winreg.KEY_READ | view_flag) as key:
                value, value_type = winreg.QueryValueEx(key, value_name)
        except FileNotFoundError:
            logger.info(f"Failed to get string value from {view_name} Registry view")
            continue
        except OSError as e:
            raise RegistryError(f"Failed to read the Registry value {root_key}\\{subkey}\\{value_name}: {e}") from e

        if value_type not in (winreg.REG_SZ, winreg.REG_EXPAND_SZ) or not isinstance(value, str):
            raise RegistryError(
                f"The Registry value {root_key}\\{subkey}\\{value_name} is not a string (type {value_type})"
            )

        if value_type == winreg.REG_EXPAND_SZ:
            value = winreg.ExpandEnvironmentStrings(value)

        logger.info(f"Found string: {value}")
        return value

    logger.info("Failed to get string value.")
    return None


def get_registry_sub_keys(root_key: str, subkey: str) -> list[str]:
    """Get the names of the subkeys directly below a key.

    A key that can't be opened gives an empty list, since it usually just
    doesn't exist.

    Args:
        root_key: Root key name, e.g. HKEY_LOCAL_MACHINE
        subkey: Path of the key below the root key

    Returns:
        The subkey names, in the order the Registry lists them

    Raises:
        ValueError: If the root key name is invalid
        RegistryError: If the key was opened but its subkeys couldn't be listed
    """
    hkey = get_registry_root_key(root_key)

    logger.debug(f"Getting subkey names for registry key and subkey: {root_key}, {subkey}")

    try:
        key = winreg.OpenKey(hkey, subkey, 0, winreg.KEY_ENUMERATE_SUB_KEYS)
    except OSError as e:
        logger.warning(f"Failed to open the Registry key \"{root_key}\\{subkey}\": {e}")
        return []

    with key:
        try:
            sub_key_count = winreg.QueryInfoKey(key)[0]
            return [winreg.EnumKey(key, index) for index in range(sub_key_count)]
        except OSError as e:
            raise RegistryError(f"Failed to list the subkeys of {root_key}\\{subkey}: {e}") from e


def read_registry_key(key: RegistryKey) -> Optional[str]:
    """Read the string value a RegistryKey descriptor points to."""
    return reg_key_string_value(key.root_key, key.subkey, key.value_name)
