"""Parser for the .GamingRoot files that locate Xbox app game folders.

The Xbox app (Microsoft Store for PC games) writes a .GamingRoot file to the
root of every drive it installs games on. The file is the byte sequence
52 47 42 58 01 00 00 00 followed by the null-terminated UTF-16LE location of
the drive's games folder, relative to the drive root.
"""

import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..logging_config import get_logger

logger = get_logger("xbox")

GAMING_ROOT_FILE_NAME = ".GamingRoot"
GAMING_ROOT_HEADER = b"RGBX\x01\x00\x00\x00"

# The header is four UTF-16 code units long
PATH_OFFSET = len(GAMING_ROOT_HEADER) // 2


class XboxManifestError(ValueError):
    """Raised when a .GamingRoot file exists but its content is invalid"""
    pass


@dataclass(frozen=True)
class XboxManifestEntry:
    """A drive with an Xbox games folder on it"""
    drive_root: Path
    games_folder: Path


def parse_gaming_root(data: bytes) -> str:
    """Decode the relative games folder path from .GamingRoot content.

    Args:
        data: The full content of a .GamingRoot file

    Returns:
        The games folder path relative to the drive root

    Raises:
        XboxManifestError: If the content isn't a header plus UTF-16LE text
    """
    if len(data) % 2 != 0:
        raise XboxManifestError(
            f"Found a non-even number of bytes ({len(data)}), cannot interpret it as UTF-16LE"
        )

    code_units = struct.unpack(f"<{len(data) // 2}H", data)

    if len(code_units) < PATH_OFFSET + 1:
        raise XboxManifestError(
            f"Content is shorter than expected at {len(code_units)} UTF-16 code units long"
        )

    if data[:len(GAMING_ROOT_HEADER)] != GAMING_ROOT_HEADER:
        logger.warning(f"Unexpected .GamingRoot header {data[:len(GAMING_ROOT_HEADER)].hex(' ')}")

    path_units = code_units[PATH_OFFSET:]
    if path_units[-1] == 0:
        path_units = path_units[:-1]

    path_bytes = struct.pack(f"<{len(path_units)}H", *path_units)
    return path_bytes.decode("utf-16-le", errors="surrogatepass")


def find_xbox_gaming_root_path(drive_root: Path) -> Optional[Path]:
    """Find the Xbox games folder on a drive, if it has one.

    Args:
        drive_root: Root path of the drive to check

    Returns:
        Absolute path of the games folder, or None if the drive has no
        .GamingRoot file or it couldn't be read

    Raises:
        XboxManifestError: If the .GamingRoot file is malformed
    """
    gaming_root_file = drive_root / GAMING_ROOT_FILE_NAME

    try:
        if not gaming_root_file.is_file():
            return None
        data = gaming_root_file.read_bytes()
    except OSError as e:
        # Not propagated: the drive may just not be ready, e.g. an empty
        # removable disk drive.
        logger.error(f"Failed to read file at {gaming_root_file}: {e}")
        return None

    logger.debug(f"Read the following bytes from {gaming_root_file}: {data.hex(' ')}")

    try:
        relative_path = parse_gaming_root(data)
    except XboxManifestError as e:
        logger.error(f"Failed to parse {gaming_root_file}: {e}")
        raise XboxManifestError(f"The file at \"{gaming_root_file}\" is invalid: {e}") from e

    logger.debug(f"Read the following relative path from {gaming_root_file}: {relative_path}")

    return drive_root / relative_path
