"""Enumerate the root paths of mounted drives and volumes"""

import re
import sys
from abc import ABC, abstractmethod
from pathlib import Path

from ..logging_config import get_logger

logger = get_logger("drives")

MOUNTS_FILE = Path("/proc/self/mounts")

# Longer than any real mount line. glibc's getmntent uses 4 KiB, .NET uses 8 KiB.
MOUNT_LINE_BUFFER_SIZE = 8192

_OCTAL_ESCAPE = re.compile(r"\\([0-7]{3})")


def split_drive_strings(buffer: str, length: int) -> list[Path]:
    """Split a GetLogicalDriveStringsW buffer into drive root paths.

    Args:
        buffer: Null-separated drive strings, possibly with unused space
        length: Number of characters the call wrote, excluding the final null
    """
    # Trim any unused buffer characters.
    drive_strings = buffer[:length]

    return [Path(drive) for drive in drive_strings.split("\0") if drive]


class DriveRootEnumerator(ABC):
    """Lists the root paths of all drives visible to this process."""

    @abstractmethod
    def list_roots(self) -> list[Path]:
        """Get the drive root paths, in no particular order."""


class WindowsDriveEnumerator(DriveRootEnumerator):
    """Lists logical drive roots (C:\\, D:\\, ...) using GetLogicalDriveStringsW."""

    def list_roots(self) -> list[Path]:
        """Get the logical drive root paths.

        Raises:
            OSError: If the size of the drive strings buffer can't be obtained
        """
        import ctypes
        from ctypes import wintypes

        kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)
        get_drive_strings = kernel32.GetLogicalDriveStringsW
        get_drive_strings.argtypes = [wintypes.DWORD, wintypes.LPWSTR]
        get_drive_strings.restype = wintypes.DWORD

        max_buffer_length = get_drive_strings(0, None)
        if max_buffer_length == 0:
            error_code = ctypes.get_last_error()
            raise ctypes.WinError(
                error_code,
                "Failed to get the length of the buffer needed to hold all drive root paths",
            )

        # Add space for the terminating null character.
        buffer = ctypes.create_unicode_buffer(max_buffer_length + 1)
        strings_length = get_drive_strings(len(buffer), buffer)

        return split_drive_strings(buffer[:], strings_length)


class MountTableEnumerator(DriveRootEnumerator):
    """Lists mount points by reading the process's live mount table.

    Args:
        mounts_path: Mount table to read, /proc/self/mounts by default
    """

    def __init__(self, mounts_path: Path = MOUNTS_FILE):
        self.mounts_path = mounts_path

    def list_roots(self) -> list[Path]:
        """Get the mount directory of every mount table entry.

        Raises:
            RuntimeError: If the mount table can't be opened
        """
        try:
            mounts_file = open(
                self.mounts_path,
                "r",
                encoding=sys.getfilesystemencoding(),
                errors="surrogateescape",
            )
        except OSError as e:
            raise RuntimeError(f"Failed to open {self.mounts_path}") from e

        paths = []
        with mounts_file:
            while True:
                line = mounts_file.readline(MOUNT_LINE_BUFFER_SIZE)
                if not line:
                    break

                if not line.endswith("\n") and len(line) == MOUNT_LINE_BUFFER_SIZE:
                    logger.warning(f"Skipping a mount table entry longer than {MOUNT_LINE_BUFFER_SIZE} characters")
                    self._skip_rest_of_line(mounts_file)
                    continue

                mount_dir = self._parse_mount_dir(line)
                if mount_dir is not None:
                    paths.append(Path(mount_dir))

        return paths

    @staticmethod
    def _skip_rest_of_line(mounts_file) -> None:
        while True:
            chunk = mounts_file.readline(MOUNT_LINE_BUFFER_SIZE)
            if not chunk or chunk.endswith("\n"):
                return

    @staticmethod
    def _parse_mount_dir(line: str):
        """Get the unescaped mount directory field of a mount table line."""
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            return None

        fields = stripped.split()
        if len(fields) < 2:
            logger.debug(f"Ignoring malformed mount table line: {stripped}")
            return None

        # Spaces, tabs, newlines and backslashes are written as octal escapes
        return _OCTAL_ESCAPE.sub(lambda m: chr(int(m.group(1), 8)), fields[1])


def get_drive_enumerator() -> DriveRootEnumerator:
    """Get the drive enumerator for the running platform."""
    if sys.platform == "win32":
        return WindowsDriveEnumerator()
    return MountTableEnumerator()
