"""Case-insensitive filename comparison that matches the host filesystem.

Windows filesystems compare names by upper-casing each UTF-16 code unit with
the operating system's uppercase table, which CompareStringOrdinal exposes.
Elsewhere, names are compared after Unicode default case folding. Both order
names by UTF-16 code unit, and neither is locale-aware collation: the result
never depends on the user's language.
"""

import functools
import sys
from typing import Union

_CSTR_LESS_THAN = 1
_CSTR_EQUAL = 2
_CSTR_GREATER_THAN = 3

Filename = Union[str, bytes]


def _to_text(filename: Filename) -> str:
    """Get a filename as text, rejecting anything that isn't valid Unicode."""
    if isinstance(filename, bytes):
        try:
            return filename.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ValueError(f"Filename {filename!r} is not valid UTF-8") from e

    if not isinstance(filename, str):
        raise TypeError(f"Filenames must be str or bytes, not {type(filename).__name__}")

    try:
        filename.encode("utf-8")
    except UnicodeEncodeError as e:
        # Lone surrogates, e.g. from undecodable bytes
        raise ValueError(f"Filename {filename!r} is not valid Unicode") from e
    return filename


def _compare_ordinal_ignore_case(lhs: str, rhs: str) -> int:
    import ctypes
    from ctypes import wintypes

    kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)
    compare = kernel32.CompareStringOrdinal
    compare.argtypes = [wintypes.LPCWSTR, ctypes.c_int, wintypes.LPCWSTR, ctypes.c_int, wintypes.BOOL]
    compare.restype = ctypes.c_int

    # Explicit lengths in UTF-16 code units so embedded nulls are compared too
    lhs_length = len(lhs.encode("utf-16-le")) // 2
    rhs_length = len(rhs.encode("utf-16-le")) // 2

    result = compare(lhs, lhs_length, rhs, rhs_length, True)
    if result == _CSTR_LESS_THAN:
        return -1
    if result == _CSTR_EQUAL:
        return 0
    if result == _CSTR_GREATER_THAN:
        return 1
    raise ValueError("One of the filenames to compare was invalid.")


def _compare_case_folded(lhs: str, rhs: str) -> int:
    # Order by UTF-16 code unit, as on Windows, not by code point
    folded_lhs = lhs.casefold().encode("utf-16-be")
    folded_rhs = rhs.casefold().encode("utf-16-be")
    return (folded_lhs > folded_rhs) - (folded_lhs < folded_rhs)


def compare_filenames(lhs: Filename, rhs: Filename) -> int:
    """Compare two filenames the way the host filesystem matches them.

    Args:
        lhs: First filename, as text or UTF-8 bytes
        rhs: Second filename, as text or UTF-8 bytes

    Returns:
        -1, 0 or 1 as lhs sorts before, the same as or after rhs

    Raises:
        TypeError: If either filename isn't str or bytes
        ValueError: If either filename isn't valid Unicode
    """
    lhs_text = _to_text(lhs)
    rhs_text = _to_text(rhs)

    if sys.platform == "win32":
        return _compare_ordinal_ignore_case(lhs_text, rhs_text)
    return _compare_case_folded(lhs_text, rhs_text)


def filenames_equal(lhs: Filename, rhs: Filename) -> bool:
    """Check if two filenames refer to the same file on the host filesystem."""
    return compare_filenames(lhs, rhs) == 0


filename_sort_key = functools.cmp_to_key(compare_filenames)
