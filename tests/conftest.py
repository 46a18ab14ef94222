from __future__ import annotations

import os
import re
from pathlib import Path

import pytest

from loot_manager.config.paths import LootPaths
from loot_manager.core import registry
from loot_manager.core.drives import DriveRootEnumerator
from loot_manager.core.game import Game

GAMING_ROOT_HEADER = bytes([0x52, 0x47, 0x42, 0x58, 0x01, 0x00, 0x00, 0x00])


def make_gaming_root(relative_path: str, terminator: bool = True) -> bytes:
    data = GAMING_ROOT_HEADER + relative_path.encode("utf-16-le")
    if terminator:
        data += b"\x00\x00"
    return data


class FakeDriveEnumerator(DriveRootEnumerator):
    def __init__(self, roots: list[Path] | None = None, error: Exception | None = None) -> None:
        self.roots = roots or []
        self.error = error

    def list_roots(self) -> list[Path]:
        if self.error is not None:
            raise self.error
        return list(self.roots)


class RecordingEngine:
    def __init__(self, error: Exception | None = None) -> None:
        self.loaded: list[str] = []
        self.error = error

    def load_game(self, game: Game) -> None:
        if self.error is not None:
            raise self.error
        self.loaded.append(game.id)


class _FakeKey:
    def __init__(self, view: int, subkey: str) -> None:
        self.view = view
        self.subkey = subkey

    def __enter__(self) -> "_FakeKey":
        return self

    def __exit__(self, *exc_info) -> None:
        return None


class FakeWinreg:
    """Stands in for the winreg module with an in-memory registry."""

    HKEY_CLASSES_ROOT = 0x80000000
    HKEY_CURRENT_USER = 0x80000001
    HKEY_LOCAL_MACHINE = 0x80000002
    HKEY_USERS = 0x80000003
    HKEY_CURRENT_CONFIG = 0x80000005
    KEY_READ = 0x20019
    KEY_ENUMERATE_SUB_KEYS = 0x0008
    KEY_WOW64_64KEY = 0x0100
    KEY_WOW64_32KEY = 0x0200
    REG_SZ = 1
    REG_EXPAND_SZ = 2
    REG_DWORD = 4

    def __init__(self) -> None:
        # (view flag, subkey) -> {value name: (value, type)}
        self.keys: dict[tuple[int, str], dict[str, tuple[object, int]]] = {}
        self.sub_keys: dict[str, list[str]] = {}
        self.open_errors: dict[tuple[int, str], OSError] = {}
        self.enum_errors: dict[str, OSError] = {}
        self.opened: list[tuple[int, str]] = []

    def add_string(self, view: int, subkey: str, value_name: str, value: object, value_type: int | None = None) -> None:
        self.keys.setdefault((view, subkey), {})[value_name] = (
            value,
            self.REG_SZ if value_type is None else value_type,
        )

    def OpenKey(self, hkey: int, subkey: str, reserved: int, access: int) -> _FakeKey:
        view = access & (self.KEY_WOW64_32KEY | self.KEY_WOW64_64KEY)
        self.opened.append((view, subkey))
        if (view, subkey) in self.open_errors:
            raise self.open_errors[(view, subkey)]
        if (view, subkey) not in self.keys and subkey not in self.sub_keys:
            raise FileNotFoundError(2, "The system cannot find the file specified")
        return _FakeKey(view, subkey)

    def QueryValueEx(self, key: _FakeKey, value_name: str) -> tuple[object, int]:
        values = self.keys.get((key.view, key.subkey), {})
        if value_name not in values:
            raise FileNotFoundError(2, "The system cannot find the file specified")
        return values[value_name]

    def QueryInfoKey(self, key: _FakeKey) -> tuple[int, int, int]:
        if key.subkey in self.enum_errors:
            raise self.enum_errors[key.subkey]
        return len(self.sub_keys.get(key.subkey, [])), 0, 0

    def EnumKey(self, key: _FakeKey, index: int) -> str:
        return self.sub_keys[key.subkey][index]

    @staticmethod
    def ExpandEnvironmentStrings(value: str) -> str:
        return re.sub(r"%([^%]+)%", lambda m: os.environ.get(m.group(1), m.group(0)), value)


@pytest.fixture
def fake_winreg(monkeypatch: pytest.MonkeyPatch) -> FakeWinreg:
    fake = FakeWinreg()
    monkeypatch.setattr(registry, "winreg", fake)
    return fake


@pytest.fixture
def no_registry(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(registry, "winreg", None)


@pytest.fixture
def loot_paths(tmp_path: Path) -> LootPaths:
    return LootPaths(tmp_path / "app", tmp_path / "data" / "LOOT")
