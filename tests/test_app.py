from __future__ import annotations

from pathlib import Path

import pytest

from conftest import FakeDriveEnumerator
from loot_manager import app as app_module
from loot_manager.app import LootApp, main, parse_args
from loot_manager.config.paths import LootPaths, get_local_app_data_path
from loot_manager.core.state import LootState


def test_parse_args_defaults() -> None:
    args = parse_args([])

    assert args.game == ""
    assert args.game_path is None
    assert not args.auto_sort
    assert not args.debug


def test_parse_args_game_override() -> None:
    args = parse_args(["--game", "Oblivion", "--game-path", "/games/Oblivion", "--auto-sort"])

    assert args.game == "Oblivion"
    assert args.game_path == Path("/games/Oblivion")
    assert args.auto_sort


def test_init_error_is_kept_for_the_ui(tmp_path: Path, no_registry: None) -> None:
    data_path = tmp_path / "LOOT"
    data_path.write_text("not a directory", encoding="utf-8")
    app = LootApp(LootPaths(tmp_path, data_path), parse_args([]))

    app._init_state()

    assert app.init_error is not None
    assert "data directory" in str(app.init_error)


def test_init_runs_with_parsed_args(tmp_path: Path, no_registry: None) -> None:
    app = LootApp(LootPaths(tmp_path, tmp_path / "LOOT"), parse_args(["--auto-sort"]))
    app.state = LootState(app.state.paths, drive_enumerator=FakeDriveEnumerator())

    app._init_state()

    assert app.init_error is None
    assert app.state.is_initialized()
    assert app.state.should_auto_sort()


@pytest.mark.skipif("sys.platform == 'win32'")
def test_data_path_prefers_xdg_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setenv("HOME", str(tmp_path / "home"))

    assert get_local_app_data_path() == tmp_path / "xdg"


@pytest.mark.skipif("sys.platform == 'win32'")
def test_data_path_falls_back_to_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))

    assert get_local_app_data_path() == tmp_path / "home" / ".config"


@pytest.mark.skipif("sys.platform == 'win32'")
def test_data_path_falls_back_to_executable_directory(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.delenv("HOME", raising=False)

    assert get_local_app_data_path().is_dir()


def test_unusable_data_path_shows_startup_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    monkeypatch.setattr(LootPaths, "default", classmethod(lambda cls: cls(tmp_path, blocker / "LOOT")))
    shown: list[BaseException] = []
    monkeypatch.setattr(app_module, "_show_startup_error", shown.append)

    with pytest.raises(SystemExit) as exc_info:
        main([])

    assert exc_info.value.code == 1
    assert len(shown) == 1
    assert isinstance(shown[0], OSError)


def test_missing_local_app_data_shows_startup_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def no_data_path(cls: type[LootPaths]) -> LootPaths:
        raise OSError("Failed to get %LOCALAPPDATA% path")

    monkeypatch.setattr(LootPaths, "default", classmethod(no_data_path))
    shown: list[BaseException] = []
    monkeypatch.setattr(app_module, "_show_startup_error", shown.append)

    with pytest.raises(SystemExit):
        main([])

    assert [str(error) for error in shown] == ["Failed to get %LOCALAPPDATA% path"]
