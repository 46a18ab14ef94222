from __future__ import annotations

import sys
from pathlib import Path

import pytest

from conftest import FakeWinreg, RecordingEngine
from loot_manager.config.paths import LootPaths
from loot_manager.config.schema import GamePaths, GameSettings, RegistryKey
from loot_manager.core.game import Game
from loot_manager.core.game_locator import DefaultGameLocator
from loot_manager.core.games_manager import GameNotInstalledError, GamesManager, NoCurrentGameError
from loot_manager.core.registry import RegistryError

SUBKEY = r"Software\Bethesda Softworks\Skyrim Special Edition"


def skyrim_settings(**changes: object) -> GameSettings:
    fields = dict(
        id="Skyrim Special Edition",
        name="TES V: Skyrim Special Edition",
        install_folder_name="The Elder Scrolls V Skyrim Special Edition (PC)",
        master="Skyrim.esm",
        registry_keys=(RegistryKey("HKEY_LOCAL_MACHINE", SUBKEY, "Installed Path"),),
        local_folder="Skyrim Special Edition",
    )
    fields.update(changes)
    return GameSettings(**fields)


def make_locator(xbox_folders: list[Path] | None = None) -> DefaultGameLocator:
    return DefaultGameLocator(RecordingEngine(), lambda: list(xbox_folders or []))


def test_override_wins_over_registry(tmp_path: Path, fake_winreg: FakeWinreg) -> None:
    override = tmp_path / "override"
    override.mkdir()
    registry_path = tmp_path / "registry"
    registry_path.mkdir()
    fake_winreg.add_string(FakeWinreg.KEY_WOW64_32KEY, SUBKEY, "Installed Path", str(registry_path))

    paths = make_locator().find_game_paths(skyrim_settings(install_path=override))

    assert paths is not None
    assert paths.install_path == override


def test_missing_override_falls_back_to_registry(tmp_path: Path, fake_winreg: FakeWinreg) -> None:
    registry_path = tmp_path / "registry"
    registry_path.mkdir()
    fake_winreg.add_string(FakeWinreg.KEY_WOW64_64KEY, SUBKEY, "Installed Path", str(registry_path))

    paths = make_locator().find_game_paths(skyrim_settings(install_path=tmp_path / "gone"))

    assert paths is not None
    assert paths.install_path == registry_path


def test_expandable_registry_path_is_found(
    tmp_path: Path, fake_winreg: FakeWinreg, monkeypatch: pytest.MonkeyPatch
) -> None:
    install_path = tmp_path / "Games" / "Skyrim"
    install_path.mkdir(parents=True)
    monkeypatch.setenv("LOOT_TEST_GAMES", str(tmp_path / "Games"))
    fake_winreg.add_string(FakeWinreg.KEY_WOW64_32KEY, SUBKEY, "Installed Path", "%LOOT_TEST_GAMES%/Skyrim",
                           FakeWinreg.REG_EXPAND_SZ)

    paths = make_locator().find_game_paths(skyrim_settings())

    assert paths is not None
    assert paths.install_path == install_path


def test_registry_path_must_exist(tmp_path: Path, fake_winreg: FakeWinreg) -> None:
    fake_winreg.add_string(FakeWinreg.KEY_WOW64_32KEY, SUBKEY, "Installed Path", str(tmp_path / "uninstalled"))

    assert make_locator().find_game_paths(skyrim_settings()) is None


def test_registry_read_failure_is_raised(fake_winreg: FakeWinreg) -> None:
    fake_winreg.open_errors[(FakeWinreg.KEY_WOW64_32KEY, SUBKEY)] = PermissionError(5, "Access is denied")

    with pytest.raises(RegistryError):
        make_locator().find_game_paths(skyrim_settings())


def test_found_in_xbox_games_folder(tmp_path: Path, no_registry: None) -> None:
    games_folder = tmp_path / "XboxGames"
    install_path = games_folder / "The Elder Scrolls V Skyrim Special Edition (PC)"
    install_path.mkdir(parents=True)

    paths = make_locator([tmp_path / "empty", games_folder]).find_game_paths(skyrim_settings())

    assert paths is not None
    assert paths.install_path == install_path


def test_not_installed_returns_none(tmp_path: Path, no_registry: None) -> None:
    assert make_locator([tmp_path]).find_game_paths(skyrim_settings()) is None


def test_local_path_override_without_install(tmp_path: Path, no_registry: None) -> None:
    locator = make_locator()
    settings = skyrim_settings(local_path=tmp_path / "local")

    assert locator.find_local_path(settings) == tmp_path / "local"
    assert locator.find_game_paths(settings) is None


@pytest.mark.skipif(sys.platform == "win32", reason="Windows derives a local path from %LOCALAPPDATA%")
def test_no_local_path_off_windows(tmp_path: Path, no_registry: None) -> None:
    install_path = tmp_path / "Skyrim"
    install_path.mkdir()

    paths = make_locator().find_game_paths(skyrim_settings(install_path=install_path))

    assert paths == GamePaths(install_path=install_path, local_path=None)


def test_initialise_game_data_creates_folder_and_loads(tmp_path: Path) -> None:
    engine = RecordingEngine()
    locator = DefaultGameLocator(engine, lambda: [])
    game = Game(skyrim_settings(), GamePaths(tmp_path / "install"), tmp_path / "LOOT" / "Skyrim Special Edition")

    locator.initialise_game_data(game)

    assert game.data_path.is_dir()
    assert engine.loaded == ["Skyrim Special Edition"]


def test_games_manager_tracks_installed_and_current_game(tmp_path: Path, no_registry: None) -> None:
    installed_path = tmp_path / "Oblivion"
    installed_path.mkdir()
    oblivion = GameSettings(id="Oblivion", name="TES IV: Oblivion", install_folder_name="Oblivion",
                            install_path=installed_path)
    manager = GamesManager(make_locator(), LootPaths(tmp_path, tmp_path / "LOOT"))

    games, failures = manager.detect_installed_games([skyrim_settings(), oblivion])
    manager.set_installed_games(games)

    assert failures == []
    assert manager.get_installed_game_ids() == ["Oblivion"]
    assert manager.is_game_installed("oblivion")
    assert not manager.has_current_game()
    with pytest.raises(NoCurrentGameError):
        manager.get_current_game()
    with pytest.raises(GameNotInstalledError):
        manager.set_current_game("Skyrim Special Edition")

    game = manager.set_current_game("OBLIVION")

    assert game.id == "Oblivion"
    assert game.data_path == tmp_path / "LOOT" / "Oblivion"
    assert manager.get_current_game() is game


def test_games_manager_reports_failures(tmp_path: Path, fake_winreg: FakeWinreg) -> None:
    fake_winreg.open_errors[(FakeWinreg.KEY_WOW64_32KEY, SUBKEY)] = PermissionError(5, "Access is denied")
    manager = GamesManager(make_locator(), LootPaths(tmp_path, tmp_path / "LOOT"))

    games, failures = manager.detect_installed_games([skyrim_settings()])

    assert games == []
    assert [settings.id for settings, _ in failures] == ["Skyrim Special Edition"]
