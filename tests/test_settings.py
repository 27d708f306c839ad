import json

import pytest

from mediamenu.settings import DEFAULT_SETTINGS, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("MEDIA_MENU_STATE_FILE", "MEDIA_MENU_PLAYER", "MEDIA_MENU_SETTLE_DELAY"):
        monkeypatch.delenv(name, raising=False)


def test_defaults_when_file_missing(tmp_path):
    assert load_settings(tmp_path / "missing.json") == DEFAULT_SETTINGS


def test_file_values_override_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"preferred_player": "vlc", "settle_delay": 0.5}))
    settings = load_settings(path)
    assert settings["preferred_player"] == "vlc"
    assert settings["settle_delay"] == 0.5
    assert settings["state_file"] == DEFAULT_SETTINGS["state_file"]


def test_malformed_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json")
    assert load_settings(path) == DEFAULT_SETTINGS


def test_non_object_file_is_ignored(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("[1, 2]")
    assert load_settings(path) == DEFAULT_SETTINGS


def test_environment_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("MEDIA_MENU_STATE_FILE", "/run/mm.pid")
    monkeypatch.setenv("MEDIA_MENU_PLAYER", "ffplay")
    monkeypatch.setenv("MEDIA_MENU_SETTLE_DELAY", "0.05")
    settings = load_settings(tmp_path / "missing.json")
    assert settings["state_file"] == "/run/mm.pid"
    assert settings["preferred_player"] == "ffplay"
    assert settings["settle_delay"] == 0.05


def test_bad_numeric_override_is_ignored(tmp_path, monkeypatch):
    monkeypatch.setenv("MEDIA_MENU_SETTLE_DELAY", "soon")
    assert load_settings(tmp_path / "missing.json")["settle_delay"] == 0.2


def test_defaults_are_not_mutated(tmp_path, monkeypatch):
    monkeypatch.setenv("MEDIA_MENU_PLAYER", "vlc")
    load_settings(tmp_path / "missing.json")
    assert DEFAULT_SETTINGS["preferred_player"] is None
