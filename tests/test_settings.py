"""
Tests for settings persistence.

Usage:
    pytest tests/test_settings.py
"""

import json

from labyrinth.settings import DEFAULT_SETTINGS, load_settings, save_settings


def test_missing_file_gives_defaults(tmp_path):
    settings = load_settings(tmp_path / "config.json")
    assert settings == DEFAULT_SETTINGS
    assert settings is not DEFAULT_SETTINGS


def test_round_trip(tmp_path):
    path = tmp_path / "config.json"
    settings = dict(DEFAULT_SETTINGS, algorithm_name="breath-first", width=12)
    save_settings(settings, path)
    assert load_settings(path) == settings


def test_partial_file_is_merged_with_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"delay_ms": 5}), encoding="utf-8")
    settings = load_settings(path)
    assert settings["delay_ms"] == 5
    assert settings["width"] == DEFAULT_SETTINGS["width"]


def test_corrupt_file_gives_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_settings(path) == DEFAULT_SETTINGS


def test_non_object_file_gives_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert load_settings(path) == DEFAULT_SETTINGS


def test_default_location_is_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    save_settings(dict(DEFAULT_SETTINGS, height=7))
    assert (tmp_path / "config.json").exists()
    assert load_settings()["height"] == 7


def test_mistyped_values_are_dropped(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "width": "40",
        "height": 9,
        "delay_ms": None,
        "debug_enabled": 1,
        "algorithm_name": 3,
    }), encoding="utf-8")
    settings = load_settings(path)
    assert settings["width"] == DEFAULT_SETTINGS["width"]
    assert settings["height"] == 9
    assert settings["delay_ms"] == DEFAULT_SETTINGS["delay_ms"]
    assert settings["debug_enabled"] is False
    assert settings["algorithm_name"] == DEFAULT_SETTINGS["algorithm_name"]


def test_bool_is_not_accepted_as_a_number(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"width": True}), encoding="utf-8")
    assert load_settings(path)["width"] == DEFAULT_SETTINGS["width"]


def test_unknown_keys_are_kept(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"theme": "dark"}), encoding="utf-8")
    assert load_settings(path)["theme"] == "dark"


def test_default_algorithm_matches_registry():
    from labyrinth.solver import get_default_algorithm_name
    assert DEFAULT_SETTINGS["algorithm_name"] == get_default_algorithm_name()
