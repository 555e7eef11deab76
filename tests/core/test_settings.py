"""
Tests for the start-up settings.
"""

import json
import logging

import pytest
from pydantic import ValidationError

from infinite_floor.core.logging import parse_level
from infinite_floor.core.settings import GameSettings, load_settings


def test_defaults():
    settings = GameSettings()
    assert settings.seed is None
    assert (settings.player_hp, settings.sword_damage, settings.torch) == (20, 2, 30)
    assert settings.start_level == 1


def test_missing_file_yields_defaults(tmp_path):
    assert load_settings(tmp_path / "missing.json") == GameSettings()
    assert load_settings(None) == GameSettings()


def test_load_from_json(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"seed": 42, "torch": 50, "log_level": "DEBUG"}))
    settings = load_settings(path)
    assert settings.seed == 42
    assert settings.torch == 50
    assert settings.player_hp == 20


@pytest.mark.parametrize(
    "data",
    [{"start_level": 0}, {"player_hp": 0}, {"torch": 0}, {"sword_damage": -1}, {"seed": "abc"}],
)
def test_invalid_values_rejected(tmp_path, data):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(data))
    with pytest.raises(ValidationError):
        load_settings(path)


def test_parse_level():
    assert parse_level("debug") == logging.DEBUG
    assert parse_level("WARNING") == logging.WARNING
    assert parse_level("nonsense") == logging.INFO
