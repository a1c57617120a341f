import json

import pytest
from pydantic import ValidationError

import foldline.config as config
from foldline.config import Settings, get_settings


def test_defaults():
    settings = Settings.load()
    assert settings.LOG_LEVEL == "INFO"
    assert settings.TRACE_STAGES is False
    assert settings.ROUND_DIGITS == 3


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("FOLDLINE_LOG_LEVEL", "debug")
    monkeypatch.setenv("FOLDLINE_TRACE_STAGES", "1")
    monkeypatch.setenv("FOLDLINE_ROUND_DIGITS", "5")

    settings = Settings.load()
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.TRACE_STAGES is True
    assert settings.ROUND_DIGITS == 5


def test_file_is_overridden_by_environment(monkeypatch, tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"LOG_LEVEL": "WARNING", "ROUND_DIGITS": 2}))
    monkeypatch.setenv("FOLDLINE_ROUND_DIGITS", "4")

    settings = Settings.load(path)
    assert settings.LOG_LEVEL == "WARNING"
    assert settings.ROUND_DIGITS == 4


def test_default_file_is_used_when_present(monkeypatch, tmp_path):
    path = tmp_path / ".foldline.json"
    path.write_text(json.dumps({"TRACE_STAGES": True}))
    monkeypatch.setattr(config, "DEFAULT_SETTINGS_PATH", path)

    assert Settings.load().TRACE_STAGES is True


def test_missing_explicit_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Settings.load(tmp_path / "nope.json")


def test_file_must_hold_object(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("[1, 2]")
    with pytest.raises(ValueError):
        Settings.load(path)


def test_invalid_values():
    with pytest.raises(ValidationError):
        Settings(LOG_LEVEL="LOUD")
    with pytest.raises(ValidationError):
        Settings(ROUND_DIGITS=-1)


def test_settings_are_frozen():
    settings = Settings()
    with pytest.raises(ValidationError):
        settings.TRACE_STAGES = True


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


@pytest.mark.parametrize("value", ["bogus", "basic_format"])
def test_unknown_environment_level_is_a_validation_error(monkeypatch, value):
    monkeypatch.setenv("FOLDLINE_LOG_LEVEL", value)
    with pytest.raises(ValidationError):
        get_settings()
