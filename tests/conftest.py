import logging

import pytest

import foldline.config as config
from foldline.logger.logger import logger


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep the user's settings file and FOLDLINE_* variables out of tests."""
    monkeypatch.setattr(config, "DEFAULT_SETTINGS_PATH", tmp_path / "absent.json")
    for name in config.Settings.model_fields:
        monkeypatch.delenv(config.ENV_PREFIX + name, raising=False)
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()


@pytest.fixture
def foldline_records(caplog):
    """Capture records from the foldline logger, which does not propagate."""
    previous_level = logger.level
    logger.addHandler(caplog.handler)
    logger.setLevel(logging.DEBUG)
    caplog.handler.setLevel(logging.DEBUG)
    yield caplog
    logger.removeHandler(caplog.handler)
    logger.setLevel(previous_level)
