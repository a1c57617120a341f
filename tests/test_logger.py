import logging

import pytest

from foldline.logger.logger import level_number, logger, reconfigure, setup_logger


def test_default_logger():
    assert logger.name == "foldline"
    assert logger.propagate is False
    assert len(logger.handlers) >= 1


def test_setup_logger_configures_once():
    name = "foldline.test_setup_once"
    first = setup_logger(name=name, level="warning")
    second = setup_logger(name=name, level="debug")

    assert first is second
    assert len(first.handlers) == 1
    assert first.level == logging.WARNING


def test_setup_logger_reads_environment(monkeypatch):
    monkeypatch.setenv("FOLDLINE_LOG_LEVEL", "ERROR")
    configured = setup_logger(name="foldline.test_env_level")
    assert configured.level == logging.ERROR


def test_setup_logger_format():
    configured = setup_logger(name="foldline.test_format", format_string="%(message)s")
    assert configured.handlers[0].formatter._fmt == "%(message)s"


def test_reconfigure_changes_level_and_format():
    name = "foldline.test_reconfigure"
    setup_logger(name=name, level="INFO")
    configured = reconfigure("DEBUG", "%(levelname)s %(message)s", name=name)

    assert configured.level == logging.DEBUG
    assert configured.handlers[0].formatter._fmt == "%(levelname)s %(message)s"


def test_reconfigure_keeps_format_when_not_given():
    name = "foldline.test_reconfigure_keep"
    setup_logger(name=name, format_string="%(message)s")
    configured = reconfigure("WARNING", name=name)

    assert configured.level == logging.WARNING
    assert configured.handlers[0].formatter._fmt == "%(message)s"


@pytest.mark.parametrize("value", ["bogus", "basic_format", "Level 5"])
def test_unknown_environment_level_falls_back_to_info(monkeypatch, value):
    monkeypatch.setenv("FOLDLINE_LOG_LEVEL", value)
    configured = setup_logger(name=f"foldline.test_env_fallback.{value}")
    assert configured.level == logging.INFO


def test_unknown_explicit_level_raises():
    with pytest.raises(ValueError):
        setup_logger(name="foldline.test_explicit_bogus", level="bogus")
    with pytest.raises(ValueError):
        reconfigure("basic_format", name="foldline.test_reconfigure_bogus")


@pytest.mark.parametrize(
    "name, expected", [("debug", logging.DEBUG), ("Warning", logging.WARNING)]
)
def test_level_number(name, expected):
    assert level_number(name) == expected
