"""Global logger configuration for the foldline project.

The library itself only logs at DEBUG (pipeline stage tracing and guide
mismatches), so the default INFO level keeps it silent.
"""

import logging
import os
import sys

__all__ = [
    "logger",
    "setup_logger",
    "reconfigure",
    "level_number",
    "DEFAULT_FORMAT",
    "DATE_FORMAT",
]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def level_number(name: str) -> int:
    """Resolve a level name such as ``"debug"`` to its numeric value.

    Raises:
        ValueError: If ``name`` is not a registered level name.
    """
    number = logging.getLevelName(str(name).upper())
    if not isinstance(number, int):
        raise ValueError(f"Unknown log level '{name}'.")
    return number


def setup_logger(
    name: str = "foldline",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (typically project name)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Falls back
            to the FOLDLINE_LOG_LEVEL environment variable, then INFO. An
            unknown level in the environment is ignored so that importing the
            package never fails; the settings loader reports it instead.
        format_string: Custom format string

    Returns:
        Configured logger instance

    Raises:
        ValueError: If an explicit ``level`` is not a known level name.
    """
    if level is not None:
        number = level_number(level)
    else:
        try:
            number = level_number(os.getenv("FOLDLINE_LOG_LEVEL", "INFO"))
        except ValueError:
            number = logging.INFO
    format_string = format_string or DEFAULT_FORMAT

    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=format_string, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(number)
        logger.propagate = False

    return logger


def reconfigure(
    level: str, format_string: str | None = None, name: str = "foldline"
) -> logging.Logger:
    """Change the level and format of an already configured logger.

    Used once settings are loaded, since the module-level logger is created
    before any settings file is read.
    """
    logger = setup_logger(name=name, level=level, format_string=format_string)
    logger.setLevel(level_number(level))
    if format_string:
        for handler in logger.handlers:
            handler.setFormatter(
                logging.Formatter(fmt=format_string, datefmt=DATE_FORMAT)
            )
    return logger


# Create default logger instance for the project
logger = setup_logger()
