"""Runtime settings for foldline.

Settings are read from ``FOLDLINE_*`` environment variables, layered over an
optional JSON file. Environment variables win over the file.

Example ``~/.foldline.json``::

    {"LOG_LEVEL": "DEBUG", "TRACE_STAGES": true}
"""

import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any, Dict, Optional

import annotated_types as at
from pydantic import BaseModel, ConfigDict, Field, field_validator

from foldline.logger.logger import DEFAULT_FORMAT, level_number

__all__ = ["Settings", "get_settings", "ENV_PREFIX", "DEFAULT_SETTINGS_PATH"]

ENV_PREFIX = "FOLDLINE_"
DEFAULT_SETTINGS_PATH = Path().home() / ".foldline.json"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    LOG_LEVEL: str = Field("INFO", description="Level name for the foldline logger.")
    LOG_FORMAT: str = Field(DEFAULT_FORMAT, description="logging.Formatter format.")
    TRACE_STAGES: bool = Field(
        False, description="Log the size of every pipeline stage at DEBUG."
    )
    ROUND_DIGITS: Annotated[int, at.Ge(0)] = Field(
        3, description="Decimal places used to compare float results."
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _check_level(cls, value: Any) -> str:
        level_number(value)
        return str(value).upper()

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        """Build settings from an optional JSON file and the environment.

        Args:
            path: JSON settings file. When omitted, ``~/.foldline.json`` is read
                if it exists.

        Returns:
            Validated settings.

        Raises:
            FileNotFoundError: If ``path`` is given but does not exist.
            ValueError: If the file is not a JSON object.
        """
        values: Dict[str, Any] = {}

        if path is not None:
            path = Path(path)
            if not path.exists():
                raise FileNotFoundError(f"Settings file not found at {path}")
        elif DEFAULT_SETTINGS_PATH.exists():
            path = DEFAULT_SETTINGS_PATH

        if path is not None:
            with open(path, "r") as f:
                loaded = json.load(f)
            if not isinstance(loaded, dict):
                raise ValueError(f"Settings file {path} must contain a JSON object.")
            values.update(loaded)

        for name in cls.model_fields:
            env_value = os.getenv(ENV_PREFIX + name)
            if env_value is not None:
                values[name] = env_value

        return cls(**values)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, loaded on first use."""
    return Settings.load()
