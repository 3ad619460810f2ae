"""Configuration loading for dialogue-convert.

Reads settings from environment variables (with .env support via
python-dotenv).  Only the CLI consults these settings; the library
functions take the assistant name as an explicit argument.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv


class ConfigError(Exception):
    """Raised when configuration values are present but invalid."""


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables.

    Attributes:
        assistant_name: Speaker label that marks assistant turns, or
            ``None`` when not configured.
        log_level: Logging level (default ``"INFO"``).
    """

    assistant_name: str | None = None
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Recognised variables:

    - ``DIALOGUE_ASSISTANT_NAME`` -- assistant speaker label.  Blank or
      whitespace-only values are treated as unset.
    - ``LOG_LEVEL`` -- standard logging level name.

    Returns:
        A validated :class:`Settings` instance.

    Raises:
        ConfigError: If ``LOG_LEVEL`` is set to an unknown level name.
    """
    load_dotenv()

    values: dict[str, str] = {}

    assistant_name = os.environ.get("DIALOGUE_ASSISTANT_NAME", "")
    if assistant_name.strip():
        values["assistant_name"] = assistant_name.strip()

    log_level = os.environ.get("LOG_LEVEL", "").strip()
    if log_level:
        if not isinstance(logging.getLevelName(log_level.upper()), int):
            raise ConfigError(f"Invalid LOG_LEVEL: {log_level!r}")
        values["log_level"] = log_level.upper()

    return Settings(**values)
