"""Shared fixtures for dialogue-convert tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all dialogue-convert environment variables.

    Patches ``load_dotenv`` so a real ``.env`` file cannot re-inject values
    that the test explicitly removed.
    """
    monkeypatch.setattr("dialogue_convert.config.load_dotenv", lambda *_a, **_kw: None)
    for key in ("DIALOGUE_ASSISTANT_NAME", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def sample_plain_transcript() -> str:
    """A three-turn transcript with a system turn and a paragraph break."""
    return (
        "INSTRUCTIONS: Answer briefly.\n\n"
        "Alice: What is 2 < 3 & why?\n\n"
        "THINGKING-MACHINE: Because it is.\n\nAnd that is that."
    )


@pytest.fixture(autouse=True)
def _reset_root_logger() -> Generator[None, None, None]:
    """Reset the root logger after each test to prevent handler leaks."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
