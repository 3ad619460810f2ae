"""Converters between plain transcripts and chat message lists."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from dialogue_convert.exceptions import require_str
from dialogue_convert.models.message import Message
from dialogue_convert.parser import collapse_paragraph_breaks, parse_plain_transcript
from dialogue_convert.roles import DEFAULT_ASSISTANT_NAME, infer_role

logger = logging.getLogger(__name__)


def plain_transcript_to_messages(
    plain_text: str,
    assistant_name: str | None = None,
) -> list[Message]:
    """Parse a plain transcript into chat messages.

    Unlike :func:`~dialogue_convert.rich_text.rich_text_to_messages`, this
    converter falls back to :data:`~dialogue_convert.roles.DEFAULT_ASSISTANT_NAME`
    when *assistant_name* is missing or blank.

    Args:
        plain_text: Plain transcript text.
        assistant_name: Speaker label that identifies the assistant.

    Returns:
        One :class:`Message` per speaker block, or ``[]`` for blank input.

    Raises:
        InvalidInputError: If *plain_text* is not a string.
    """
    require_str(plain_text, "plain_text")
    if not plain_text.strip():
        return []

    if not assistant_name or not assistant_name.strip():
        assistant_name = DEFAULT_ASSISTANT_NAME

    result = parse_plain_transcript(plain_text)
    messages = [
        Message(
            role=infer_role(utterance.speaker, assistant_name),
            name=utterance.speaker,
            content=utterance.text,
        )
        for utterance in result.utterances
    ]

    logger.debug(
        "Converted plain transcript to %d message(s) from %d speaker(s) (%s), skipped %d block(s)",
        len(messages),
        len(result.speakers),
        ", ".join(result.speakers),
        len(result.warnings),
    )
    return messages


def _get_field(record: Any, key: str) -> Any:
    """Read *key* from a mapping or an attribute-style record."""
    if isinstance(record, Mapping):
        return record.get(key)
    return getattr(record, key, None)


def messages_to_plain_transcript(messages: Sequence[Any]) -> str:
    """Render chat messages as a plain transcript.

    Never raises.  A non-sequence argument is logged and yields ``""``;
    records without string ``name`` and ``content`` are logged and
    skipped.

    Args:
        messages: :class:`Message` objects, mappings, or any objects with
            ``name`` and ``content`` attributes.

    Returns:
        The concatenated ``"{name}: {content}\\n\\n"`` blocks.
    """
    if not isinstance(messages, Sequence) or isinstance(messages, (str, bytes, bytearray)):
        logger.error(
            "Invalid input: messages must be a list, got %s",
            type(messages).__name__,
        )
        return ""

    parts: list[str] = []
    for position, message in enumerate(messages):
        name = _get_field(message, "name")
        content = _get_field(message, "content")
        if not isinstance(name, str) or not isinstance(content, str):
            logger.warning("Skipping malformed message at position %d: %r", position, message)
            continue
        parts.append(f"{name.strip()}: {collapse_paragraph_breaks(content)}\n\n")

    logger.debug("Converted %d of %d message(s) to plain transcript", len(parts), len(messages))
    return "".join(parts)
