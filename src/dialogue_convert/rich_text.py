"""Converters between rich-text dialogue and the other formats.

- :func:`rich_text_to_messages` -- HTML dialogue to a message list.
- :func:`rich_text_to_plain_transcript` -- HTML dialogue to plain transcript.
- :func:`plain_transcript_to_rich_text` -- plain transcript to HTML dialogue.
"""

from __future__ import annotations

import logging

from dialogue_convert.exceptions import require_str
from dialogue_convert.markup import MarkupParser, iter_dialogue
from dialogue_convert.models.message import Message
from dialogue_convert.parser import parse_plain_transcript
from dialogue_convert.roles import infer_role

logger = logging.getLogger(__name__)

# Applied in order: entity escaping must run before the tab and newline
# substitutions, which introduce markup of their own.
_HTML_SUBSTITUTIONS: tuple[tuple[str, str], ...] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
    ("\t", "&emsp;"),
    ("\n", "<br />"),
)

_PARAGRAPH_TEMPLATE = '<p class="dialogue"><span class="speaker">{speaker}</span> {body}</p>\n'


def _format_utterance_html(text: str) -> str:
    """Escape a canonical-form utterance and encode its line structure."""
    for old, new in _HTML_SUBSTITUTIONS:
        text = text.replace(old, new)
    return text


def rich_text_to_messages(
    rich_text: str,
    assistant_name: str | None = None,
    *,
    parser: MarkupParser | None = None,
) -> list[Message]:
    """Parse an HTML dialogue into chat messages.

    Only ``p.dialogue`` paragraphs are considered; those without a
    ``span.speaker`` label are skipped.  No default assistant name is
    assumed here: without *assistant_name* no message gets the
    ``"assistant"`` role.

    Args:
        rich_text: HTML dialogue document.
        assistant_name: Speaker label that identifies the assistant.
        parser: Optional replacement for the BeautifulSoup parser.

    Returns:
        One :class:`Message` per dialogue paragraph, in document order.

    Raises:
        InvalidInputError: If *rich_text* is not a non-empty string.
    """
    require_str(rich_text, "rich_text", allow_empty=False)

    messages = [
        Message(
            role=infer_role(utterance.speaker, assistant_name),
            name=utterance.speaker,
            content=utterance.text,
        )
        for utterance in iter_dialogue(rich_text, parser=parser)
    ]

    logger.debug("Converted rich text to %d message(s)", len(messages))
    return messages


def rich_text_to_plain_transcript(
    rich_text: str,
    *,
    parser: MarkupParser | None = None,
) -> str:
    """Render an HTML dialogue as a plain transcript.

    Each paragraph becomes ``"{speaker}: {utterance}\\n\\n"``.  A paragraph
    is dropped only when both its speaker and its utterance are empty.

    Args:
        rich_text: HTML dialogue document.
        parser: Optional replacement for the BeautifulSoup parser.

    Returns:
        The plain transcript, or ``""`` for blank input.

    Raises:
        InvalidInputError: If *rich_text* is not a string.
    """
    require_str(rich_text, "rich_text")
    if not rich_text.strip():
        return ""

    parts = [
        f"{utterance.speaker}: {utterance.text}\n\n"
        for utterance in iter_dialogue(rich_text, parser=parser)
        if utterance.speaker or utterance.text
    ]

    logger.debug("Converted rich text to %d transcript block(s)", len(parts))
    return "".join(parts)


def plain_transcript_to_rich_text(plain_text: str) -> str:
    """Render a plain transcript as an HTML dialogue.

    Blocks without a speaker prefix are skipped with a warning.  Paragraph
    breaks inside an utterance become ``<br />&emsp;``, line breaks become
    ``<br />``.

    Args:
        plain_text: Plain transcript text.

    Returns:
        One ``<p class="dialogue">`` element per block, newline-separated,
        or ``""`` for blank input.

    Raises:
        InvalidInputError: If *plain_text* is not a string.
    """
    require_str(plain_text, "plain_text")
    if not plain_text.strip():
        return ""

    result = parse_plain_transcript(plain_text)
    html = "".join(
        _PARAGRAPH_TEMPLATE.format(
            speaker=utterance.speaker,
            body=_format_utterance_html(utterance.text),
        )
        for utterance in result.utterances
    )

    logger.debug(
        "Converted plain transcript to %d dialogue paragraph(s) from %d speaker(s), skipped %d block(s)",
        len(result.utterances),
        len(result.speakers),
        len(result.warnings),
    )
    return html.rstrip()
