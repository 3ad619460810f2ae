"""Rich-text (HTML) dialogue parsing.

A rich-text dialogue is a series of ``<p class="dialogue">`` paragraphs,
each holding one ``<span class="speaker">`` label followed by the
utterance.  Inside the utterance ``<br />`` is a line break and
``<br />&emsp;`` a paragraph break.

The HTML parser is injectable: any callable that turns a string into a
tree supporting ``select``/``select_one``, ``get_text``, ``decode`` and
``decode_contents`` (the BeautifulSoup API) can be passed as *parser*.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator
from typing import Any

from bs4 import BeautifulSoup

from dialogue_convert.models.transcript import Utterance

logger = logging.getLogger(__name__)

MarkupParser = Callable[[str], Any]

DIALOGUE_SELECTOR = "p.dialogue"
SPEAKER_SELECTOR = "span.speaker"

# BeautifulSoup decodes &emsp; to U+2003 on parse, so both spellings are
# accepted after a line break.  The separator excludes U+2003 so only the
# first em-space is structural; later ones stay in the text.
_INDENTED_BREAK_RE = re.compile(
    r"<br\s*/?>[^\S\u2003]*(?:&emsp;|&#8195;|&#x2003;|\u2003)",
    re.IGNORECASE,
)
_BREAK_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)


def parse_markup(markup: str) -> BeautifulSoup:
    """Parse an HTML string with the stdlib-backed BeautifulSoup builder."""
    return BeautifulSoup(markup, "html.parser")


def extract_utterance(
    paragraph: Any,
    index: int = 0,
    parser: MarkupParser | None = None,
) -> Utterance | None:
    """Split one dialogue paragraph into speaker label and utterance.

    Everything after the speaker label's markup is the utterance body.  A
    single leading space (the separator written by
    :func:`~dialogue_convert.rich_text.plain_transcript_to_rich_text`) is
    dropped, ``<br />`` followed by an em-space becomes ``\\n\\t``, any
    other ``<br />`` becomes ``\\n``, then remaining tags are stripped and
    entities decoded.

    Args:
        paragraph: A parsed ``p.dialogue`` element.
        index: 1-based paragraph position, stored on the result.
        parser: Parser used to decode the body fragment.  Defaults to
            :func:`parse_markup`.

    Returns:
        The :class:`Utterance`, or ``None`` when the paragraph has no
        speaker label.
    """
    speaker_element = paragraph.select_one(SPEAKER_SELECTOR)
    if speaker_element is None:
        return None

    speaker = speaker_element.get_text().strip()

    inner = paragraph.decode_contents()
    outer = speaker_element.decode()
    start = inner.find(outer)
    body = inner[start + len(outer):] if start >= 0 else inner

    if body.startswith(" "):
        body = body[1:]

    body = _INDENTED_BREAK_RE.sub("\n\t", body)
    body = _BREAK_RE.sub("\n", body)

    fragment = (parser or parse_markup)(body)
    return Utterance(speaker=speaker, text=fragment.get_text().strip(), index=index)


def iter_dialogue(rich_text: str, parser: MarkupParser | None = None) -> Iterator[Utterance]:
    """Yield an :class:`Utterance` for every well-formed dialogue paragraph.

    Paragraphs without a speaker label are skipped.

    Args:
        rich_text: HTML dialogue document.
        parser: Optional replacement for :func:`parse_markup`.
    """
    tree = (parser or parse_markup)(rich_text)
    for index, paragraph in enumerate(tree.select(DIALOGUE_SELECTOR), start=1):
        utterance = extract_utterance(paragraph, index=index, parser=parser)
        if utterance is None:
            logger.debug("Skipping dialogue paragraph %d without a speaker label", index)
            continue
        yield utterance
