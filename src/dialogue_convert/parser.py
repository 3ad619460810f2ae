"""Plain-transcript parser.

Parses text made of ``speaker: utterance`` blocks into structured
:class:`~dialogue_convert.models.transcript.TranscriptParseResult` objects.
Blocks are separated by a blank line that is followed by a speaker prefix;
any other blank line belongs to the current utterance and is kept as a
paragraph break (``\\n\\t``).
"""

from __future__ import annotations

import logging
import re

from dialogue_convert.models.transcript import ParseWarning, TranscriptParseResult, Utterance

logger = logging.getLogger(__name__)

# Blank line followed by "label:".  The lookahead keeps the next speaker
# prefix inside the following block.
_BLOCK_SEPARATOR_RE = re.compile(r"\n\n(?=[A-Za-z0-9_-]+:\s*)")

_SPEAKER_PREFIX_RE = re.compile(r"^([A-Za-z0-9_-]+):\s*")

_PARAGRAPH_BREAK_RE = re.compile(r"\n{2,}")


def collapse_paragraph_breaks(text: str) -> str:
    """Turn every run of two or more newlines into ``\\n\\t`` and trim.

    Args:
        text: Raw utterance text.

    Returns:
        The utterance in canonical form.
    """
    return _PARAGRAPH_BREAK_RE.sub("\n\t", text).strip()


def split_blocks(text: str) -> list[str]:
    """Split a trimmed transcript into raw speaker blocks.

    Args:
        text: Transcript text.  Leading and trailing whitespace is
            removed before splitting.

    Returns:
        The raw blocks, in order.  Empty input yields an empty list.
    """
    trimmed = text.strip()
    if not trimmed:
        return []
    return _BLOCK_SEPARATOR_RE.split(trimmed)


def parse_plain_transcript(text: str) -> TranscriptParseResult:
    """Parse a plain transcript string into speaker/utterance pairs.

    Blocks that do not start with a ``label:`` prefix are skipped and
    reported in :attr:`TranscriptParseResult.warnings`; they never abort
    the parse.

    Args:
        text: The raw transcript text.

    Returns:
        A :class:`TranscriptParseResult` with utterances in canonical form,
        unique speakers ordered by first appearance, and any warnings.
    """
    blocks = split_blocks(text)
    if not blocks:
        logger.debug("Empty transcript -- nothing to parse")
        return TranscriptParseResult()

    utterances: list[Utterance] = []
    warnings: list[ParseWarning] = []

    for index, block in enumerate(blocks, start=1):
        current = block.strip()
        if not current:
            continue

        match = _SPEAKER_PREFIX_RE.match(current)
        if match is None:
            logger.warning(
                "Skipping block %d that does not start with a speaker pattern: %r",
                index,
                current,
            )
            warnings.append(
                ParseWarning(
                    index=index,
                    message="Block does not start with a speaker pattern",
                    raw=current,
                )
            )
            continue

        utterances.append(
            Utterance(
                speaker=match.group(1),
                text=collapse_paragraph_breaks(current[match.end():]),
                index=index,
            )
        )

    speakers = list(dict.fromkeys(u.speaker for u in utterances))

    logger.debug(
        "Parsed transcript: %d utterance(s), %d speaker(s), %d warning(s)",
        len(utterances),
        len(speakers),
        len(warnings),
    )

    return TranscriptParseResult(
        utterances=utterances,
        speakers=speakers,
        warnings=warnings,
    )
