"""Transcript data models shared by the dialogue parsers.

These dataclasses represent the intermediate speaker/utterance pairs
produced from either rich-text paragraphs or plain-transcript blocks.
They are plain stdlib dataclasses; only :class:`Message` is a Pydantic
model because it crosses the JSON boundary.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Utterance:
    """A single speaker turn.

    Attributes:
        speaker: Speaker label, trimmed.
        text: Utterance body in canonical form.
        index: 1-based position of the source paragraph or block.
    """

    speaker: str
    text: str
    index: int = 0


@dataclass(frozen=True)
class ParseWarning:
    """A structured warning for a block that could not be parsed.

    Attributes:
        index: 1-based position of the offending block.
        message: Human-readable description of the issue.
        raw: The raw block text that triggered the warning.
    """

    index: int
    message: str
    raw: str


@dataclass(frozen=True)
class TranscriptParseResult:
    """Top-level return type from the plain-transcript parser.

    Attributes:
        utterances: Parsed speaker turns, in order of appearance.
        speakers: Unique speaker labels, ordered by first appearance.
        warnings: Blocks that were skipped, with the reason.
    """

    utterances: list[Utterance] = field(default_factory=list)
    speakers: list[str] = field(default_factory=list)
    warnings: list[ParseWarning] = field(default_factory=list)
