"""Data models for dialogue-convert."""

from __future__ import annotations

from dialogue_convert.models.message import Message, Role
from dialogue_convert.models.transcript import ParseWarning, TranscriptParseResult, Utterance

__all__ = [
    "Message",
    "ParseWarning",
    "Role",
    "TranscriptParseResult",
    "Utterance",
]
