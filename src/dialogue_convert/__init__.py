"""dialogue-convert: chat transcript format converters.

Converts dialogues between styled HTML ("rich text"), ``speaker: utterance``
plain transcripts and chat-completion style message lists, and cleans
Markdown-style markup out of model responses.
"""

from __future__ import annotations

from dialogue_convert.cleaner import markup_to_plain_text
from dialogue_convert.exceptions import ConversionError, InvalidInputError
from dialogue_convert.markup import extract_utterance, parse_markup
from dialogue_convert.messages import messages_to_plain_transcript, plain_transcript_to_messages
from dialogue_convert.models.message import Message, Role
from dialogue_convert.models.transcript import ParseWarning, TranscriptParseResult, Utterance
from dialogue_convert.parser import parse_plain_transcript
from dialogue_convert.rich_text import (
    plain_transcript_to_rich_text,
    rich_text_to_messages,
    rich_text_to_plain_transcript,
)
from dialogue_convert.roles import DEFAULT_ASSISTANT_NAME, infer_role

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_ASSISTANT_NAME",
    "ConversionError",
    "InvalidInputError",
    "Message",
    "ParseWarning",
    "Role",
    "TranscriptParseResult",
    "Utterance",
    "extract_utterance",
    "infer_role",
    "markup_to_plain_text",
    "messages_to_plain_transcript",
    "parse_markup",
    "parse_plain_transcript",
    "plain_transcript_to_messages",
    "plain_transcript_to_rich_text",
    "rich_text_to_messages",
    "rich_text_to_plain_transcript",
]
