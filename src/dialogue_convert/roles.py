"""Role inference for chat messages.

Maps a speaker label to a chat-completion role.  The assistant identity is
always supplied by the caller; nothing here reads configuration.
"""

from __future__ import annotations

from dialogue_convert.models.message import Role

# Assistant label assumed by :func:`~dialogue_convert.messages.plain_transcript_to_messages`
# when the caller does not name one.  No other converter falls back to it.
DEFAULT_ASSISTANT_NAME = "THINGKING-MACHINE"

# Speaker label reserved for system instructions.
SYSTEM_SPEAKER = "INSTRUCTIONS"


def infer_role(speaker: str, assistant_name: str | None = None) -> Role:
    """Return the chat role for *speaker*.

    Both comparisons are case-insensitive.  The assistant match takes
    precedence, so an assistant named ``INSTRUCTIONS`` yields
    ``"assistant"``.

    Args:
        speaker: Speaker label as it appears in the transcript.
        assistant_name: Label that identifies the assistant.  ``None`` or
            a blank string means no speaker is the assistant.

    Returns:
        ``"assistant"``, ``"system"`` or ``"user"``.
    """
    speaker_upper = speaker.upper()
    if assistant_name and assistant_name.strip() and speaker_upper == assistant_name.upper():
        return "assistant"
    if speaker_upper == SYSTEM_SPEAKER:
        return "system"
    return "user"
