"""Pydantic model for chat-completion style messages.

A :class:`Message` mirrors the ``{role, name, content}`` records used by
chat-completion APIs.  The converters always derive ``role`` from ``name``
via :func:`~dialogue_convert.roles.infer_role`; the model itself only
validates the shape.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

Role = Literal["user", "assistant", "system"]


class Message(BaseModel):
    """A single chat message.

    Attributes:
        role: ``"user"``, ``"assistant"`` or ``"system"``.
        name: Original speaker label, case preserved.
        content: Utterance text in canonical form (``\\n`` for a line
            break, ``\\n\\t`` for a paragraph break).
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    name: str
    content: str
