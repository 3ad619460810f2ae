"""Markup cleaner for generative-model output.

:func:`markup_to_plain_text` strips lightweight Markdown and stray HTML
from model responses and normalizes whitespace into canonical form: one
``\\n`` per line break and ``\\n\\t`` per paragraph break.

The cleanup is a fixed, ordered list of regex rewrites.  Block-level
constructs (code fences, comments, tags) are removed before inline ones,
and whitespace is normalized last.  Removal is lossy: link and image
syntax disappears entirely, including the link text.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

_Rule = tuple[re.Pattern[str], str]

_NORMALIZE_RULES: tuple[_Rule, ...] = (
    (re.compile(r"\r\n"), "\n"),
    (re.compile(r"\n{2,}"), "\n\n"),
)

_BLOCK_RULES: tuple[_Rule, ...] = (
    # Fenced code blocks, contents included.
    (re.compile(r"`{3,}[^\n]*\n[\s\S]*?\n`{3,}"), ""),
    (re.compile(r"~{3,}[^\n]*\n[\s\S]*?\n~{3,}"), ""),
    (re.compile(r"<!--[\s\S]*?-->"), ""),
    (re.compile(r"<[^>]+>"), ""),
    # Horizontal rules.
    (re.compile(r"^\s*(?:-|\*|_){3,}\s*$", re.MULTILINE), ""),
    # Blockquote markers; the quoted text stays.
    (re.compile(r"^\s*>\s*", re.MULTILINE), ""),
)

_INLINE_RULES: tuple[_Rule, ...] = (
    # ATX headers.
    (re.compile(r"^\s*#{1,6}\s*", re.MULTILINE), ""),
    # Setext underlines.
    (re.compile(r"^([^\n]+)\n\s*(?:=|-){2,}\s*$", re.MULTILINE), r"\1"),
    # Links and images, label included.
    (re.compile(r"!?\[.*?\]\(.*?\)"), ""),
    (re.compile(r"`([^`]+)`"), r"\1"),
    (re.compile(r"\*\*([^*]+?)\*\*"), r"\1"),
    (re.compile(r"__([^_]+?)__"), r"\1"),
    # Single delimiters need content between them, so snake_case survives
    # unless two underscores pair up on one line.
    (re.compile(r"\*([^*]+?)\*"), r"\1"),
    (re.compile(r"_([^_]+?)_"), r"\1"),
    # List markers.
    (re.compile(r"^\s*(?:[-*+]|\d+\.)\s+", re.MULTILINE), ""),
)

_WHITESPACE_RULES: tuple[_Rule, ...] = (
    (re.compile(r"\t"), " "),
    (re.compile(r" {2,}"), " "),
    (re.compile(r"\n\n"), "\n\t"),
)

_FINAL_RULES: tuple[_Rule, ...] = (
    (re.compile(r"^[\n\t]+"), ""),
    (re.compile(r"\n\t{2,}"), "\n\t"),
)


def _apply(text: str, rules: tuple[_Rule, ...]) -> str:
    for pattern, replacement in rules:
        text = pattern.sub(replacement, text)
    return text


def markup_to_plain_text(text: str) -> str:
    """Strip Markdown-style markup from model output.

    Non-string input is logged and yields ``""``; this function never
    raises.

    Args:
        text: Raw model response.

    Returns:
        Cleaned text in canonical form.
    """
    if not isinstance(text, str):
        logger.warning("markup_to_plain_text received non-string input: %r", text)
        return ""

    text = _apply(text, _NORMALIZE_RULES)
    text = _apply(text, _BLOCK_RULES)
    text = _apply(text, _INLINE_RULES)
    text = "\n".join(line.strip() for line in text.split("\n"))
    text = _apply(text, _WHITESPACE_RULES)
    return _apply(text.strip(), _FINAL_RULES)
