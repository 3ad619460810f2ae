"""Entry point for ``python -m dialogue_convert``.

Provides a CLI that converts a dialogue file (or stdin) from one format
to another.  Uses stdlib :mod:`argparse` for argument parsing.

Conversions:
    html-to-messages  -- rich-text dialogue to a JSON message list.
    html-to-text      -- rich-text dialogue to a plain transcript.
    text-to-html      -- plain transcript to rich-text dialogue.
    text-to-messages  -- plain transcript to a JSON message list.
    messages-to-text  -- JSON message list to a plain transcript.
    clean-markup      -- strip Markdown from model output.

Exit codes:
    0 -- Conversion completed successfully.
    1 -- An error occurred (file not found, unreadable, invalid input).
    2 -- Argument parsing error (handled by argparse).
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Callable
from pathlib import Path

from dialogue_convert.cleaner import markup_to_plain_text
from dialogue_convert.config import ConfigError, load_settings
from dialogue_convert.exceptions import ConversionError
from dialogue_convert.log import get_logger, resolve_level, setup_logging
from dialogue_convert.messages import messages_to_plain_transcript, plain_transcript_to_messages
from dialogue_convert.models.message import Message
from dialogue_convert.rich_text import (
    plain_transcript_to_rich_text,
    rich_text_to_messages,
    rich_text_to_plain_transcript,
)

logger = get_logger(__name__)


def _dump_messages(messages: list[Message]) -> str:
    return json.dumps([m.model_dump() for m in messages], indent=2, ensure_ascii=False) + "\n"


def _html_to_messages(text: str, assistant_name: str | None) -> str:
    return _dump_messages(rich_text_to_messages(text, assistant_name))


def _html_to_text(text: str, assistant_name: str | None) -> str:  # noqa: ARG001
    return rich_text_to_plain_transcript(text)


def _text_to_html(text: str, assistant_name: str | None) -> str:  # noqa: ARG001
    html = plain_transcript_to_rich_text(text)
    return f"{html}\n" if html else ""


def _text_to_messages(text: str, assistant_name: str | None) -> str:
    return _dump_messages(plain_transcript_to_messages(text, assistant_name))


def _messages_to_text(text: str, assistant_name: str | None) -> str:  # noqa: ARG001
    return messages_to_plain_transcript(json.loads(text))


def _clean_markup(text: str, assistant_name: str | None) -> str:  # noqa: ARG001
    cleaned = markup_to_plain_text(text)
    return f"{cleaned}\n" if cleaned else ""


CONVERSIONS: dict[str, Callable[[str, str | None], str]] = {
    "html-to-messages": _html_to_messages,
    "html-to-text": _html_to_text,
    "text-to-html": _text_to_html,
    "text-to-messages": _text_to_messages,
    "messages-to-text": _messages_to_text,
    "clean-markup": _clean_markup,
}


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser.

    Returns:
        Configured :class:`argparse.ArgumentParser`.
    """
    parser = argparse.ArgumentParser(
        prog="dialogue-convert",
        description="Convert chat transcripts between HTML, plain text and message lists.",
    )
    parser.add_argument(
        "conversion",
        choices=sorted(CONVERSIONS),
        help="Conversion to perform.",
    )
    parser.add_argument(
        "input_file",
        nargs="?",
        default="-",
        help="Input file (default: read from stdin).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="Write the result to this file instead of stdout.",
    )
    parser.add_argument(
        "--assistant-name",
        type=str,
        default=None,
        help=(
            "Speaker label of the assistant "
            "(defaults to DIALOGUE_ASSISTANT_NAME from config)."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug-level logging.",
    )
    return parser


def _read_input(input_file: str) -> str:
    """Read the conversion input from *input_file* or stdin.

    Raises:
        FileNotFoundError: If the file does not exist.
        IsADirectoryError: If the path is not a regular file.
        PermissionError: If the file cannot be read.
    """
    if input_file == "-":
        return sys.stdin.read()

    path = Path(input_file)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    if not path.is_file():
        raise IsADirectoryError(f"Not a file: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except PermissionError as exc:
        raise PermissionError(f"Permission denied: {path}") from exc


def main(argv: list[str] | None = None) -> int:
    """Run the dialogue-convert CLI.

    Args:
        argv: Command-line arguments.  Defaults to ``sys.argv[1:]``
            when ``None`` (the normal case).

    Returns:
        Exit code: ``0`` on success, ``1`` on error.
    """
    parser = build_parser()
    args = parser.parse_args(argv if argv is not None else sys.argv[1:])

    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    setup_logging(resolve_level(args.verbose, settings.log_level))

    assistant_name = args.assistant_name or settings.assistant_name

    try:
        text = _read_input(args.input_file)
        output = CONVERSIONS[args.conversion](text, assistant_name)
    except json.JSONDecodeError as exc:
        print(f"Error: Invalid JSON input: {exc}", file=sys.stderr)
        return 1
    except (ConversionError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.output is None:
        sys.stdout.write(output)
    else:
        try:
            Path(args.output).write_text(output, encoding="utf-8")
        except OSError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        logger.info("Wrote %s output to %s", args.conversion, args.output)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
