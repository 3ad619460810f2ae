"""Logging setup for the dialogue-convert CLI.

The converters never configure logging.  They only emit records on their
module loggers (``dialogue_convert.parser``, ``dialogue_convert.messages``
and so on): WARNING for skipped transcript blocks and malformed message
records, ERROR for a non-list message argument, DEBUG for per-call counts.

``python -m dialogue_convert`` picks the level with :func:`resolve_level`
(``-v`` wins over ``LOG_LEVEL`` from :mod:`dialogue_convert.config`) and
hands it to :func:`setup_logging`.  Records go to *stderr* so converted
output on *stdout* stays clean for piping.
"""

from __future__ import annotations

import logging
import sys

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Set on the handler we install so a second setup_logging call (or a host
# application embedding the converters) does not get duplicate output.
_HANDLER_ATTR = "_dialogue_convert_log_handler"

VERBOSE_LEVEL = "DEBUG"


def resolve_level(verbose: bool, configured: str = "INFO") -> str:
    """Return the level name the CLI should log at.

    Args:
        verbose: ``True`` when ``-v``/``--verbose`` was passed.
        configured: Level from :class:`~dialogue_convert.config.Settings`.

    Returns:
        ``"DEBUG"`` when *verbose*, otherwise *configured* upper-cased.
    """
    return VERBOSE_LEVEL if verbose else configured.upper()


def setup_logging(level: str = "INFO") -> None:
    """Send converter diagnostics to *stderr* at *level*.

    Sets the root logger level and attaches one
    :class:`logging.StreamHandler` with the ``time | level | logger |
    message`` format.  Repeated calls only update the level.

    Args:
        level: A standard logging level name.  At ``"WARNING"`` only
            skipped blocks and records are shown; ``"DEBUG"`` adds the
            per-conversion counts.

    Raises:
        ValueError: If *level* is not a recognised logging level string.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level!r}")

    root = logging.getLogger()
    root.setLevel(numeric_level)

    for handler in root.handlers:
        if getattr(handler, _HANDLER_ATTR, False):
            handler.setLevel(numeric_level)
            return

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))

    setattr(handler, _HANDLER_ATTR, True)
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a dialogue-convert module (pass ``__name__``)."""
    return logging.getLogger(name)
