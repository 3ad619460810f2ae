"""Custom exceptions for dialogue-convert.

Only type/shape violations on required inputs are raised.  Malformed
elements inside otherwise valid input are logged and skipped by the
converters instead.
"""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for errors raised by the dialogue converters."""


class InvalidInputError(ConversionError):
    """Raised when a converter receives input of the wrong type or shape.

    Raised immediately, before any output is produced.

    Attributes:
        received_type: Name of the type that was actually passed in.
    """

    def __init__(self, message: str, received_type: str = "") -> None:
        super().__init__(message)
        self.received_type = received_type


def require_str(value: object, argument: str, *, allow_empty: bool = True) -> str:
    """Return *value* unchanged if it is a usable string, else raise.

    Args:
        value: The argument to check.
        argument: Argument name used in the error message.
        allow_empty: When ``False``, the empty string is rejected as well.

    Raises:
        InvalidInputError: If *value* is not a :class:`str`, or is empty
            and *allow_empty* is ``False``.
    """
    received = type(value).__name__
    if not isinstance(value, str):
        qualifier = "a string" if allow_empty else "a non-empty string"
        raise InvalidInputError(
            f"Invalid input: {argument} must be {qualifier}, got {received}",
            received_type=received,
        )
    if not allow_empty and not value:
        raise InvalidInputError(
            f"Invalid input: {argument} must be a non-empty string",
            received_type=received,
        )
    return value
