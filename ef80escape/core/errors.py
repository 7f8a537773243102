"""Typed exception hierarchy for ef80escape."""

from __future__ import annotations


class Ef80Error(Exception):
    """Base class for all ef80escape errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DecodeError(Ef80Error, ValueError):
    """Raised when text cannot be turned back into bytes.

    Attributes:
        position: Index of the offending character in the input text.
    """

    def __init__(self, message: str, position: int) -> None:
        self.position = position
        super().__init__(message)


class DanglingEscapePrefixError(DecodeError):
    """Raised when the text ends right after an escape prefix (U+EF00)."""

    def __init__(self, position: int) -> None:
        super().__init__(
            f"Dangling escape prefix U+EF00 at position {position}: "
            "no character follows it",
            position,
        )


class SurrogateInTextError(DecodeError):
    """Raised when the text holds a lone surrogate, which has no UTF-8 form."""

    def __init__(self, position: int, code_point: int) -> None:
        self.code_point = code_point
        super().__init__(
            f"Lone surrogate U+{code_point:04X} at position {position} "
            "is not a Unicode scalar value",
            position,
        )


class ConfigError(Ef80Error):
    """Raised for configuration issues (missing file, invalid JSON, validation failure)."""


class PayloadError(Ef80Error):
    """Raised when input does not carry usable text (bad JSON, missing field, not UTF-8)."""

    pass
