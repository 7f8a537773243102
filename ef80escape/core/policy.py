"""Escape policy: the fixed mapping between raw bytes and reserved characters.

Non-UTF-8 bytes (0x80..0xFF) are represented by the 128 Private Use Area
characters U+EF80..U+EFFF. Genuine characters that collide with that block,
or with the escape prefix U+EF00 itself, are written as U+EF00 followed by
the character.

The block was taken from MirBSD's OPTU-8 encoding. These values are part of
the encoded format: changing them breaks every previously encoded string.

UTF-8 forms of the boundary values:

    U+EF00: EE BC 80
    U+EF80: EE BE 80
    U+EFBF: EE BE BF
    U+EFC0: EE BF 80
    U+EFFF: EE BF BF
"""

from enum import Enum

ESCAPE_PREFIX = 0xEF00
ESCAPE_PREFIX_CHAR = chr(ESCAPE_PREFIX)

RESERVED_FIRST = 0xEF80
RESERVED_LAST = 0xEFFF

HIGH_BYTE_FIRST = 0x80
HIGH_BYTE_LAST = 0xFF


class ScalarKind(Enum):
    """How a decoded character is treated by the escaping machinery."""

    PLAIN = "plain"  # Carried as-is
    RESERVED = "reserved"  # Stands for one raw high byte
    ESCAPE_PREFIX = "escape_prefix"  # Next character is literal


def byte_to_reserved(byte: int) -> int:
    """Map a high byte (0x80..0xFF) to its reserved code point (U+EF80..U+EFFF).

    Raises:
        ValueError: If byte is outside 0x80..0xFF.
    """
    if not HIGH_BYTE_FIRST <= byte <= HIGH_BYTE_LAST:
        raise ValueError(f"Only bytes 0x80..0xFF have a reserved character, got {byte:#x}")
    return RESERVED_FIRST + (byte - HIGH_BYTE_FIRST)


def reserved_to_byte(value: int) -> int:
    """Map a reserved code point (U+EF80..U+EFFF) back to its raw byte.

    Raises:
        ValueError: If value is outside the reserved block.
    """
    if not is_reserved(value):
        raise ValueError(f"U+{value:04X} is not in the reserved block U+EF80..U+EFFF")
    return HIGH_BYTE_FIRST + (value - RESERVED_FIRST)


def is_reserved(value: int) -> bool:
    return RESERVED_FIRST <= value <= RESERVED_LAST


def is_conflict(value: int) -> bool:
    """True if a genuine character with this code point needs an escape prefix."""
    return value == ESCAPE_PREFIX or is_reserved(value)


def classify(value: int) -> ScalarKind:
    if value == ESCAPE_PREFIX:
        return ScalarKind.ESCAPE_PREFIX
    if is_reserved(value):
        return ScalarKind.RESERVED
    return ScalarKind.PLAIN
