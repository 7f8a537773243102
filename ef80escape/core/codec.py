"""Lossless conversion between arbitrary bytes and conformant Unicode text.

Usage:
    from ef80escape.core.codec import decode, encode

    text = encode(b"caf\\xc3\\xa9 \\xff")   # 'café \\uefff'
    assert decode(text) == b"caf\\xc3\\xa9 \\xff"

Valid UTF-8 comes through as the characters it encodes. Each byte that cannot
be read as UTF-8 becomes one character of the reserved block U+EF80..U+EFFF.
Characters of the input that already sit in that block, or equal the escape
prefix U+EF00, are written with a U+EF00 prefix so decode() can tell them
apart from raw bytes.

Both directions are pure functions. Nothing here logs.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from ef80escape.core.errors import DanglingEscapePrefixError, SurrogateInTextError
from ef80escape.core.policy import (
    ESCAPE_PREFIX_CHAR,
    ScalarKind,
    byte_to_reserved,
    classify,
    is_conflict,
    reserved_to_byte,
)
from ef80escape.core.scanner import scan_utf8

# Characters the encoder must prefix when they appear in genuine content
_CONFLICT_PATTERN = re.compile("[\uef00\uef80-\uefff]")

# Escape prefix plus whatever follows it, or a lone reserved character.
# DOTALL so the prefix can protect a newline like any other character.
_ESCAPE_TOKEN_PATTERN = re.compile("\uef00(.)?|[\uef80-\uefff]", re.DOTALL)

_SURROGATE_PATTERN = re.compile("[\ud800-\udfff]")


@dataclass(frozen=True)
class EncodeReport:
    """Summary of what encode() does to a buffer."""

    byte_count: int
    char_count: int
    raw_bytes: int  # Bytes escaped into the reserved block
    escaped_conflicts: int  # Genuine characters given an escape prefix

    @property
    def is_utf8(self) -> bool:
        """True if the buffer was valid UTF-8 throughout."""
        return self.raw_bytes == 0


def _as_bytes(data: bytes | bytearray | memoryview) -> bytes:
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"Expected a bytes-like object, got {type(data).__name__}")


def _iter_units(data: bytes) -> Iterator[tuple[int, bool]]:
    """Walk data, yielding (code_point, is_raw_byte) per output unit."""
    offset = 0
    length = len(data)
    while offset < length:
        scanned = scan_utf8(data, offset)
        if scanned is None:
            # ASCII always scans, so only high bytes land here
            yield byte_to_reserved(data[offset]), True
            offset += 1
            continue
        code_point, consumed = scanned
        yield code_point, False
        offset += consumed


def _prefix_conflicts(text: str) -> str:
    return _CONFLICT_PATTERN.sub(lambda m: ESCAPE_PREFIX_CHAR + m.group(), text)


def encode(data: bytes | bytearray | memoryview) -> str:
    """Convert bytes to text that decode() turns back into the same bytes.

    Never fails for bytes-like input. The result is always valid Unicode
    (no surrogates) and can be stored anywhere UTF-8 text is accepted.

    Args:
        data: Arbitrary bytes, typically mostly UTF-8.

    Returns:
        The encoded text. Empty input gives an empty string.

    Raises:
        TypeError: If data is not bytes, bytearray or memoryview.

    Examples:
        >>> encode(b"Hi")
        'Hi'
        >>> encode(b"\\xffA") == "\\uefffA"
        True
        >>> encode("\\uef80".encode("utf-8")) == "\\uef00\\uef80"
        True
    """
    raw = _as_bytes(data)

    # Fast path: strict UTF-8 accepts exactly what the scanner accepts
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        pass
    else:
        return _prefix_conflicts(text)

    pieces: list[str] = []
    for code_point, is_raw in _iter_units(raw):
        if not is_raw and is_conflict(code_point):
            pieces.append(ESCAPE_PREFIX_CHAR)
        pieces.append(chr(code_point))
    return "".join(pieces)


def _utf8(segment: str, start: int) -> bytes:
    """Encode a run of plain characters, rejecting lone surrogates."""
    try:
        return segment.encode("utf-8")
    except UnicodeEncodeError as e:
        match = _SURROGATE_PATTERN.search(segment)
        index = match.start() if match else e.start
        raise SurrogateInTextError(start + index, ord(segment[index])) from e


def decode(text: str) -> bytes:
    """Convert text produced by encode() back into the original bytes.

    U+EF00 makes the next character literal. Other characters of the
    reserved block U+EF80..U+EFFF each become one raw byte 0x80..0xFF.
    Everything else is written as its UTF-8 encoding.

    Args:
        text: Encoded text.

    Returns:
        The reconstructed bytes.

    Raises:
        DanglingEscapePrefixError: If the text ends with an unpaired U+EF00.
        SurrogateInTextError: If the text contains a lone surrogate.
        TypeError: If text is not a str.

    Examples:
        >>> decode("\\uefffA")
        b'\\xffA'
        >>> decode("\\uef00\\uef80") == "\\uef80".encode("utf-8")
        True
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")

    if _CONFLICT_PATTERN.search(text) is None:
        return _utf8(text, 0)

    out = bytearray()
    position = 0
    for match in _ESCAPE_TOKEN_PATTERN.finditer(text):
        start = match.start()
        if start > position:
            out += _utf8(text[position:start], position)

        kind = classify(ord(text[start]))
        if kind is ScalarKind.ESCAPE_PREFIX:
            literal = match.group(1)
            if literal is None:
                raise DanglingEscapePrefixError(start)
            out += _utf8(literal, start + 1)
        else:
            out.append(reserved_to_byte(ord(text[start])))
        position = match.end()

    if position < len(text):
        out += _utf8(text[position:], position)
    return bytes(out)


def analyze(data: bytes | bytearray | memoryview) -> EncodeReport:
    """Describe how encode() treats data without building the text.

    Args:
        data: Arbitrary bytes.

    Returns:
        EncodeReport with counts of raw-byte escapes and prefixed conflicts.
    """
    raw = _as_bytes(data)
    char_count = 0
    raw_bytes = 0
    escaped_conflicts = 0
    for code_point, is_raw in _iter_units(raw):
        char_count += 1
        if is_raw:
            raw_bytes += 1
        elif is_conflict(code_point):
            escaped_conflicts += 1
            char_count += 1
    return EncodeReport(
        byte_count=len(raw),
        char_count=char_count,
        raw_bytes=raw_bytes,
        escaped_conflicts=escaped_conflicts,
    )
