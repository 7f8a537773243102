"""Expose ef80escape through Python's codecs machinery.

After register(), the conversion reads like any other text codec:

    text = raw.decode("ef80escape")     # same as encode(raw)
    raw = text.encode("ef80escape")     # same as decode(text)

Only errors="strict" is supported: encoding bytes never fails, and a
malformed text is always reported rather than patched over.
"""

from __future__ import annotations

import codecs

from ef80escape.core.codec import decode, encode
from ef80escape.core.errors import DecodeError

CODEC_NAME = "ef80escape"

_registered = False


def _check_errors(errors: str) -> None:
    if errors != "strict":
        raise ValueError(f"{CODEC_NAME} codec only supports errors='strict', got {errors!r}")


class Codec(codecs.Codec):
    """Python codec: bytes.decode runs encode() and str.encode runs decode()."""

    def encode(self, input: str, errors: str = "strict") -> tuple[bytes, int]:
        """Text to bytes (ef80escape decode)."""
        _check_errors(errors)
        try:
            return decode(input), len(input)
        except DecodeError as e:
            raise UnicodeEncodeError(
                CODEC_NAME, input, e.position, e.position + 1, e.message
            ) from e

    def decode(self, input: bytes, errors: str = "strict") -> tuple[str, int]:
        """Bytes to text (ef80escape encode)."""
        _check_errors(errors)
        raw = bytes(input)
        return encode(raw), len(raw)


def _search(name: str) -> codecs.CodecInfo | None:
    if name.replace("-", "_") != CODEC_NAME:
        return None
    codec = Codec()
    return codecs.CodecInfo(
        name=CODEC_NAME,
        encode=codec.encode,
        decode=codec.decode,
    )


def register() -> None:
    """Register the ef80escape codec. Safe to call more than once."""
    global _registered
    if _registered:
        return
    codecs.register(_search)
    _registered = True
