"""ef80escape - lossless conversion between bytes and UTF-8 text.

Non-UTF-8 bytes (0x80..0xFF) are encoded in the Private Use Area block
U+EF80..U+EFFF. Characters that collide with that block are escaped by
prefixing U+EF00.
"""

from ef80escape.core.codec import EncodeReport, analyze, decode, encode
from ef80escape.core.errors import (
    DanglingEscapePrefixError,
    DecodeError,
    Ef80Error,
    SurrogateInTextError,
)
from ef80escape.core.jsontext import dumps_field, loads_field
from ef80escape.core.policy import ESCAPE_PREFIX, RESERVED_FIRST, RESERVED_LAST
from ef80escape.core.pycodec import register as register_codec

__version__ = "0.1.0"

__all__ = [
    "encode",
    "decode",
    "analyze",
    "EncodeReport",
    "dumps_field",
    "loads_field",
    "register_codec",
    "ESCAPE_PREFIX",
    "RESERVED_FIRST",
    "RESERVED_LAST",
    "Ef80Error",
    "DecodeError",
    "DanglingEscapePrefixError",
    "SurrogateInTextError",
]
