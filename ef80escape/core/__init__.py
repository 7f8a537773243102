"""Core codec, escape policy and error types."""

from ef80escape.core.codec import EncodeReport, analyze, decode, encode
from ef80escape.core.errors import (
    ConfigError,
    DanglingEscapePrefixError,
    DecodeError,
    Ef80Error,
    PayloadError,
    SurrogateInTextError,
)
from ef80escape.core.policy import (
    ESCAPE_PREFIX,
    RESERVED_FIRST,
    RESERVED_LAST,
    ScalarKind,
    byte_to_reserved,
    classify,
    is_conflict,
    reserved_to_byte,
)
from ef80escape.core.scanner import scan_utf8

__all__ = [
    # Codec
    "encode",
    "decode",
    "analyze",
    "EncodeReport",
    # Escape policy
    "ESCAPE_PREFIX",
    "RESERVED_FIRST",
    "RESERVED_LAST",
    "ScalarKind",
    "byte_to_reserved",
    "reserved_to_byte",
    "is_conflict",
    "classify",
    "scan_utf8",
    # Errors
    "Ef80Error",
    "DecodeError",
    "DanglingEscapePrefixError",
    "SurrogateInTextError",
    "ConfigError",
    "PayloadError",
]
