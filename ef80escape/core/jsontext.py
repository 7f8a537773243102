"""Carry bytes inside a JSON string field.

JSON strings must be Unicode, so raw bytes usually end up base64-encoded and
unreadable. Encoding them with ef80escape keeps mostly-UTF-8 payloads
readable while still round-tripping exactly:

    doc = dumps_field(b"log line \\xff", field="line")
    assert loads_field(doc, field="line") == b"log line \\xff"
"""

from __future__ import annotations

import json
from typing import Any

from ef80escape.core.codec import decode, encode
from ef80escape.core.errors import PayloadError

DEFAULT_FIELD = "data"


def dumps_field(
    data: bytes | bytearray | memoryview,
    field: str = DEFAULT_FIELD,
    *,
    ensure_ascii: bool = False,
    indent: int | None = None,
) -> str:
    """Serialize bytes as a one-field JSON object.

    Args:
        data: Bytes to carry.
        field: Name of the JSON field holding the encoded text.
        ensure_ascii: Escape every non-ASCII character as \\uXXXX.
        indent: Passed through to json.dumps.

    Returns:
        JSON document text.
    """
    return json.dumps({field: encode(data)}, ensure_ascii=ensure_ascii, indent=indent)


def loads_field(document: str | bytes, field: str = DEFAULT_FIELD) -> bytes:
    """Extract and decode the bytes carried in a JSON object's text field.

    Args:
        document: JSON text (str, or UTF-8 bytes).
        field: Name of the field to read.

    Returns:
        The decoded bytes.

    Raises:
        PayloadError: If the document is not a JSON object, lacks the field,
            or the field is not a string.
        DecodeError: If the field's text is not valid encoded text.
    """
    try:
        parsed: Any = json.loads(document)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise PayloadError(f"Invalid JSON document: {e}") from e

    if not isinstance(parsed, dict):
        raise PayloadError(f"Expected a JSON object, got {type(parsed).__name__}")
    if field not in parsed:
        raise PayloadError(f"Field '{field}' not found in JSON object")

    value = parsed[field]
    if not isinstance(value, str):
        raise PayloadError(
            f"Field '{field}' must be a string, got {type(value).__name__}"
        )
    return decode(value)
