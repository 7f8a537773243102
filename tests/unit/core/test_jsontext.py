"""Tests for ef80escape.core.jsontext module."""

import json

import pytest

from ef80escape.core.errors import DanglingEscapePrefixError, PayloadError
from ef80escape.core.jsontext import DEFAULT_FIELD, dumps_field, loads_field

PREFIX = chr(0xEF00)


class TestDumpsField:
    """Tests for dumps_field function."""

    def test_default_field(self) -> None:
        """Bytes land in a one-field object under 'data'."""
        doc = dumps_field(b"\xffA")
        assert DEFAULT_FIELD == "data"
        assert json.loads(doc) == {"data": chr(0xEFFF) + "A"}

    def test_custom_field(self) -> None:
        doc = dumps_field(b"line", field="body")
        assert json.loads(doc) == {"body": "line"}

    def test_ensure_ascii(self) -> None:
        """With ensure_ascii, escape-range characters become \\u escapes."""
        doc = dumps_field(b"\xff", ensure_ascii=True)
        assert doc.isascii()
        assert "\\uefff" in doc

    def test_non_ascii_kept_by_default(self) -> None:
        doc = dumps_field("café".encode("utf-8"))
        assert "café" in doc

    def test_indent(self) -> None:
        doc = dumps_field(b"x", indent=2)
        assert doc == '{\n  "data": "x"\n}'


class TestLoadsField:
    """Tests for loads_field function."""

    @pytest.mark.parametrize(
        "data",
        [b"", b"plain", b"\x00\xff\xfe", "café".encode("utf-8"), (PREFIX + "x").encode("utf-8")],
    )
    def test_round_trip(self, data: bytes) -> None:
        assert loads_field(dumps_field(data)) == data

    def test_round_trip_ascii_document(self) -> None:
        data = b"\x80abc\xc3"
        assert loads_field(dumps_field(data, ensure_ascii=True)) == data

    def test_accepts_bytes_document(self) -> None:
        doc = dumps_field(b"\xff").encode("utf-8")
        assert loads_field(doc) == b"\xff"

    def test_custom_field_and_extra_keys(self) -> None:
        doc = json.dumps({"id": 7, "body": chr(0xEF80) + "ok"})
        assert loads_field(doc, field="body") == b"\x80ok"

    def test_invalid_json(self) -> None:
        with pytest.raises(PayloadError, match="Invalid JSON"):
            loads_field('{"data": ')

    def test_invalid_utf8_document(self) -> None:
        with pytest.raises(PayloadError, match="Invalid JSON"):
            loads_field(b'{"data": "\xff"}')

    def test_non_object(self) -> None:
        with pytest.raises(PayloadError, match="Expected a JSON object, got list"):
            loads_field('["data"]')

    def test_missing_field(self) -> None:
        with pytest.raises(PayloadError, match="Field 'body' not found"):
            loads_field('{"data": "x"}', field="body")

    def test_non_string_field(self) -> None:
        with pytest.raises(PayloadError, match="must be a string, got int"):
            loads_field('{"data": 5}')

    def test_decode_errors_propagate(self) -> None:
        """A dangling prefix in the field is not a payload problem."""
        with pytest.raises(DanglingEscapePrefixError):
            loads_field('{"data": "abc\\uef00"}')
