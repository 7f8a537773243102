"""Tests for ef80escape.core.pycodec module."""

import codecs

import pytest

from ef80escape.core.pycodec import CODEC_NAME, Codec, register

PREFIX = chr(0xEF00)


@pytest.fixture(autouse=True)
def registered() -> None:
    register()


class TestRegistration:
    """Tests for register()."""

    def test_lookup(self) -> None:
        assert codecs.lookup("ef80escape").name == CODEC_NAME

    def test_lookup_is_case_insensitive(self) -> None:
        assert codecs.lookup("EF80ESCAPE").name == CODEC_NAME

    def test_register_twice(self) -> None:
        """Registering again is harmless."""
        register()
        register()
        assert b"a".decode("ef80escape") == "a"


class TestConversions:
    """bytes.decode encodes, str.encode decodes."""

    def test_bytes_to_text(self) -> None:
        assert b"\xffA".decode("ef80escape") == chr(0xEFFF) + "A"

    def test_text_to_bytes(self) -> None:
        assert (chr(0xEFFF) + "A").encode("ef80escape") == b"\xffA"

    def test_round_trip(self) -> None:
        data = b"\x00caf\xc3\xa9\xff" + (PREFIX + chr(0xEF81)).encode("utf-8")
        assert data.decode("ef80escape").encode("ef80escape") == data

    def test_codecs_module_functions(self) -> None:
        assert codecs.decode(b"\x80", "ef80escape") == chr(0xEF80)
        assert codecs.encode(chr(0xEF80), "ef80escape") == b"\x80"

    def test_bytearray_input(self) -> None:
        assert bytearray(b"\xfe").decode("ef80escape") == chr(0xEFFE)

    def test_codec_class_directly(self) -> None:
        """Codec.decode takes bytes to text and Codec.encode takes text to bytes."""
        codec = Codec()
        assert codec.decode(b"\xffA") == (chr(0xEFFF) + "A", 2)
        assert codec.encode(PREFIX + chr(0xEF80)) == (chr(0xEF80).encode("utf-8"), 2)


class TestErrors:
    """Error reporting through the codec interface."""

    def test_dangling_prefix_is_unicode_encode_error(self) -> None:
        with pytest.raises(UnicodeEncodeError) as exc_info:
            ("ab" + PREFIX).encode("ef80escape")
        assert exc_info.value.encoding == CODEC_NAME
        assert exc_info.value.start == 2
        assert exc_info.value.end == 3

    def test_lone_surrogate_is_unicode_encode_error(self) -> None:
        with pytest.raises(UnicodeEncodeError) as exc_info:
            "a\udc80".encode("ef80escape")
        assert exc_info.value.start == 1

    @pytest.mark.parametrize("errors", ["ignore", "replace", "surrogateescape"])
    def test_only_strict_errors(self, errors: str) -> None:
        with pytest.raises(ValueError, match="errors='strict'"):
            b"a".decode("ef80escape", errors)
        with pytest.raises(ValueError, match="errors='strict'"):
            "a".encode("ef80escape", errors)
