"""Tests for the top-level ef80escape package exports."""

import ef80escape
from ef80escape import core


class TestPackageExports:
    """The public API is importable from the package root."""

    def test_round_trip_from_root(self):
        assert ef80escape.decode(ef80escape.encode(b"\xff\x00abc")) == b"\xff\x00abc"

    def test_constants(self):
        assert ef80escape.ESCAPE_PREFIX == 0xEF00
        assert (ef80escape.RESERVED_FIRST, ef80escape.RESERVED_LAST) == (0xEF80, 0xEFFF)

    def test_all_names_exist(self):
        for name in ef80escape.__all__:
            assert hasattr(ef80escape, name), name


class TestCoreExports:
    """ef80escape.core exposes the codec, policy and errors only."""

    def test_all_names_exist(self):
        for name in core.__all__:
            assert hasattr(core, name), name

    def test_no_stdio_helpers(self):
        assert not {"ENCODING", "ENCODING_ERRORS", "configure_stdio"} & set(core.__all__)
