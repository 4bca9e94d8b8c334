"""Unit tests for BSDIFF40 header parsing."""

import struct

import pytest

from rmpatch.api.bspatch.PatchPayload import HEADER_SIZE, MAGIC, PatchPayload
from rmpatch.api.profile.load_builtin_profiles import load_builtin_profiles

pytestmark = pytest.mark.bspatch


def _offt(value: int) -> bytes:
    if value < 0:
        return struct.pack("<Q", -value | (1 << 63))
    return struct.pack("<Q", value)


def _header(control: int, diff: int, output: int, magic: bytes = MAGIC) -> bytes:
    return magic + _offt(control) + _offt(diff) + _offt(output)


class TestParse:
    def test_parses_generated_payload(self, binaries):
        payload = PatchPayload.parse(binaries.payload)
        assert payload.algorithm == "BSDIFF40"
        assert payload.output_length == len(binaries.patched)
        assert HEADER_SIZE + payload.control_length + payload.diff_length + payload.extra_length == len(
            binaries.payload
        )

    def test_builtin_payload_header(self):
        profile = load_builtin_profiles()["webui-invincibility-1.7.0.1"]
        payload = profile.payload()
        assert payload.describe() == {
            "algorithm": "BSDIFF40",
            "size_bytes": 165,
            "control_length": 60,
            "diff_length": 59,
            "extra_length": 14,
            "output_length": 4303632,
        }

    def test_too_short(self):
        with pytest.raises(ValueError, match="too short"):
            PatchPayload.parse(MAGIC + b"\x00" * 4)

    def test_wrong_magic(self):
        with pytest.raises(ValueError, match="magic"):
            PatchPayload.parse(_header(0, 0, 0, magic=b"BSDIFF41"))

    def test_negative_length(self):
        with pytest.raises(ValueError, match="diff block length is negative"):
            PatchPayload.parse(_header(0, -5, 10))

    def test_blocks_exceed_payload(self):
        with pytest.raises(ValueError, match="exceed payload size"):
            PatchPayload.parse(_header(100, 100, 10) + b"\x00" * 20)

    def test_empty_blocks_accepted(self):
        payload = PatchPayload.parse(_header(0, 0, 0))
        assert payload.extra_length == 0
