"""Tests for magic packet payload construction."""

import pytest

from lanwake.core.mac import MacLengthError
from lanwake.core.payload import MAC_REPEATS, PAYLOAD_LENGTH, SYNC_STREAM, build_payload


class TestBuildPayload:
    """Tests for build_payload."""

    def test_known_payload(self) -> None:
        mac = bytes([0x00, 0x01, 0x02, 0x03, 0x04, 0x05])
        expected = b"\xff\xff\xff\xff\xff\xff" + b"\x00\x01\x02\x03\x04\x05" * 16

        assert build_payload(mac) == expected

    @pytest.mark.parametrize(
        "mac",
        [bytes(6), b"\xff" * 6, bytes([0xAA, 0xFF, 0xB0, 0x12, 0x34, 0x56])],
    )
    def test_structure(self, mac: bytes) -> None:
        """Header is six 0xFF bytes and each following block is the MAC."""
        payload = build_payload(mac)

        assert len(payload) == PAYLOAD_LENGTH == 102
        assert payload[:6] == b"\xff" * 6
        for i in range(1, 17):
            assert payload[6 * i : 6 * i + 6] == mac

    def test_accepts_list_of_ints(self) -> None:
        expected = SYNC_STREAM + bytes([1, 2, 3, 4, 5, 6]) * MAC_REPEATS
        assert build_payload([1, 2, 3, 4, 5, 6]) == expected

    @pytest.mark.parametrize("length", [0, 5, 7])
    def test_wrong_length_raises(self, length: int) -> None:
        with pytest.raises(MacLengthError) as exc_info:
            build_payload(bytes(length))
        assert exc_info.value.length == length
