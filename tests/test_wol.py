"""Tests for Wake-on-LAN functionality."""

from unittest.mock import MagicMock, patch

import pytest

from lanwake.core.mac import MacLengthError, NumberFormatError
from lanwake.core.payload import build_payload
from lanwake.core.sender import TransmitError
from lanwake.core.wol import WakeTarget, wake, wake_target


class TestWake:
    """Tests for wake function."""

    @patch("lanwake.core.wol.send_magic_packet")
    def test_wake_sends_magic_packet(self, mock_send: MagicMock) -> None:
        """Should parse the MAC and send it over IPv4 on port 9."""
        result = wake("AA:FF:B0:12:34:56")

        assert result is True
        mock_send.assert_called_once_with(
            bytes([0xAA, 0xFF, 0xB0, 0x12, 0x34, 0x56]), family="ipv4", port=9
        )

    @patch("lanwake.core.wol.send_magic_packet")
    def test_wake_ipv6_custom_port(self, mock_send: MagicMock) -> None:
        wake("AA:BB:CC:DD:EE:FF", family="ipv6", port=7)

        mock_send.assert_called_once_with(
            bytes([0xAA, 0xBB, 0xCC, 0xDD, 0xEE, 0xFF]), family="ipv6", port=7
        )

    @patch("lanwake.core.wol.send_magic_packet")
    def test_invalid_mac_never_sends(self, mock_send: MagicMock) -> None:
        with pytest.raises(NumberFormatError):
            wake("GG:00:00:00:00:00")
        with pytest.raises(MacLengthError):
            wake("AA:BB:CC")
        mock_send.assert_not_called()

    @patch("lanwake.core.wol.send_magic_packet", side_effect=TransmitError("Could not send packet"))
    def test_send_error_propagates(self, mock_send: MagicMock) -> None:
        with pytest.raises(TransmitError):
            wake("AA:BB:CC:DD:EE:FF")

    @patch("lanwake.core.sender.create_socket")
    def test_end_to_end_ipv4(self, mock_create: MagicMock) -> None:
        """From MAC text to the exact datagram handed to the socket."""
        sock = MagicMock()
        sock.__enter__.return_value = sock
        sock.__exit__.return_value = False
        sock.send.return_value = 102
        mock_create.return_value = sock

        assert wake("AA:FF:B0:12:34:56") is True

        payload = sock.send.call_args.args[0]
        assert payload == build_payload(bytes([0xAA, 0xFF, 0xB0, 0x12, 0x34, 0x56]))
        assert len(payload) == 102
        sock.connect.assert_called_once_with(("255.255.255.255", 9))


class TestWakeTarget:
    """Tests for wake_target."""

    @patch("lanwake.core.wol.send_magic_packet")
    def test_uses_target_family_and_port(self, mock_send: MagicMock) -> None:
        target = WakeTarget(name="nas", mac_address="11:22:33:44:55:66", family="ipv6", port=7)

        assert wake_target(target) is True
        mock_send.assert_called_once_with(
            bytes([0x11, 0x22, 0x33, 0x44, 0x55, 0x66]), family="ipv6", port=7
        )

    def test_defaults(self) -> None:
        target = WakeTarget(name="nas", mac_address="11:22:33:44:55:66")
        assert (target.family, target.port, target.description) == ("ipv4", 9, "")
