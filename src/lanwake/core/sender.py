"""UDP transmission of magic packets."""

import ipaddress
import logging
import socket
from dataclasses import dataclass
from typing import Optional

from lanwake.core.payload import build_payload

logger = logging.getLogger(__name__)

DEFAULT_PORT = 9


class SendError(Exception):
    """Base class for failures while sending a magic packet."""

    def __init__(self, message: str, cause: Optional[OSError] = None) -> None:
        self.cause = cause
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class SocketError(SendError):
    """Raised when the socket cannot be created, bound or set to broadcast."""


class ConnectError(SendError):
    """Raised when the socket cannot be associated with the destination."""


class TransmitError(SendError):
    """Raised when the payload is not fully handed to the transport."""


@dataclass(frozen=True)
class Endpoint:
    """Bind and destination addresses for one address family."""

    family: str
    bind_address: str
    destination: str


IPV4 = Endpoint(family="ipv4", bind_address="0.0.0.0", destination="255.255.255.255")
IPV6 = Endpoint(family="ipv6", bind_address="::", destination="ff00::2")

ENDPOINTS = {e.family: e for e in (IPV4, IPV6)}


def create_socket(address: tuple[str, int]) -> socket.socket:
    """
    Create a UDP socket bound to ``address``.

    The host part of ``address`` must be an IPv4 or IPv6 literal; the
    address family is taken from it. IPv4 sockets additionally get
    SO_BROADCAST, without which sending to 255.255.255.255 fails with a
    permission error.

    Raises:
        SocketError: If the socket cannot be created, bound or configured
    """
    host, port = address
    try:
        version = ipaddress.ip_address(host).version
    except ValueError as exc:
        raise SocketError(f"Not an IP address literal: '{host}'") from exc
    family = socket.AF_INET6 if version == 6 else socket.AF_INET
    try:
        sock = socket.socket(family, socket.SOCK_DGRAM)
    except OSError as exc:
        raise SocketError("Could not create socket", exc) from exc
    try:
        sock.bind((host, port))
    except OSError as exc:
        sock.close()
        raise SocketError(f"Could not bind socket to {host}:{port}", exc) from exc
    if family == socket.AF_INET:
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
        except OSError as exc:
            sock.close()
            raise SocketError("Could not enable broadcast on socket", exc) from exc
    return sock


def _send(mac: bytes, endpoint: Endpoint, port: int) -> None:
    payload = build_payload(mac)
    with create_socket((endpoint.bind_address, 0)) as sock:
        try:
            sock.connect((endpoint.destination, port))
        except OSError as exc:
            raise ConnectError(f"Could not connect to {endpoint.destination}", exc) from exc
        try:
            sent = sock.send(payload)
        except OSError as exc:
            raise TransmitError("Could not send packet", exc) from exc
        if sent != len(payload):
            raise TransmitError(f"Only {sent} of {len(payload)} bytes were sent")
    logger.debug(
        "Sent %d-byte magic packet to %s port %d", len(payload), endpoint.destination, port
    )


def send_magic_packet_v4(mac: bytes, port: int = DEFAULT_PORT) -> None:
    """
    Send the magic packet for ``mac`` to the IPv4 limited broadcast address.

    Args:
        mac: The six raw bytes of the target MAC address
        port: Destination UDP port (default: 9)

    Raises:
        MacLengthError: If ``mac`` is not six bytes long
        SendError: If socket setup, connect or send fails
    """
    _send(mac, IPV4, port)


def send_magic_packet_v6(mac: bytes, port: int = DEFAULT_PORT) -> None:
    """Send the magic packet for ``mac`` to ff00::2 over IPv6."""
    _send(mac, IPV6, port)


def send_magic_packet(mac: bytes, family: str = "ipv4", port: int = DEFAULT_PORT) -> None:
    """
    Send the magic packet using the named address family.

    Raises:
        ValueError: If ``family`` is neither "ipv4" nor "ipv6"
    """
    endpoint = ENDPOINTS.get(family)
    if endpoint is None:
        raise ValueError(f"Unknown address family '{family}' (expected 'ipv4' or 'ipv6')")
    _send(mac, endpoint, port)
