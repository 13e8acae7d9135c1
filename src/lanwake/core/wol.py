"""Wake-on-LAN functionality."""

import logging
from dataclasses import dataclass

from lanwake.core.mac import format_mac, parse_mac
from lanwake.core.sender import DEFAULT_PORT, send_magic_packet

logger = logging.getLogger(__name__)


@dataclass
class WakeTarget:
    """A named machine from the host inventory."""

    name: str
    mac_address: str
    family: str = "ipv4"
    port: int = DEFAULT_PORT
    description: str = ""


def wake(mac_address: str, family: str = "ipv4", port: int = DEFAULT_PORT) -> bool:
    """
    Send a Wake-on-LAN magic packet to wake a remote machine.

    Args:
        mac_address: MAC address of the target machine (e.g., "AA:BB:CC:DD:EE:FF")
        family: "ipv4" for 255.255.255.255 or "ipv6" for ff00::2 (default: ipv4)
        port: UDP port for WOL packet (default: 9)

    Returns:
        True if packet was sent successfully

    Raises:
        ParseError: If ``mac_address`` is not a valid MAC address
        SendError: If the packet could not be sent
    """
    mac = parse_mac(mac_address)
    logger.info("Sending WOL magic packet to %s via %s port %d", format_mac(mac), family, port)
    send_magic_packet(mac, family=family, port=port)
    logger.debug("WOL packet sent successfully")
    return True


def wake_target(target: WakeTarget) -> bool:
    """Wake a configured host using its own family and port."""
    logger.info("Waking host '%s'", target.name)
    return wake(target.mac_address, family=target.family, port=target.port)
