"""Magic packet payload construction."""

from lanwake.core.mac import MAC_LENGTH, MacLengthError

SYNC_STREAM = b"\xff" * 6
MAC_REPEATS = 16
PAYLOAD_LENGTH = len(SYNC_STREAM) + MAC_LENGTH * MAC_REPEATS  # 102


def build_payload(mac: bytes) -> bytes:
    """
    Build the Wake-on-LAN magic packet payload.

    The payload is six 0xFF bytes followed by the MAC address repeated
    sixteen times.

    Args:
        mac: The six raw bytes of the target MAC address

    Returns:
        The 102-byte payload

    Raises:
        MacLengthError: If ``mac`` is not exactly six bytes long
    """
    if len(mac) != MAC_LENGTH:
        raise MacLengthError(len(mac))
    return SYNC_STREAM + bytes(mac) * MAC_REPEATS
