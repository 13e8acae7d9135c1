"""MAC address parsing."""

import re

MAC_LENGTH = 6

_HEX_BYTE_RE = re.compile(r"[0-9A-Fa-f]{1,2}")


class ParseError(ValueError):
    """Base class for MAC address parse failures."""


class NumberFormatError(ParseError):
    """Raised when a MAC token is not a one or two digit hex number."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Not a hex number: {token!r}")


class MacLengthError(ParseError):
    """Raised when a MAC address does not have exactly six bytes."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"Illegal MAC address length: expected {MAC_LENGTH} bytes, got {length}")


def parse_mac(text: str) -> bytes:
    """
    Parse a colon-separated MAC address into its six raw bytes.

    Args:
        text: MAC address such as "AA:FF:B0:12:34:56" (hex digits are case-insensitive)

    Returns:
        The six address bytes

    Raises:
        NumberFormatError: If a token is not a valid hex byte
        MacLengthError: If the address does not have exactly six tokens
    """
    values: list[int] = []
    for token in text.split(":"):
        # int(..., 16) alone would also accept "0x", signs, underscores and whitespace
        if not _HEX_BYTE_RE.fullmatch(token):
            raise NumberFormatError(token)
        values.append(int(token, 16))
    if len(values) != MAC_LENGTH:
        raise MacLengthError(len(values))
    return bytes(values)


def format_mac(mac: bytes) -> str:
    """Render raw MAC bytes as upper-case colon-separated hex."""
    return ":".join(f"{b:02X}" for b in mac)
