"""lanwake: send Wake-on-LAN magic packets over IPv4 or IPv6."""

__version__ = "0.1.0"
