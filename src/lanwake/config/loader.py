"""YAML host inventory loader and validator."""

from pathlib import Path
from typing import Any, Optional

import yaml

from lanwake.core.mac import ParseError, parse_mac
from lanwake.core.sender import DEFAULT_PORT, ENDPOINTS
from lanwake.core.wol import WakeTarget


class ConfigError(Exception):
    """Raised for invalid or missing configuration."""


def load_config(path: Path) -> Optional[dict[str, Any]]:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the YAML config file

    Returns:
        Parsed configuration dictionary, or None if file is empty

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML is invalid
    """
    with open(path) as f:
        result: Optional[dict[str, Any]] = yaml.safe_load(f)
        return result


def _check_family(value: Any, prefix: str) -> Optional[str]:
    if not isinstance(value, str) or value not in ENDPOINTS:
        return f"{prefix}: unknown family '{value}' (expected one of {', '.join(ENDPOINTS)})"
    return None


def _check_port(value: Any, prefix: str) -> Optional[str]:
    # bool is an int subclass; "port: yes" is not a port
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 65535:
        return f"{prefix}: port must be an integer between 0 and 65535, got '{value}'"
    return None


def validate_config(config: dict[str, Any]) -> list[str]:
    """
    Validate a loaded configuration dictionary.

    Returns:
        List of validation error messages (empty list = valid)
    """
    errors: list[str] = []

    if not isinstance(config, dict):
        return ["Config root must be a YAML mapping"]

    settings = config.get("settings") or {}
    if not isinstance(settings, dict):
        errors.append("'settings' must be a mapping")
        settings = {}
    if "family" in settings:
        err = _check_family(settings["family"], "settings")
        if err:
            errors.append(err)
    if "port" in settings:
        err = _check_port(settings["port"], "settings")
        if err:
            errors.append(err)

    hosts = config.get("hosts")
    if not hosts:
        errors.append("'hosts' key is required and must be a non-empty list")
        return errors

    if not isinstance(hosts, list):
        errors.append("'hosts' must be a list")
        return errors

    seen: set[str] = set()
    for i, host in enumerate(hosts):
        prefix = f"hosts[{i}]"
        if not isinstance(host, dict):
            errors.append(f"{prefix}: must be a mapping")
            continue
        for field in ("name", "mac_address"):
            if not host.get(field):
                errors.append(f"{prefix}: missing required field '{field}'")
        name = host.get("name")
        if name and not isinstance(name, str):
            errors.append(f"{prefix}: name must be a string, got '{name}'")
        elif name:
            if name in seen:
                errors.append(f"{prefix}: duplicate host name '{name}'")
            seen.add(name)
        mac = host.get("mac_address")
        if mac and not isinstance(mac, str):
            # unquoted values like 11:22:33:44:55:66 load as YAML 1.1 base-60 integers
            errors.append(f"{prefix}: mac_address must be a quoted string, got '{mac}'")
        elif mac:
            try:
                parse_mac(mac)
            except ParseError as exc:
                errors.append(f"{prefix}: invalid mac_address '{mac}' ({exc})")
        if "family" in host:
            err = _check_family(host["family"], prefix)
            if err:
                errors.append(err)
        if "port" in host:
            err = _check_port(host["port"], prefix)
            if err:
                errors.append(err)

    return errors


def hosts_from_config(config: dict[str, Any]) -> list[WakeTarget]:
    """
    Construct a list of WakeTarget objects from a validated config dict.

    Per-host ``family`` and ``port`` fall back to the ``settings`` section,
    then to IPv4 on port 9.

    Raises:
        ConfigError: If a host entry lacks a required field
    """
    settings = config.get("settings") or {}
    default_family = settings.get("family", "ipv4")
    default_port = settings.get("port", DEFAULT_PORT)

    targets: list[WakeTarget] = []
    for raw in config.get("hosts", []):
        try:
            name = raw["name"]
            mac = raw["mac_address"]
        except KeyError as exc:
            raise ConfigError(f"Host entry is missing required field {exc}") from exc
        targets.append(
            WakeTarget(
                name=str(name),
                mac_address=str(mac),
                family=raw.get("family", default_family),
                port=int(raw.get("port", default_port)),
                description=raw.get("description") or "",
            )
        )
    return targets


def find_host(targets: list[WakeTarget], name: str) -> Optional[WakeTarget]:
    """Return the target called ``name``, or None."""
    return next((t for t in targets if t.name == name), None)
