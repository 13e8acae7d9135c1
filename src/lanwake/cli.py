"""Command-line interface for lanwake."""

import logging
import sys
from pathlib import Path

import click
import yaml

from lanwake import __version__
from lanwake.core.mac import ParseError
from lanwake.core.sender import DEFAULT_PORT, SendError

DEFAULT_CONFIG = Path.home() / ".config" / "lanwake" / "config.yaml"


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )


def _load_hosts(config: str) -> list:
    from lanwake.config.loader import hosts_from_config, load_config, validate_config

    path = Path(config)
    if not path.exists():
        click.echo(f"Config file not found: {path}", err=True)
        sys.exit(1)
    try:
        raw = load_config(path)
    except yaml.YAMLError as exc:
        click.echo(f"Invalid YAML in {path}: {exc}", err=True)
        sys.exit(1)
    if not raw:
        click.echo("Config file is empty.", err=True)
        sys.exit(1)
    errors = validate_config(raw)
    if errors:
        click.echo("Config validation errors:", err=True)
        for e in errors:
            click.echo(f"  • {e}", err=True)
        sys.exit(1)
    return hosts_from_config(raw)


def _do_wake(mac_address: str, family: str, port: int) -> None:
    from lanwake.core.wol import wake as do_wake

    try:
        do_wake(mac_address, family=family, port=port)
    except ParseError as exc:
        click.echo(f"Error during parsing of MAC address: {exc}", err=True)
        sys.exit(1)
    except SendError as exc:
        click.echo(f"Error during sending: {exc}", err=True)
        sys.exit(2)


# ── Root group ────────────────────────────────────────────────────────────────


@click.group()
@click.version_option(version=__version__, prog_name="lanwake")
@click.option(
    "--config",
    "-c",
    default=str(DEFAULT_CONFIG),
    envvar="LANWAKE_CONFIG",
    show_default=True,
    help="Path to lanwake config.yaml",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config: str, verbose: bool) -> None:
    """lanwake — send Wake-on-LAN magic packets."""
    _setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["config"] = config


# ── send command ──────────────────────────────────────────────────────────────


@main.command()
@click.argument("mac", metavar="MAC")
@click.option("--ipv4", "-4", is_flag=True, help="Use IPv4 broadcast")
@click.option("--ipv6", "-6", is_flag=True, help="Use IPv6 (default)")
@click.option(
    "--port",
    "-p",
    default=DEFAULT_PORT,
    type=click.IntRange(0, 65535),
    show_default=True,
    help="Destination UDP port",
)
def send(mac: str, ipv4: bool, ipv6: bool, port: int) -> None:
    """Send a magic packet to the machine with the given MAC (e.g. AA:FF:B0:12:34:56)."""
    if ipv4 and ipv6:
        raise click.UsageError("Options -4 and -6 are mutually exclusive.")
    family = "ipv4" if ipv4 else "ipv6"
    _do_wake(mac, family, port)
    click.echo(f"WOL packet sent to {mac} via {family}")


# ── wake command ──────────────────────────────────────────────────────────────


@main.command()
@click.argument("host_name")
@click.pass_context
def wake(ctx: click.Context, host_name: str) -> None:
    """Send a Wake-on-LAN packet to a host from the config file."""
    from lanwake.config.loader import find_host

    targets = _load_hosts(ctx.obj["config"])
    match = find_host(targets, host_name)
    if match is None:
        click.echo(f"Host '{host_name}' not found.", err=True)
        sys.exit(1)

    _do_wake(match.mac_address, match.family, match.port)
    click.echo(f"WOL packet sent to {match.mac_address} ({match.name})")


# ── hosts group ───────────────────────────────────────────────────────────────


@main.group()
def hosts() -> None:
    """Inspect the configured hosts."""


@hosts.command("list")
@click.pass_context
def hosts_list(ctx: click.Context) -> None:
    """List all configured hosts."""
    targets = _load_hosts(ctx.obj["config"])
    if not targets:
        click.echo("No hosts configured.")
        return
    click.echo(f"{'NAME':<20} {'MAC ADDRESS':<19} {'FAMILY':<7} {'PORT':<6} {'DESCRIPTION'}")
    click.echo("─" * 70)
    for t in targets:
        click.echo(f"{t.name:<20} {t.mac_address:<19} {t.family:<7} {t.port:<6} {t.description}")


if __name__ == "__main__":
    main()
