"""
movepub CLI

Command-line interface for publishing Aptos Move packages.

The deployer account is derived from the SEED_PHRASE mnemonic
(m/44'/637'/0'/0'/0').  A .env file in the working directory is loaded at
startup; variables already in the environment take precedence.

Commands:
  deploy   - Compile and publish the Move package
  balance  - Show the deployer account's APT balance
  whoami   - Show the deployer address
  info     - Show configuration
"""

from __future__ import annotations

import os
import sys

import click

from .config import get_chain_id, get_node_url, load_env
from .errors import DeployError
from .sigil.mnemonic import DERIVATION_PATH, derive_account


# ============ Constants ============

VERSION = "0.1.0"


# ============ Banner ============


def _print_banner() -> None:
    border = click.style("  ◆ ═══════════════════════════════════════ ◆", fg="cyan")
    click.echo()
    click.echo(border)
    click.echo()
    click.echo(
        click.style("        M O V E P U B", fg="bright_white", bold=True)
        + click.style(f"        v{VERSION}", dim=True)
    )
    click.secho("        ─── Aptos Move package publisher ───", fg="cyan")
    click.echo()
    click.echo(border)
    click.echo()


# ============ Main CLI Group ============


@click.group(invoke_without_command=True)
@click.version_option(version=VERSION, prog_name="movepub")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """movepub: Aptos Move package publisher."""
    if ctx.invoked_subcommand is None:
        _print_banner()
        click.echo(ctx.get_help())


# ============ Top-level Commands ============

from .theurgy.deploy import deploy
from .theurgy.balance import balance

cli.add_command(deploy)
cli.add_command(balance)


# ============ Identity ============


@cli.command()
def whoami() -> None:
    """Show the deployer address derived from SEED_PHRASE."""
    try:
        deployer = derive_account(os.environ.get("SEED_PHRASE", ""))
    except DeployError as exc:
        click.echo(f"No valid seed phrase: {exc}")
        click.echo("Set SEED_PHRASE in the environment or in .env.")
        sys.exit(exc.exit_code)
    click.echo(f"Address: {deployer.address}")


# ============ Info ============


@cli.command()
def info() -> None:
    """Show configuration."""
    _print_banner()

    click.secho("  Status ─────────────────────────────────", fg="cyan")
    click.echo()

    try:
        address = derive_account(os.environ.get("SEED_PHRASE", "")).address
        address_text = click.style(address, fg="bright_white")
    except DeployError:
        address_text = click.style("not configured", fg="yellow") + click.style(
            "  (set SEED_PHRASE)", dim=True
        )

    click.echo(click.style("  Address:     ", dim=True) + address_text)
    click.echo(click.style("  Path:        ", dim=True) + click.style(DERIVATION_PATH, fg="bright_white"))
    click.echo(click.style("  Node:        ", dim=True) + click.style(get_node_url(), fg="bright_white"))
    click.echo(click.style("  Chain ID:    ", dim=True) + click.style(str(get_chain_id()), fg="bright_white"))
    click.echo()


# ============ Entry Points ============


def main() -> None:
    """movepub CLI entry point."""
    # Ensure UTF-8 output on Windows (for Unicode box-drawing / symbols)
    if sys.platform == "win32":
        try:
            sys.stdout.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
            sys.stderr.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
        except (AttributeError, OSError):
            pass
    load_env()
    cli()


if __name__ == "__main__":
    main()
