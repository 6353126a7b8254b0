"""
Balance - Query the deployer account's APT balance.
"""

from __future__ import annotations

import sys

import click

from ..config import DEFAULT_NODE_URL
from ..errors import DeployError
from ..pneuma.rest import get_balance
from ..sigil.mnemonic import derive_account

OCTAS_PER_APT = 100_000_000


@click.command()
@click.option("--seed-phrase", envvar="SEED_PHRASE", default="", show_default=False, help="Deployer mnemonic")
@click.option(
    "--node-url",
    envvar="APTOS_NODE_URL",
    default=DEFAULT_NODE_URL,
    help="Aptos fullnode URL",
)
def balance(seed_phrase: str, node_url: str) -> None:
    """Show the deployer account's APT balance."""
    try:
        address = derive_account(seed_phrase).address
    except DeployError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(exc.exit_code)

    try:
        octas = get_balance(address, node_url=node_url)
    except Exception as exc:
        click.secho(f"Balance query failed: {exc}", fg="red")
        sys.exit(1)

    click.echo(f"Address: {address}")
    click.echo(f"Balance: {octas / OCTAS_PER_APT:.8f} APT ({octas} octas)")
