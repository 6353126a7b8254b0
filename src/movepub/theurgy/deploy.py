"""
Deploy - Compile and publish the Move package.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from ..config import (
    DEFAULT_GAS_LIMIT,
    DEFAULT_GAS_UNIT_PRICE,
    DEFAULT_NODE_URL,
    DEFAULT_PACKAGE_FILE,
    MAINNET_CHAIN_ID,
    DeployConfig,
)
from ..deployment import run_deployment
from ..errors import DeployError


@click.command()
@click.option(
    "--seed-phrase",
    envvar="SEED_PHRASE",
    default="",
    show_default=False,
    help="Deployer mnemonic (prefer the SEED_PHRASE environment variable)",
)
@click.option(
    "--node-url",
    envvar="APTOS_NODE_URL",
    default=DEFAULT_NODE_URL,
    help="Aptos fullnode URL",
)
@click.option("--chain-id", envvar="APTOS_CHAIN_ID", default=MAINNET_CHAIN_ID, type=int, help="Chain ID")
@click.option(
    "--package-dir",
    default=".",
    type=click.Path(file_okay=False, path_type=Path),
    help="Move package directory",
)
@click.option(
    "--package-file",
    default=DEFAULT_PACKAGE_FILE,
    type=click.Path(dir_okay=False, path_type=Path),
    help="File published by --via-sdk, relative to the package directory",
)
@click.option("--gas-limit", default=DEFAULT_GAS_LIMIT, type=int, help="Max gas amount")
@click.option("--gas-unit-price", default=DEFAULT_GAS_UNIT_PRICE, type=int, help="Gas unit price (octas)")
@click.option(
    "--via-sdk",
    is_flag=True,
    help="Submit a publish transaction directly before running 'aptos move publish'",
)
def deploy(
    seed_phrase: str,
    node_url: str,
    chain_id: int,
    package_dir: Path,
    package_file: Path,
    gas_limit: int,
    gas_unit_price: int,
    via_sdk: bool,
) -> None:
    """Compile and publish the Move package to Aptos.

    Always compiles, derives the deployer account and finishes with
    'aptos move publish'.  With --via-sdk the package is also published
    by a signed 0x1::code::publish_package_txn transaction first.
    """
    click.echo()
    click.echo(
        click.style("  ◆ ", fg="cyan")
        + click.style("Deploy", fg="bright_white", bold=True)
        + click.style(f" ─── {node_url}", fg="cyan")
    )
    click.echo()

    config = DeployConfig(
        seed_phrase=seed_phrase,
        node_url=node_url,
        chain_id=chain_id,
        package_dir=package_dir,
        package_file=package_file,
        gas_limit=gas_limit,
        gas_unit_price=gas_unit_price,
        submit_via_sdk=via_sdk,
    )

    try:
        result = run_deployment(config)
    except DeployError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(exc.exit_code)
    except Exception as exc:
        click.secho(f"Deployment failed: {exc}", fg="red")
        sys.exit(1)

    click.echo()
    click.echo(
        click.style("  ◆ ", fg="green")
        + click.style("Deployment Complete", fg="green", bold=True)
    )
    if result.tx_hash:
        click.echo(f"  TX: {result.tx_hash}")
    click.echo()
