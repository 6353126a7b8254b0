"""
Deployment - Compile and publish a Move package.

Flow:
1. Compile the package with the aptos CLI
2. Derive the deployer account from the seed phrase
3. (--via-sdk) Build the 0x1::code::publish_package_txn payload
4. (--via-sdk) Fetch the account's sequence number
5. (--via-sdk) Sign and submit the transaction
6. (--via-sdk) Wait for it to commit
7. Publish through `aptos move publish`

Any failure stops the run; nothing is retried.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

import click

from .config import DeployConfig
from .errors import TransactionFailedError
from .pneuma.rest import get_sequence_number, submit_bcs_transaction, wait_for_transaction
from .pneuma.tx import build_publish_payload, build_raw_transaction, sign_transaction
from .sigil.mnemonic import derive_account
from .toolchain import compile_package, publish_package_cli


@dataclass(frozen=True)
class DeploymentResult:
    address: str
    tx_hash: Optional[str] = None
    vm_status: Optional[str] = None
    cli_published: bool = False


def run_deployment(
    config: DeployConfig,
    echo: Callable[[str], None] = click.echo,
) -> DeploymentResult:
    """
    Run the full deployment sequence once.

    Args:
        config: Deployment parameters
        echo: Progress sink (default: click.echo)

    Returns:
        DeploymentResult describing what was published

    Raises:
        CompilationError: aptos move compile failed
        InvalidMnemonicError: Seed phrase failed validation
        TransactionFailedError: Publish transaction committed unsuccessfully
        PublishCommandError: aptos move publish failed
        NodeApiError: The node rejected a request
    """
    total_steps = 7 if config.submit_via_sdk else 3
    step = 0

    def progress(message: str) -> None:
        nonlocal step
        step += 1
        echo(click.style(f"  [{step}/{total_steps}] {message}", fg="bright_white"))

    progress("Compiling Move package...")
    compile_package(config.package_dir, config.compile_command)

    progress("Deriving deployer account...")
    deployer = derive_account(config.seed_phrase)
    echo(click.style("        Address: ", dim=True) + deployer.address)

    tx_hash = None
    vm_status = None

    if config.submit_via_sdk:
        progress(f"Building publish payload from {config.package_path}...")
        package_bytes = config.package_path.read_bytes()
        payload = build_publish_payload(package_bytes)

        progress("Fetching sequence number...")
        sequence_number = get_sequence_number(deployer.address, node_url=config.node_url)

        progress("Signing and submitting transaction...")
        raw_txn = build_raw_transaction(
            deployer.address,
            sequence_number,
            payload,
            gas_limit=config.gas_limit,
            gas_unit_price=config.gas_unit_price,
            chain_id=config.chain_id,
        )
        signed = sign_transaction(deployer.account, raw_txn)
        tx_hash = submit_bcs_transaction(signed.bytes(), node_url=config.node_url)
        echo(click.style("        TX: ", dim=True) + tx_hash)

        progress("Waiting for confirmation...")
        txn = wait_for_transaction(
            tx_hash,
            expiration_timestamp_secs=raw_txn.expiration_timestamps_secs,
            node_url=config.node_url,
        )
        vm_status = txn.get("vm_status", "")
        if not txn.get("success"):
            raise TransactionFailedError(tx_hash, vm_status)
        echo(click.style("        Status: ", dim=True) + vm_status)

    progress("Publishing with aptos CLI...")
    publish_package_cli(config.package_dir, config.publish_command)

    return DeploymentResult(
        address=deployer.address,
        tx_hash=tx_hash,
        vm_status=vm_status,
        cli_published=True,
    )
