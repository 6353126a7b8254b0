"""
Deployment configuration.

Values come from the process environment (optionally seeded from a ``.env``
file in the working directory) and are frozen into a ``DeployConfig`` that
is passed explicitly to ``run_deployment``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


# Aptos Mainnet public fullnode
DEFAULT_NODE_URL = "https://fullnode.mainnet.aptoslabs.com"
MAINNET_CHAIN_ID = 1

DEFAULT_PACKAGE_FILE = "Move.toml"
DEFAULT_GAS_LIMIT = 1_000_000
DEFAULT_GAS_UNIT_PRICE = 100
EXPIRATION_SECS = 600

COMPILE_COMMAND = (
    "aptos", "move", "compile", "--save-metadata", "--included-artifacts", "sparse",
)
PUBLISH_COMMAND = ("aptos", "move", "publish")


def load_env(env_path: Optional[Path] = None) -> bool:
    """Load a .env file into the process environment.

    Variables already set in the environment win over the file.
    """
    if env_path is not None:
        return load_dotenv(env_path, override=False)
    return load_dotenv(Path.cwd() / ".env", override=False)


def get_node_url() -> str:
    """Get the node URL from environment or default."""
    return os.environ.get("APTOS_NODE_URL", DEFAULT_NODE_URL)


def get_chain_id() -> int:
    """Get the chain ID from environment or default."""
    return int(os.environ.get("APTOS_CHAIN_ID", str(MAINNET_CHAIN_ID)))


@dataclass(frozen=True)
class DeployConfig:
    """
    Everything a single deployment run needs.

    Attributes:
        seed_phrase: BIP-39 mnemonic of the deployer account
        node_url: Aptos fullnode REST endpoint
        chain_id: Network identifier baked into the signed transaction
        package_dir: Move package root; both aptos CLI calls run here
        package_file: File published by the automated path, relative to package_dir
        gas_limit: Max gas amount for the publish transaction
        gas_unit_price: Gas unit price in octas
        submit_via_sdk: Run the in-process publish transaction before the CLI publish
    """

    seed_phrase: str
    node_url: str = DEFAULT_NODE_URL
    chain_id: int = MAINNET_CHAIN_ID
    package_dir: Path = field(default_factory=lambda: Path("."))
    package_file: Path = field(default_factory=lambda: Path(DEFAULT_PACKAGE_FILE))
    gas_limit: int = DEFAULT_GAS_LIMIT
    gas_unit_price: int = DEFAULT_GAS_UNIT_PRICE
    submit_via_sdk: bool = False
    compile_command: tuple[str, ...] = COMPILE_COMMAND
    publish_command: tuple[str, ...] = PUBLISH_COMMAND

    @property
    def package_path(self) -> Path:
        return self.package_dir / self.package_file

    @classmethod
    def from_env(cls, **overrides) -> "DeployConfig":
        """Build a config from environment variables, then apply overrides."""
        values = {
            "seed_phrase": os.environ.get("SEED_PHRASE", ""),
            "node_url": get_node_url(),
            "chain_id": get_chain_id(),
        }
        values.update(overrides)
        return cls(**values)
