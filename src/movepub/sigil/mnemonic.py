"""
Mnemonic Key Management for movepub.

Derives the Aptos deployer account from a BIP-39 seed phrase:

- BIP-39 checksum validation and seed generation (empty passphrase)
- SLIP-0010 ed25519 derivation along the Aptos path m/44'/637'/0'/0'/0'
- Aptos single-key ed25519 account (address = sha3-256(pubkey || 0x00))

Dependencies: bip_utils (BIP-39 / SLIP-0010), aptos-sdk (account).
"""

from __future__ import annotations

from dataclasses import dataclass

from aptos_sdk.account import Account
from bip_utils import Bip32Slip10Ed25519, Bip39MnemonicValidator, Bip39SeedGenerator

from ..errors import InvalidMnemonicError


# 637 is the SLIP-0044 coin type registered for Aptos
DERIVATION_PATH = "m/44'/637'/0'/0'/0'"


@dataclass(frozen=True)
class DerivedAccount:
    account: Account
    address: str
    private_key: str


def normalize_mnemonic(seed_phrase: str) -> str:
    """Collapse surrounding and repeated whitespace between words."""
    return " ".join(seed_phrase.split())


def validate_mnemonic(seed_phrase: str) -> bool:
    """Check word list membership and the BIP-39 checksum."""
    phrase = normalize_mnemonic(seed_phrase)
    if not phrase:
        return False
    return Bip39MnemonicValidator().IsValid(phrase)


def derive_private_key(seed_phrase: str, path: str = DERIVATION_PATH) -> bytes:
    """
    Derive the raw 32-byte ed25519 private key for a seed phrase.

    Args:
        seed_phrase: BIP-39 mnemonic
        path: Hardened SLIP-0010 derivation path

    Returns:
        32-byte private key seed

    Raises:
        InvalidMnemonicError: If the phrase fails BIP-39 validation
    """
    if not validate_mnemonic(seed_phrase):
        raise InvalidMnemonicError("Invalid seed phrase! Make sure it's correct.")

    seed = Bip39SeedGenerator(normalize_mnemonic(seed_phrase)).Generate()
    node = Bip32Slip10Ed25519.FromSeedAndPath(seed, path)
    return node.PrivateKey().Raw().ToBytes()


def derive_account(seed_phrase: str, path: str = DERIVATION_PATH) -> DerivedAccount:
    """
    Derive the deployer account for a seed phrase.

    The derivation is pure: the same phrase always yields the same
    address and key.

    Returns:
        DerivedAccount with the aptos-sdk Account, its 0x-prefixed
        address and 0x-prefixed hex private key
    """
    key = derive_private_key(seed_phrase, path)
    account = Account.load_key(key.hex())
    return DerivedAccount(
        account=account,
        address=str(account.address()),
        private_key=account.private_key.hex(),
    )
