"""
Transaction Builder - Build and sign Aptos publish transactions.

Uses aptos-sdk for BCS encoding and ed25519 signing; sending happens
through the httpx-based REST client.
"""

from __future__ import annotations

import time
from typing import Optional, Union

from aptos_sdk.account import Account
from aptos_sdk.account_address import AccountAddress
from aptos_sdk.authenticator import Authenticator, Ed25519Authenticator
from aptos_sdk.bcs import Serializer
from aptos_sdk.transactions import (
    EntryFunction,
    RawTransaction,
    SignedTransaction,
    TransactionArgument,
    TransactionPayload,
)

from ..config import (
    DEFAULT_GAS_LIMIT,
    DEFAULT_GAS_UNIT_PRICE,
    EXPIRATION_SECS,
    MAINNET_CHAIN_ID,
)


PUBLISH_MODULE = "0x1::code"
PUBLISH_FUNCTION = "publish_package_txn"


def build_publish_payload(package_bytes: bytes) -> TransactionPayload:
    """
    Build the entry-function payload for 0x1::code::publish_package_txn.

    The package bytes are the single argument, BCS-encoded as vector<u8>.
    """
    return TransactionPayload(
        EntryFunction.natural(
            PUBLISH_MODULE,
            PUBLISH_FUNCTION,
            [],
            [TransactionArgument(package_bytes, Serializer.to_bytes)],
        )
    )


def build_raw_transaction(
    sender: Union[str, AccountAddress],
    sequence_number: int,
    payload: TransactionPayload,
    gas_limit: int = DEFAULT_GAS_LIMIT,
    gas_unit_price: int = DEFAULT_GAS_UNIT_PRICE,
    chain_id: int = MAINNET_CHAIN_ID,
    now: Optional[float] = None,
) -> RawTransaction:
    """
    Build an unsigned transaction.

    Args:
        sender: 0x-prefixed sender address
        sequence_number: Sender's sequence number, fetched just before this call
        payload: Transaction payload
        gas_limit: Max gas amount
        gas_unit_price: Gas unit price in octas
        chain_id: Network identifier (mainnet = 1)
        now: Construction time in seconds (default: current time)

    Returns:
        RawTransaction expiring EXPIRATION_SECS after construction
    """
    if isinstance(sender, str):
        sender = AccountAddress.from_str(sender)
    if now is None:
        now = time.time()

    return RawTransaction(
        sender,
        sequence_number,
        payload,
        gas_limit,
        gas_unit_price,
        int(now) + EXPIRATION_SECS,
        chain_id,
    )


def sign_transaction(account: Account, raw_txn: RawTransaction) -> SignedTransaction:
    """Sign a raw transaction with the account's ed25519 key."""
    signature = account.sign(raw_txn.keyed())
    authenticator = Authenticator(
        Ed25519Authenticator(account.public_key(), signature)
    )
    return SignedTransaction(raw_txn, authenticator)
