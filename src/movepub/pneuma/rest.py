"""
REST Client for the Aptos fullnode API (v1).

Lightweight alternative to the SDK's async RestClient: uses httpx for HTTP
and returns plain JSON. Supports account reads, BCS transaction submission
and confirmation polling.
"""

from __future__ import annotations

import time
from typing import Any, Optional

import httpx

from ..config import get_node_url


APT_COIN_STORE = "0x1::coin::CoinStore<0x1::aptos_coin::AptosCoin>"
BCS_SIGNED_TRANSACTION = "application/x.aptos.signed_transaction+bcs"

# Seconds to keep polling past a transaction's expiration timestamp
EXPIRATION_GRACE_SECS = 30


class NodeApiError(RuntimeError):
    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"Node API error ({status_code}): {message}")
        self.status_code = status_code
        self.message = message


def _api_base(node_url: Optional[str] = None) -> str:
    url = (node_url or get_node_url()).rstrip("/")
    if not url.endswith("/v1"):
        url += "/v1"
    return url


def _request(
    method: str,
    path: str,
    node_url: Optional[str] = None,
    allow_not_found: bool = False,
    **kwargs: Any,
) -> Any:
    """
    Make a REST call against the node.

    Args:
        method: HTTP method
        path: Path below /v1 (e.g., "/accounts/0x1")
        node_url: Fullnode URL
        allow_not_found: Return None on 404 instead of raising

    Returns:
        Decoded JSON body

    Raises:
        NodeApiError: If the node answers with an error status
    """
    url = _api_base(node_url) + path

    with httpx.Client(timeout=30) as client:
        response = client.request(method, url, **kwargs)

    if response.status_code == 404 and allow_not_found:
        return None

    if response.status_code >= 400:
        try:
            message = response.json().get("message", response.text)
        except ValueError:
            message = response.text
        raise NodeApiError(response.status_code, message)

    return response.json()


def get_account(address: str, node_url: Optional[str] = None) -> dict:
    """Get account info (sequence_number, authentication_key)."""
    return _request("GET", f"/accounts/{address}", node_url=node_url)


def get_sequence_number(address: str, node_url: Optional[str] = None) -> int:
    """
    Get the current sequence number for an account.

    This is a point-in-time read; another transaction from the same
    account landing before submission makes the number stale.
    """
    return int(get_account(address, node_url=node_url)["sequence_number"])


def get_account_resource(
    address: str,
    resource_type: str,
    node_url: Optional[str] = None,
) -> dict:
    """
    Read one resource stored under an account.

    Args:
        address: 0x-prefixed account address
        resource_type: Fully qualified Move struct tag

    Returns:
        Resource dict with "type" and "data"
    """
    return _request(
        "GET", f"/accounts/{address}/resource/{resource_type}", node_url=node_url
    )


def get_balance(address: str, node_url: Optional[str] = None) -> int:
    """
    Get the APT balance held in the account's CoinStore.

    Returns:
        Balance in octas
    """
    resource = get_account_resource(address, APT_COIN_STORE, node_url=node_url)
    return int(resource["data"]["coin"]["value"])


def submit_bcs_transaction(signed_txn: bytes, node_url: Optional[str] = None) -> str:
    """
    Submit a BCS-encoded signed transaction.

    Returns:
        Transaction hash (0x-prefixed hex)
    """
    result = _request(
        "POST",
        "/transactions",
        node_url=node_url,
        content=signed_txn,
        headers={"Content-Type": BCS_SIGNED_TRANSACTION},
    )
    return result["hash"]


def get_transaction(tx_hash: str, node_url: Optional[str] = None) -> Optional[dict]:
    """Look up a transaction by hash. None if the node has not seen it."""
    return _request(
        "GET", f"/transactions/by_hash/{tx_hash}", node_url=node_url, allow_not_found=True
    )


def wait_for_transaction(
    tx_hash: str,
    expiration_timestamp_secs: Optional[int] = None,
    poll_interval: float = 1.0,
    node_url: Optional[str] = None,
) -> dict:
    """
    Block until a transaction leaves the pending state.

    There is no fixed timeout: polling stops once the transaction's own
    expiration (plus a grace period) has passed without it committing.

    Args:
        tx_hash: Transaction hash
        expiration_timestamp_secs: On-chain expiration of the transaction
        poll_interval: Polling interval in seconds
        node_url: Fullnode URL

    Returns:
        Committed transaction dict (check "success" / "vm_status")

    Raises:
        TimeoutError: If the transaction expired without committing
    """
    while True:
        txn = get_transaction(tx_hash, node_url=node_url)
        if txn is not None and txn.get("type") != "pending_transaction":
            return txn

        if (
            expiration_timestamp_secs is not None
            and time.time() > expiration_timestamp_secs + EXPIRATION_GRACE_SECS
        ):
            raise TimeoutError(
                f"Transaction {tx_hash} not committed before expiration"
            )
        time.sleep(poll_interval)
