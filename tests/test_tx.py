"""Unit tests for publish payload, raw transaction and signing."""

from __future__ import annotations

from aptos_sdk.account_address import AccountAddress
from aptos_sdk.bcs import Deserializer

from movepub.pneuma.tx import (
    PUBLISH_FUNCTION,
    build_publish_payload,
    build_raw_transaction,
    sign_transaction,
)
from movepub.sigil.mnemonic import derive_account

VALID_PHRASE = (
    "abandon abandon abandon abandon abandon abandon "
    "abandon abandon abandon abandon abandon about"
)

PACKAGE_BYTES = b'[package]\nname = "hello"\nversion = "1.0.0"\n\x00\xff'


class TestPayload:
    def test_single_argument_is_package_bytes(self) -> None:
        payload = build_publish_payload(PACKAGE_BYTES)
        entry = payload.value

        assert len(entry.args) == 1
        assert Deserializer(entry.args[0]).to_bytes() == PACKAGE_BYTES

    def test_targets_code_publish(self) -> None:
        entry = build_publish_payload(PACKAGE_BYTES).value
        assert entry.function == PUBLISH_FUNCTION
        assert entry.module.name == "code"
        assert entry.module.address == AccountAddress.from_str("0x1")
        assert entry.ty_args == []

    def test_empty_package(self) -> None:
        entry = build_publish_payload(b"").value
        assert Deserializer(entry.args[0]).to_bytes() == b""


class TestRawTransaction:
    def setup_method(self) -> None:
        self.deployer = derive_account(VALID_PHRASE)
        self.payload = build_publish_payload(PACKAGE_BYTES)

    def test_expiration_is_now_plus_600(self) -> None:
        raw = build_raw_transaction(self.deployer.address, 7, self.payload, now=1_700_000_000.9)
        assert raw.expiration_timestamps_secs == 1_700_000_600

    def test_fields(self) -> None:
        raw = build_raw_transaction(
            self.deployer.address,
            42,
            self.payload,
            gas_limit=2_000,
            gas_unit_price=150,
            chain_id=2,
            now=1_000,
        )
        assert raw.sender == self.deployer.account.address()
        assert raw.sequence_number == 42
        assert raw.max_gas_amount == 2_000
        assert raw.gas_unit_price == 150
        assert raw.chain_id == 2

    def test_defaults(self) -> None:
        raw = build_raw_transaction(self.deployer.address, 0, self.payload, now=0)
        assert raw.max_gas_amount == 1_000_000
        assert raw.gas_unit_price == 100
        assert raw.chain_id == 1


class TestSigning:
    def test_signature_verifies(self) -> None:
        deployer = derive_account(VALID_PHRASE)
        raw = build_raw_transaction(deployer.address, 0, build_publish_payload(PACKAGE_BYTES), now=0)

        signed = sign_transaction(deployer.account, raw)
        signature = deployer.account.sign(raw.keyed())

        assert deployer.account.public_key().verify(raw.keyed(), signature)
        assert signed.transaction is raw
        assert len(signed.bytes()) > len(PACKAGE_BYTES)

    def test_signing_is_deterministic(self) -> None:
        deployer = derive_account(VALID_PHRASE)
        raw = build_raw_transaction(deployer.address, 3, build_publish_payload(PACKAGE_BYTES), now=0)
        assert sign_transaction(deployer.account, raw).bytes() == sign_transaction(deployer.account, raw).bytes()
