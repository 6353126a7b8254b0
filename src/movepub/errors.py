from __future__ import annotations


class DeployError(RuntimeError):
    exit_code: int = 1


class InvalidMnemonicError(DeployError):
    exit_code = 2


class CompilationError(DeployError):
    exit_code = 3


class PublishCommandError(DeployError):
    exit_code = 4


class TransactionFailedError(DeployError):
    exit_code = 5

    def __init__(self, tx_hash: str, vm_status: str) -> None:
        super().__init__(f"Transaction {tx_hash} failed: {vm_status}")
        self.tx_hash = tx_hash
        self.vm_status = vm_status
