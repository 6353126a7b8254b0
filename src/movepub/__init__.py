__all__ = [
    # Configuration
    "DeployConfig",
    "load_env",
    # Deployment
    "DeploymentResult",
    "run_deployment",
    # Errors
    "DeployError",
    "InvalidMnemonicError",
    "CompilationError",
    "PublishCommandError",
    "TransactionFailedError",
    "NodeApiError",
    # Identity
    "DerivedAccount",
    "derive_account",
    "validate_mnemonic",
    # Transactions
    "build_publish_payload",
    "build_raw_transaction",
    "sign_transaction",
]

from .config import DeployConfig, load_env
from .deployment import DeploymentResult, run_deployment
from .errors import (
    CompilationError,
    DeployError,
    InvalidMnemonicError,
    PublishCommandError,
    TransactionFailedError,
)
from .pneuma.rest import NodeApiError
from .pneuma.tx import build_publish_payload, build_raw_transaction, sign_transaction
from .sigil.mnemonic import DerivedAccount, derive_account, validate_mnemonic
