"""
dnasdk - Asset transaction builder for UTXO wallets

Builds and signs asset register, issue and transfer transactions.
"""

__version__ = "0.1.0"

from dnasdk.address import address_to_program_hash, program_hash_to_address
from dnasdk.builder import (
    TransactionBuilder,
    issue_output,
    make_issue_transaction,
    make_register_transaction,
    make_transfer_transaction,
)
from dnasdk.config import Settings, get_settings, setup_logging
from dnasdk.context import ContractContext, build_context
from dnasdk.contract import Contract, create_signature_contract
from dnasdk.errors import (
    AssetMismatch,
    ContractCreationFailure,
    FeeExceedsAmount,
    InsufficientFunds,
    InvalidAddress,
    InvalidAmount,
    InvalidFeeConfig,
    NoDefaultAccount,
    NoOutputsSpecified,
    SigningFailure,
    TransactionBuildError,
    UnknownSigner,
)
from dnasdk.fees import compute_fee
from dnasdk.fixed64 import fixed64_to_string, string_to_fixed64
from dnasdk.models import (
    Coin,
    Payment,
    Transaction,
    TransactionKind,
    TxOutput,
    UTXOInput,
)
from dnasdk.selection import CoinSelection, select_coins
from dnasdk.signers import resolve_signers
from dnasdk.signing import PrivateKeySigner, SigningService, verify_signature
from dnasdk.wallet import Account, InMemoryWallet, WalletClient

__all__ = [
    "Account",
    "AssetMismatch",
    "Coin",
    "CoinSelection",
    "Contract",
    "ContractContext",
    "ContractCreationFailure",
    "FeeExceedsAmount",
    "InMemoryWallet",
    "InsufficientFunds",
    "InvalidAddress",
    "InvalidAmount",
    "InvalidFeeConfig",
    "NoDefaultAccount",
    "NoOutputsSpecified",
    "Payment",
    "PrivateKeySigner",
    "Settings",
    "SigningFailure",
    "SigningService",
    "Transaction",
    "TransactionBuildError",
    "TransactionBuilder",
    "TransactionKind",
    "TxOutput",
    "UTXOInput",
    "UnknownSigner",
    "WalletClient",
    "address_to_program_hash",
    "build_context",
    "compute_fee",
    "create_signature_contract",
    "fixed64_to_string",
    "get_settings",
    "issue_output",
    "make_issue_transaction",
    "make_register_transaction",
    "make_transfer_transaction",
    "program_hash_to_address",
    "resolve_signers",
    "select_coins",
    "setup_logging",
    "string_to_fixed64",
    "verify_signature",
]
