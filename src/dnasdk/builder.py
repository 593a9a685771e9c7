"""
Transaction builder for asset transactions.

Builds and signs:
- Register: new asset definition, signed by the wallet's default account
- Issue: caller supplied outputs, signed by the default account
- Transfer: coin selection, fee deduction and change, signed by every
  account owning a spent coin

Each build is a fail-fast pipeline. Any error raises and discards the
transaction under construction; only fully signed transactions are returned.
"""

from __future__ import annotations

import secrets
from collections.abc import Callable

from loguru import logger

from dnasdk.address import address_to_program_hash
from dnasdk.config import Settings
from dnasdk.constants import NONCE_BITS
from dnasdk.context import sign_transaction
from dnasdk.contract import ContractService, SignatureContractService
from dnasdk.errors import AssetMismatch, InvalidAmount, NoOutputsSpecified
from dnasdk.fees import compute_fee
from dnasdk.fixed64 import fixed64_to_string, string_to_fixed64
from dnasdk.models import (
    Asset,
    AttributeUsage,
    Payment,
    RegisterAssetPayload,
    Transaction,
    TransactionKind,
    TxAttribute,
    TxOutput,
)
from dnasdk.selection import DecodedPayment, select_coins
from dnasdk.signers import resolve_signers
from dnasdk.signing import PrivateKeySigner, SigningService
from dnasdk.wallet import WalletClient


def random_nonce() -> int:
    return secrets.randbits(NONCE_BITS)


def parse_positive_amount(value: str) -> int:
    amount = string_to_fixed64(value)
    if amount <= 0:
        raise InvalidAmount(f"Amount must be positive: {value!r}")
    return amount


def issue_output(asset_id: bytes, address: str, value: str) -> TxOutput:
    """Decode an address and amount into an issue output."""
    return TxOutput(
        asset_id=asset_id,
        value=parse_positive_amount(value),
        program_hash=address_to_program_hash(address),
    )


class TransactionBuilder:
    """
    Builds signed asset transactions.

    Collaborators are injectable: the signing and contract services default
    to local coincurve keys, and ``nonce_factory`` lets tests fix the
    uniqueness attribute.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        signer: SigningService | None = None,
        contracts: ContractService | None = None,
        nonce_factory: Callable[[], int] | None = None,
    ):
        self.settings = settings if settings is not None else Settings()
        self.signer = signer if signer is not None else PrivateKeySigner()
        self.contracts = contracts if contracts is not None else SignatureContractService()
        self.nonce_factory = nonce_factory if nonce_factory is not None else random_nonce

    def nonce_attribute(self) -> TxAttribute:
        nonce = self.nonce_factory()
        return TxAttribute(usage=AttributeUsage.NONCE, data=str(nonce).encode("ascii"))

    def make_register_transaction(
        self, wallet: WalletClient, name: str, value: str
    ) -> Transaction:
        """
        Register a new asset issued and controlled by the default account.

        Args:
            wallet: Wallet providing the issuer
            name: Asset name (also used as description)
            value: Total supply as decimal text

        Returns:
            Signed registration transaction
        """
        issuer = wallet.get_default_account()
        contract = self.contracts.create_signature_contract(issuer.public_key)
        amount = parse_positive_amount(value)

        tx = Transaction(
            kind=TransactionKind.REGISTER_ASSET,
            payload=RegisterAssetPayload(
                asset=Asset(name=name, description=name),
                amount=amount,
                issuer=issuer.public_key,
                controller=contract.program_hash,
            ),
            attributes=[self.nonce_attribute()],
        )
        sign_transaction(tx, [issuer], self.signer, self.contracts)

        logger.info(f"Built register transaction for asset {name!r}, supply {value}")
        return tx

    def make_issue_transaction(
        self, wallet: WalletClient, asset_id: bytes, outputs: list[TxOutput]
    ) -> Transaction:
        """Issue ``outputs`` of a registered asset, signed by the default account."""
        if not outputs:
            raise NoOutputsSpecified("Issue transaction needs at least one output")
        for out in outputs:
            if out.value <= 0:
                raise InvalidAmount(f"Issue output value must be positive: {out.value}")
            if out.asset_id != asset_id:
                raise AssetMismatch(
                    f"Issue output asset {out.asset_id.hex()} does not match {asset_id.hex()}"
                )

        issuer = wallet.get_default_account()
        tx = Transaction(
            kind=TransactionKind.ISSUE_ASSET,
            attributes=[self.nonce_attribute()],
            outputs=list(outputs),
        )
        sign_transaction(tx, [issuer], self.signer, self.contracts)

        total = sum(out.value for out in outputs)
        logger.info(
            f"Built issue transaction: {len(outputs)} outputs, "
            f"{fixed64_to_string(total)} of {asset_id.hex()[:16]}..."
        )
        return tx

    def make_transfer_transaction(
        self, wallet: WalletClient, asset_id: bytes, payments: list[Payment]
    ) -> Transaction:
        """
        Transfer an asset to one or more addresses.

        The configured transfer fee is split evenly across the payments and
        deducted from each. Coins are spent smallest first; surplus returns to
        the default account as the last output.

        Args:
            wallet: Wallet owning the coins and keys
            asset_id: Asset being transferred
            payments: Destination addresses and decimal amounts

        Returns:
            Transaction signed by every account owning a spent coin

        Raises:
            NoOutputsSpecified, NoDefaultAccount, InvalidFeeConfig,
            InvalidAmount, InvalidAddress, FeeExceedsAmount,
            InsufficientFunds, UnknownSigner, SigningFailure,
            ContractCreationFailure
        """
        if not payments:
            raise NoOutputsSpecified("Transfer needs at least one payment")

        change_account = wallet.get_default_account()
        per_output_fee = compute_fee(TransactionKind.TRANSFER_ASSET, len(payments), self.settings)

        decoded = [
            DecodedPayment(
                program_hash=address_to_program_hash(p.address),
                value=parse_positive_amount(p.value),
            )
            for p in payments
        ]

        coins = wallet.get_coins()
        selection = select_coins(
            coins, asset_id, decoded, per_output_fee, change_account.program_hash
        )

        tx = Transaction(
            kind=TransactionKind.TRANSFER_ASSET,
            attributes=[self.nonce_attribute()],
            inputs=selection.inputs,
            outputs=selection.outputs,
        )

        signers = resolve_signers(selection.inputs, selection.spent_coins, wallet)
        sign_transaction(tx, signers, self.signer, self.contracts)

        logger.info(
            f"Built transfer transaction: {len(tx.inputs)} inputs, {len(tx.outputs)} outputs, "
            f"{len(signers)} signers, fee {fixed64_to_string(selection.fee)}"
        )
        return tx


def make_register_transaction(wallet: WalletClient, name: str, value: str) -> Transaction:
    return TransactionBuilder().make_register_transaction(wallet, name, value)


def make_issue_transaction(
    wallet: WalletClient, asset_id: bytes, outputs: list[TxOutput]
) -> Transaction:
    return TransactionBuilder().make_issue_transaction(wallet, asset_id, outputs)


def make_transfer_transaction(
    wallet: WalletClient, asset_id: bytes, payments: list[Payment]
) -> Transaction:
    return TransactionBuilder().make_transfer_transaction(wallet, asset_id, payments)
