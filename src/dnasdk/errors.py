"""
Errors raised while building asset transactions.

Every build either returns a fully signed transaction or raises exactly one
of these, describing the first failure encountered.
"""

from __future__ import annotations


class TransactionBuildError(Exception):
    """Base class for all transaction building failures."""

    pass


class InvalidAddress(TransactionBuildError):
    """Address could not be decoded into a program hash."""

    pass


class InvalidAmount(TransactionBuildError):
    """Amount is unparsable, out of range or not positive."""

    pass


class FeeExceedsAmount(TransactionBuildError):
    """Requested payment does not cover its share of the fee."""

    pass


class InsufficientFunds(TransactionBuildError):
    """The wallet does not own enough of the asset."""

    def __init__(self, needed: int, available: int):
        self.needed = needed
        self.available = available
        super().__init__(f"Insufficient funds: need {needed}, have {available}")


class NoOutputsSpecified(TransactionBuildError):
    pass


class NoDefaultAccount(TransactionBuildError):
    pass


class UnknownSigner(TransactionBuildError):
    """A selected coin is owned by a program hash the wallet does not control."""

    pass


class SigningFailure(TransactionBuildError):
    pass


class ContractCreationFailure(TransactionBuildError):
    pass


class InvalidFeeConfig(TransactionBuildError):
    pass


class AssetMismatch(TransactionBuildError):
    """An output carries a different asset than the one being issued."""

    pass
