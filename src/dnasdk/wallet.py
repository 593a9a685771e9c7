"""
Wallet interface and an in-memory implementation.

The builder only needs three things from a wallet: the default account
(issuer and change receiver), the owned coins, and a way to map a program
hash back to the account that can sign for it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from coincurve import PrivateKey
from loguru import logger

from dnasdk.address import program_hash_to_address
from dnasdk.contract import create_signature_contract
from dnasdk.errors import NoDefaultAccount
from dnasdk.models import Coin, UTXOInput


@dataclass(frozen=True)
class Account:
    """A key pair and the program hash of its signature contract."""

    private_key: PrivateKey
    public_key: bytes
    program_hash: bytes

    @classmethod
    def from_private_key(cls, secret: bytes) -> Account:
        private_key = PrivateKey(secret)
        public_key = private_key.public_key.format(compressed=True)
        contract = create_signature_contract(public_key)
        return cls(
            private_key=private_key,
            public_key=public_key,
            program_hash=contract.program_hash,
        )

    @classmethod
    def generate(cls) -> Account:
        return cls.from_private_key(PrivateKey().secret)

    @property
    def address(self) -> str:
        return program_hash_to_address(self.program_hash)


class WalletClient(ABC):
    """
    Abstract wallet interface.
    Implementations own key storage and the coin set; the builder only reads.
    """

    @abstractmethod
    def get_default_account(self) -> Account:
        """Get the default account, raising NoDefaultAccount if there is none"""

    @abstractmethod
    def get_coins(self) -> dict[UTXOInput, Coin]:
        """Get all unspent coins owned by the wallet"""

    @abstractmethod
    def get_account_by_program_hash(self, program_hash: bytes) -> Account | None:
        """Get the account controlling ``program_hash``, or None"""


class InMemoryWallet(WalletClient):
    def __init__(self, accounts: list[Account] | None = None, default: Account | None = None):
        self.accounts: dict[bytes, Account] = {}
        self.coins: dict[UTXOInput, Coin] = {}
        self.default: Account | None = None

        for account in accounts or []:
            self.add_account(account)
        if default is not None:
            self.add_account(default)
            self.default = default

    def add_account(self, account: Account) -> None:
        self.accounts[account.program_hash] = account
        if self.default is None:
            self.default = account

    def add_coin(self, ref: UTXOInput, coin: Coin) -> None:
        if ref in self.coins:
            raise ValueError(f"Coin {ref} already known")
        self.coins[ref] = coin
        logger.debug(f"Added coin {ref} value={coin.value}")

    def remove_coin(self, ref: UTXOInput) -> Coin:
        return self.coins.pop(ref)

    def get_default_account(self) -> Account:
        if self.default is None:
            raise NoDefaultAccount("Wallet has no default account")
        return self.default

    def get_coins(self) -> dict[UTXOInput, Coin]:
        return dict(self.coins)

    def get_account_by_program_hash(self, program_hash: bytes) -> Account | None:
        return self.accounts.get(program_hash)
