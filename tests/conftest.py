"""
Pytest configuration and fixtures for dnasdk tests.
"""

from __future__ import annotations

import pytest

from dnasdk.builder import TransactionBuilder
from dnasdk.config import Settings
from dnasdk.wallet import Account, InMemoryWallet


@pytest.fixture
def alice() -> Account:
    return Account.from_private_key(bytes([1]) * 32)


@pytest.fixture
def bob() -> Account:
    return Account.from_private_key(bytes([2]) * 32)


@pytest.fixture
def carol() -> Account:
    return Account.from_private_key(bytes([3]) * 32)


@pytest.fixture
def recipient() -> Account:
    """Account outside the wallet, used as payment destination."""
    return Account.from_private_key(bytes([9]) * 32)


@pytest.fixture
def wallet(alice: Account, bob: Account) -> InMemoryWallet:
    return InMemoryWallet(accounts=[alice, bob], default=alice)


@pytest.fixture
def settings() -> Settings:
    return Settings(transaction_fee={"Transfer": 1.0})


@pytest.fixture
def builder(settings: Settings) -> TransactionBuilder:
    return TransactionBuilder(settings=settings, nonce_factory=lambda: 42)
