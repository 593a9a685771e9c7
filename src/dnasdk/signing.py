"""
Transaction signing.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from coincurve import PublicKey
from coincurve import verify_signature as coincurve_verify

from dnasdk.errors import SigningFailure
from dnasdk.models import Transaction
from dnasdk.wallet import Account


class SigningService(ABC):
    """Produces a signature over a transaction's signable payload."""

    @abstractmethod
    def sign(self, tx: Transaction, account: Account) -> bytes:
        """Sign ``tx`` with the account's key, raising SigningFailure on error"""


class PrivateKeySigner(SigningService):
    """Signs with the account's coincurve private key (ECDSA, SHA-256 digest)."""

    def sign(self, tx: Transaction, account: Account) -> bytes:
        try:
            return account.private_key.sign(tx.signable_payload())
        except (ValueError, TypeError) as e:
            raise SigningFailure(f"Failed to sign transaction: {e}") from e


def verify_signature(payload: bytes, signature: bytes, public_key: bytes) -> bool:
    """Check a DER signature over ``payload`` against a compressed public key."""
    try:
        PublicKey(public_key)
        return coincurve_verify(signature, payload, public_key)
    except ValueError:
        return False
