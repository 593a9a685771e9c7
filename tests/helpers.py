"""
Shared builders for test coins and amounts.
"""

from __future__ import annotations

import hashlib

from dnasdk.constants import FIXED64_SCALE
from dnasdk.models import Coin, TxOutput, UTXOInput
from dnasdk.wallet import Account

ASSET_ID = hashlib.sha256(b"test asset").digest()
OTHER_ASSET_ID = hashlib.sha256(b"other asset").digest()


def units(n: int) -> int:
    """Whole asset units as a fixed-point value."""
    return n * FIXED64_SCALE


def make_ref(label: str, index: int = 0) -> UTXOInput:
    return UTXOInput(txid=hashlib.sha256(label.encode()).digest(), index=index)


def make_coin(owner: Account, value: int, asset_id: bytes = ASSET_ID) -> Coin:
    return Coin(output=TxOutput(asset_id=asset_id, value=value, program_hash=owner.program_hash))
