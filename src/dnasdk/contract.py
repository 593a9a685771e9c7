"""
Single-signature verification contracts.

A signature contract's code is ``PUSH33 <compressed pubkey> CHECKSIG``. The
HASH160 of that code is the program hash that owns outputs.
"""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum

from coincurve import PublicKey

from dnasdk.address import hash160
from dnasdk.constants import OP_CHECKSIG, OP_PUSHDATA1, OP_PUSHDATA2, OP_PUSHDATA4
from dnasdk.errors import ContractCreationFailure


class ContractParameterType(IntEnum):
    SIGNATURE = 0x00


@dataclass(frozen=True)
class Contract:
    code: bytes
    parameter_types: tuple[ContractParameterType, ...]
    program_hash: bytes


def push_data(data: bytes) -> bytes:
    """Encode a script push of ``data``."""
    n = len(data)
    if n < OP_PUSHDATA1:
        return bytes([n]) + data
    if n <= 0xFF:
        return bytes([OP_PUSHDATA1, n]) + data
    if n <= 0xFFFF:
        return bytes([OP_PUSHDATA2]) + struct.pack("<H", n) + data
    return bytes([OP_PUSHDATA4]) + struct.pack("<I", n) + data


def create_signature_redeem_script(public_key: bytes) -> bytes:
    return push_data(public_key) + bytes([OP_CHECKSIG])


def create_signature_contract(public_key: bytes) -> Contract:
    """
    Build the single-signature contract for a public key.

    Args:
        public_key: Compressed (33 byte) secp256k1 public key

    Raises:
        ContractCreationFailure: If the key is not a valid compressed key
    """
    if len(public_key) != 33:
        raise ContractCreationFailure(f"Invalid compressed pubkey length: {len(public_key)}")
    try:
        PublicKey(public_key)
    except ValueError as e:
        raise ContractCreationFailure(f"Invalid public key: {e}") from e

    code = create_signature_redeem_script(public_key)
    return Contract(
        code=code,
        parameter_types=(ContractParameterType.SIGNATURE,),
        program_hash=hash160(code),
    )


class ContractService(ABC):
    """Creates verification scripts for signers."""

    @abstractmethod
    def create_signature_contract(self, public_key: bytes) -> Contract:
        """Create the single-signature contract for ``public_key``"""


class SignatureContractService(ContractService):
    def create_signature_contract(self, public_key: bytes) -> Contract:
        return create_signature_contract(public_key)
