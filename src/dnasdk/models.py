"""
Transaction data models.
"""

from __future__ import annotations

import hashlib
import struct
from dataclasses import dataclass, field
from enum import IntEnum

from dnasdk.constants import ASSET_ID_LENGTH, PRECISION, PROGRAM_HASH_LENGTH, TXID_LENGTH


class TransactionKind(IntEnum):
    ISSUE_ASSET = 0x01
    REGISTER_ASSET = 0x40
    TRANSFER_ASSET = 0x80

    @property
    def fee_key(self) -> str:
        """Name under which the fee for this kind is configured."""
        return {
            TransactionKind.ISSUE_ASSET: "Issue",
            TransactionKind.REGISTER_ASSET: "Register",
            TransactionKind.TRANSFER_ASSET: "Transfer",
        }[self]


class AttributeUsage(IntEnum):
    NONCE = 0x00


class AssetType(IntEnum):
    CURRENCY = 0x00
    SHARE = 0x01
    INVOICE = 0x10
    TOKEN = 0x11


class AssetRecordType(IntEnum):
    UTXO = 0x00
    BALANCE = 0x01


def hash256(data: bytes) -> bytes:
    return hashlib.sha256(hashlib.sha256(data).digest()).digest()


def encode_varint(value: int) -> bytes:
    if value < 0xFD:
        return bytes([value])
    if value <= 0xFFFF:
        return b"\xfd" + value.to_bytes(2, "little")
    if value <= 0xFFFFFFFF:
        return b"\xfe" + value.to_bytes(4, "little")
    return b"\xff" + value.to_bytes(8, "little")


def encode_var_bytes(data: bytes) -> bytes:
    return encode_varint(len(data)) + data


def program_hash_sort_key(program_hash: bytes) -> int:
    """
    Ordering key for program hashes.

    Hashes compare as little-endian unsigned integers: the last byte is the
    most significant one.
    """
    return int.from_bytes(program_hash, "little")


@dataclass(frozen=True)
class UTXOInput:
    """Reference to an output of a previous transaction."""

    txid: bytes
    index: int

    def __post_init__(self) -> None:
        if len(self.txid) != TXID_LENGTH:
            raise ValueError(f"Invalid txid length: {len(self.txid)}")
        if not 0 <= self.index <= 0xFFFF:
            raise ValueError(f"Invalid output index: {self.index}")

    def serialize(self) -> bytes:
        return self.txid + struct.pack("<H", self.index)

    def __str__(self) -> str:
        return f"{self.txid.hex()}:{self.index}"


@dataclass(frozen=True)
class TxOutput:
    asset_id: bytes
    value: int
    program_hash: bytes

    def __post_init__(self) -> None:
        if len(self.asset_id) != ASSET_ID_LENGTH:
            raise ValueError(f"Invalid asset id length: {len(self.asset_id)}")
        if len(self.program_hash) != PROGRAM_HASH_LENGTH:
            raise ValueError(f"Invalid program hash length: {len(self.program_hash)}")

    def serialize(self) -> bytes:
        return self.asset_id + struct.pack("<q", self.value) + self.program_hash


@dataclass(frozen=True)
class Coin:
    """An unspent output owned by the wallet."""

    output: TxOutput

    @property
    def asset_id(self) -> bytes:
        return self.output.asset_id

    @property
    def value(self) -> int:
        return self.output.value

    @property
    def program_hash(self) -> bytes:
        return self.output.program_hash


@dataclass(frozen=True)
class TxAttribute:
    usage: AttributeUsage
    data: bytes

    def serialize(self) -> bytes:
        return bytes([self.usage]) + encode_var_bytes(self.data)


@dataclass(frozen=True)
class Asset:
    """Asset descriptor carried by a registration."""

    name: str
    description: str
    precision: int = PRECISION
    asset_type: AssetType = AssetType.TOKEN
    record_type: AssetRecordType = AssetRecordType.UTXO

    def serialize(self) -> bytes:
        return (
            encode_var_bytes(self.name.encode("utf-8"))
            + encode_var_bytes(self.description.encode("utf-8"))
            + bytes([self.precision, self.asset_type, self.record_type])
        )


@dataclass(frozen=True)
class RegisterAssetPayload:
    asset: Asset
    amount: int
    issuer: bytes  # compressed public key
    controller: bytes  # program hash

    def serialize(self) -> bytes:
        return (
            self.asset.serialize()
            + struct.pack("<q", self.amount)
            + encode_var_bytes(self.issuer)
            + self.controller
        )


@dataclass(frozen=True)
class Payment:
    """Requested payment: destination address and decimal amount."""

    address: str
    value: str


@dataclass(frozen=True)
class Program:
    """Verification program: the signer's script and its signature pushes."""

    code: bytes
    parameter: bytes


@dataclass
class Transaction:
    kind: TransactionKind
    payload: RegisterAssetPayload | None = None
    attributes: list[TxAttribute] = field(default_factory=list)
    inputs: list[UTXOInput] = field(default_factory=list)
    outputs: list[TxOutput] = field(default_factory=list)
    programs: list[Program] = field(default_factory=list)
    payload_version: int = 0

    def signable_payload(self) -> bytes:
        """Serialize the unsigned part of the transaction (everything except programs)."""
        result = bytes([self.kind, self.payload_version])
        if self.payload is not None:
            result += self.payload.serialize()

        result += encode_varint(len(self.attributes))
        for attr in self.attributes:
            result += attr.serialize()

        result += encode_varint(len(self.inputs))
        for inp in self.inputs:
            result += inp.serialize()

        result += encode_varint(len(self.outputs))
        for out in self.outputs:
            result += out.serialize()

        return result

    def hash(self) -> bytes:
        return hash256(self.signable_payload())

    def set_programs(self, programs: list[Program]) -> None:
        self.programs = list(programs)
