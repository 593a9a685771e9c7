"""
Address encoding utilities.

An address is base58check(version || program_hash), where the program hash is
the HASH160 of the owner's verification script.
"""

from __future__ import annotations

import hashlib

import base58

from dnasdk.constants import ADDRESS_VERSION, PROGRAM_HASH_LENGTH
from dnasdk.errors import InvalidAddress


def hash160(data: bytes) -> bytes:
    """RIPEMD160(SHA256(data))"""
    h = hashlib.new("ripemd160")
    h.update(hashlib.sha256(data).digest())
    return h.digest()


def program_hash_to_address(program_hash: bytes) -> str:
    if len(program_hash) != PROGRAM_HASH_LENGTH:
        raise ValueError(f"Invalid program hash length: {len(program_hash)}")
    return base58.b58encode_check(bytes([ADDRESS_VERSION]) + program_hash).decode("ascii")


def address_to_program_hash(address: str) -> bytes:
    """
    Decode an address into the program hash it pays to.

    Raises:
        InvalidAddress: On bad base58, checksum mismatch, wrong length or
            unknown version byte
    """
    try:
        decoded = base58.b58decode_check(address)
    except ValueError as e:
        raise InvalidAddress(f"Invalid address {address!r}: {e}") from e

    if len(decoded) != PROGRAM_HASH_LENGTH + 1:
        raise InvalidAddress(f"Invalid address length: {address!r}")

    version = decoded[0]
    if version != ADDRESS_VERSION:
        raise InvalidAddress(f"Unknown address version: {version:#x}")

    return decoded[1:]
