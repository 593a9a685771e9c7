"""
Tests for single-signature contracts.
"""

from __future__ import annotations

import pytest

from dnasdk.address import hash160
from dnasdk.contract import (
    ContractParameterType,
    SignatureContractService,
    create_signature_contract,
    push_data,
)
from dnasdk.errors import ContractCreationFailure
from dnasdk.wallet import Account


class TestPushData:
    def test_short(self) -> None:
        assert push_data(b"\xaa" * 3) == b"\x03" + b"\xaa" * 3

    def test_pushdata1(self) -> None:
        result = push_data(b"\x00" * 76)
        assert result[:2] == bytes([0x4C, 76])
        assert len(result) == 78

    def test_pushdata2(self) -> None:
        result = push_data(b"\x00" * 256)
        assert result[:3] == bytes([0x4D, 0x00, 0x01])


class TestCreateSignatureContract:
    def test_code_layout(self, alice: Account) -> None:
        contract = create_signature_contract(alice.public_key)
        assert contract.code == bytes([0x21]) + alice.public_key + bytes([0xAC])
        assert contract.parameter_types == (ContractParameterType.SIGNATURE,)

    def test_program_hash(self, alice: Account) -> None:
        contract = create_signature_contract(alice.public_key)
        assert contract.program_hash == hash160(contract.code)
        assert contract.program_hash == alice.program_hash

    def test_uncompressed_key_rejected(self, alice: Account) -> None:
        uncompressed = alice.private_key.public_key.format(compressed=False)
        with pytest.raises(ContractCreationFailure, match="length"):
            create_signature_contract(uncompressed)

    def test_invalid_key_rejected(self) -> None:
        with pytest.raises(ContractCreationFailure):
            create_signature_contract(b"\x05" * 33)

    def test_service(self, bob: Account) -> None:
        contract = SignatureContractService().create_signature_contract(bob.public_key)
        assert contract.program_hash == bob.program_hash
