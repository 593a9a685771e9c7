"""
Tests for verification context assembly.
"""

from __future__ import annotations

import pytest

from dnasdk.context import ContractContext, build_context
from dnasdk.contract import SignatureContractService, create_signature_contract, push_data
from dnasdk.errors import ContractCreationFailure, SigningFailure
from dnasdk.models import Transaction, TransactionKind
from dnasdk.signing import PrivateKeySigner, SigningService, verify_signature
from dnasdk.wallet import Account


@pytest.fixture
def tx() -> Transaction:
    return Transaction(kind=TransactionKind.TRANSFER_ASSET)


class FailingSigner(SigningService):
    def __init__(self, fail_for: bytes):
        self.fail_for = fail_for
        self.calls: list[bytes] = []

    def sign(self, tx: Transaction, account: Account) -> bytes:
        self.calls.append(account.program_hash)
        if account.program_hash == self.fail_for:
            raise SigningFailure("hardware signer unavailable")
        return PrivateKeySigner().sign(tx, account)


class FailingContracts(SignatureContractService):
    def create_signature_contract(self, public_key: bytes):
        raise ContractCreationFailure("script service down")


class CrashingSigner(SigningService):
    def sign(self, tx: Transaction, account: Account) -> bytes:
        raise ConnectionError("signing daemon went away")


class CrashingContracts(SignatureContractService):
    def create_signature_contract(self, public_key: bytes):
        raise KeyError(public_key)


class TestContractContext:
    def test_fixed_length(self, tx: Transaction) -> None:
        ctx = ContractContext(tx, 3)
        assert len(ctx) == 3
        assert ctx.codes == [None, None, None]

    def test_incremental_population(
        self, tx: Transaction, alice: Account, bob: Account
    ) -> None:
        ctx = ContractContext(tx, 2)
        ctx.add(create_signature_contract(bob.public_key), 1, b"sig-b")
        assert not ctx.is_completed()
        with pytest.raises(SigningFailure, match="incomplete"):
            ctx.get_programs()

        ctx.add(create_signature_contract(alice.public_key), 0, b"sig-a")
        assert ctx.is_completed()

        programs = ctx.get_programs()
        assert programs[0].parameter == push_data(b"sig-a")
        assert programs[1].parameter == push_data(b"sig-b")

    def test_slot_out_of_range(self, tx: Transaction, alice: Account) -> None:
        ctx = ContractContext(tx, 1)
        with pytest.raises(IndexError):
            ctx.add(create_signature_contract(alice.public_key), 1, b"sig")

    def test_add_contract_by_program_hash(
        self, tx: Transaction, alice: Account, bob: Account
    ) -> None:
        ctx = ContractContext(tx, 2, program_hashes=[alice.program_hash, bob.program_hash])
        assert ctx.add_contract(create_signature_contract(bob.public_key), b"sig") == 1
        assert ctx.codes[0] is None

    def test_add_contract_unknown_hash(
        self, tx: Transaction, alice: Account, carol: Account
    ) -> None:
        ctx = ContractContext(tx, 1, program_hashes=[alice.program_hash])
        with pytest.raises(SigningFailure, match="not part"):
            ctx.add_contract(create_signature_contract(carol.public_key), b"sig")

    def test_add_contract_first_empty_slot(self, tx: Transaction, alice: Account) -> None:
        ctx = ContractContext(tx, 1)
        assert ctx.add_contract(create_signature_contract(alice.public_key), b"sig") == 0
        with pytest.raises(SigningFailure, match="No free"):
            ctx.add_contract(create_signature_contract(alice.public_key), b"sig")

    def test_program_hash_count_must_match(self, tx: Transaction, alice: Account) -> None:
        with pytest.raises(ValueError):
            ContractContext(tx, 2, program_hashes=[alice.program_hash])


class TestBuildContext:
    def test_one_slot_per_signer(self, tx: Transaction, alice: Account, bob: Account) -> None:
        ctx = build_context(tx, [alice, bob], PrivateKeySigner(), SignatureContractService())

        assert len(ctx) == 2
        assert ctx.is_completed()
        for i, signer in enumerate([alice, bob]):
            assert ctx.codes[i] == create_signature_contract(signer.public_key).code
            (signature,) = ctx.parameters[i]
            assert verify_signature(tx.signable_payload(), signature, signer.public_key)

    def test_signing_failure_aborts(self, tx: Transaction, alice: Account, bob: Account) -> None:
        signer = FailingSigner(fail_for=alice.program_hash)
        with pytest.raises(SigningFailure):
            build_context(tx, [alice, bob], signer, SignatureContractService())
        assert signer.calls == [alice.program_hash]
        assert tx.programs == []

    def test_contract_failure_aborts(self, tx: Transaction, alice: Account) -> None:
        with pytest.raises(ContractCreationFailure):
            build_context(tx, [alice], PrivateKeySigner(), FailingContracts())

    def test_unexpected_signer_error_becomes_signing_failure(
        self, tx: Transaction, alice: Account
    ) -> None:
        with pytest.raises(SigningFailure, match="signing daemon went away") as exc_info:
            build_context(tx, [alice], CrashingSigner(), SignatureContractService())
        assert isinstance(exc_info.value.__cause__, ConnectionError)

    def test_unexpected_contract_error_becomes_signing_failure(
        self, tx: Transaction, alice: Account
    ) -> None:
        with pytest.raises(SigningFailure) as exc_info:
            build_context(tx, [alice], PrivateKeySigner(), CrashingContracts())
        assert isinstance(exc_info.value.__cause__, KeyError)
