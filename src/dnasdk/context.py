"""
Verification context assembly.

A context holds one slot per signer: the signer's verification script and the
signatures satisfying it. Slots may be filled in any order (for staged
collection), but programs are only handed out once every slot is complete.
"""

from __future__ import annotations

from loguru import logger

from dnasdk.contract import Contract, ContractService, push_data
from dnasdk.errors import SigningFailure, TransactionBuildError
from dnasdk.models import Program, Transaction
from dnasdk.signing import SigningService
from dnasdk.wallet import Account


class ContractContext:
    def __init__(
        self,
        data: Transaction,
        length: int,
        program_hashes: list[bytes] | None = None,
    ):
        if program_hashes is not None and len(program_hashes) != length:
            raise ValueError(
                f"Expected {length} program hashes, got {len(program_hashes)}"
            )
        self.data = data
        self.program_hashes = program_hashes
        self.codes: list[bytes | None] = [None] * length
        self.parameters: list[list[bytes]] = [[] for _ in range(length)]

    def __len__(self) -> int:
        return len(self.codes)

    def add(self, contract: Contract, index: int, signature: bytes) -> None:
        """Store ``contract`` and ``signature`` at slot ``index``."""
        if not 0 <= index < len(self.codes):
            raise IndexError(f"Slot {index} out of range for {len(self.codes)} signers")
        self.codes[index] = contract.code
        self.parameters[index].append(signature)

    def add_contract(self, contract: Contract, signature: bytes) -> int:
        """
        Store a single-signature contract, returning the slot used.

        The slot is the position of the contract's program hash when the
        context knows its program hashes, otherwise the first empty slot.
        """
        if self.program_hashes is not None:
            try:
                index = self.program_hashes.index(contract.program_hash)
            except ValueError:
                raise SigningFailure(
                    f"Program hash {contract.program_hash.hex()} is not part of this context"
                ) from None
        else:
            empty = [i for i, code in enumerate(self.codes) if code is None]
            if not empty:
                raise SigningFailure("No free verification slot left")
            index = empty[0]

        self.add(contract, index, signature)
        return index

    def is_completed(self) -> bool:
        return all(
            code is not None and params for code, params in zip(self.codes, self.parameters)
        )

    def get_programs(self) -> list[Program]:
        if not self.is_completed():
            raise SigningFailure("Verification context is incomplete")
        return [
            Program(code=code, parameter=b"".join(push_data(sig) for sig in params))
            for code, params in zip(self.codes, self.parameters)
            if code is not None
        ]


def build_context(
    tx: Transaction,
    signers: list[Account],
    signer_service: SigningService,
    contract_service: ContractService,
) -> ContractContext:
    """
    Sign ``tx`` for every signer, slot ``i`` holding ``signers[i]``.

    Raises:
        SigningFailure: If any signature cannot be produced
        ContractCreationFailure: If a signer's script cannot be created
    """
    ctx = ContractContext(
        tx, len(signers), program_hashes=[signer.program_hash for signer in signers]
    )

    for i, signer in enumerate(signers):
        try:
            contract = contract_service.create_signature_contract(signer.public_key)
            signature = signer_service.sign(tx, signer)
        except TransactionBuildError:
            raise
        except Exception as e:
            raise SigningFailure(
                f"Failed to sign for {signer.program_hash.hex()}: {e}"
            ) from e
        ctx.add(contract, i, signature)
        logger.debug(f"Filled verification slot {i} for {signer.program_hash.hex()}")

    return ctx


def sign_transaction(
    tx: Transaction,
    signers: list[Account],
    signer_service: SigningService,
    contract_service: ContractService,
) -> None:
    """Build the verification context and attach its programs to ``tx``."""
    ctx = build_context(tx, signers, signer_service, contract_service)
    tx.set_programs(ctx.get_programs())
