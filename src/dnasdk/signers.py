"""
Signer resolution for spent coins.

Verification slots are positioned by signer order. The resolved list is sorted
by program hash and never depends on the order inputs were discovered in.
"""

from __future__ import annotations

from loguru import logger

from dnasdk.errors import UnknownSigner
from dnasdk.models import Coin, UTXOInput, program_hash_sort_key
from dnasdk.wallet import Account, WalletClient


def sort_accounts(accounts: list[Account]) -> list[Account]:
    return sorted(accounts, key=lambda account: program_hash_sort_key(account.program_hash))


def resolve_signers(
    inputs: list[UTXOInput],
    coins: dict[UTXOInput, Coin],
    wallet: WalletClient,
) -> list[Account]:
    """
    Map selected inputs to the distinct accounts that must sign them.

    Args:
        inputs: Selected inputs
        coins: Coin mapping the inputs were selected from
        wallet: Wallet resolving program hashes to accounts

    Returns:
        Accounts unique by program hash, sorted ascending by program hash

    Raises:
        UnknownSigner: If an input is not a known coin or its owner is not an
            account of the wallet
    """
    seen: set[bytes] = set()
    accounts: list[Account] = []

    for ref in inputs:
        coin = coins.get(ref)
        if coin is None:
            raise UnknownSigner(f"Input {ref} is not a wallet coin")

        if coin.program_hash in seen:
            continue
        seen.add(coin.program_hash)

        account = wallet.get_account_by_program_hash(coin.program_hash)
        if account is None:
            raise UnknownSigner(f"No account controls program hash {coin.program_hash.hex()}")
        accounts.append(account)

    signers = sort_accounts(accounts)
    logger.debug(f"Resolved {len(signers)} signers for {len(inputs)} inputs")
    return signers
