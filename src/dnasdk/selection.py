"""
Coin selection for asset transfers.

Coins are spent smallest first, so small outputs are swept out of the wallet
even when a transfer then uses more inputs than strictly needed.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from loguru import logger

from dnasdk.errors import FeeExceedsAmount, InsufficientFunds
from dnasdk.models import Coin, TxOutput, UTXOInput


@dataclass(frozen=True)
class DecodedPayment:
    """Requested payment after address and amount decoding."""

    program_hash: bytes
    value: int


@dataclass
class CoinSelection:
    """Result of coin selection"""

    inputs: list[UTXOInput]
    outputs: list[TxOutput]
    change: TxOutput | None
    total_value: int
    fee: int = 0
    spent_coins: dict[UTXOInput, Coin] = field(default_factory=dict)


def sort_coins_by_value(coins: dict[UTXOInput, Coin]) -> list[tuple[UTXOInput, Coin]]:
    """
    Order coins ascending by value.

    Ties are broken by (txid, index) so the order never depends on mapping
    iteration order.
    """
    return sorted(coins.items(), key=lambda item: (item[1].value, item[0].txid, item[0].index))


def select_coins(
    coins: dict[UTXOInput, Coin],
    asset_id: bytes,
    payments: list[DecodedPayment],
    per_output_fee: int,
    change_program_hash: bytes,
) -> CoinSelection:
    """
    Select coins of ``asset_id`` funding ``payments``.

    Each payment pays ``per_output_fee`` out of its own value, so the outputs
    plus the fees always add up to the value of the selected coins. Any
    surplus of the last coin goes to ``change_program_hash`` as the final
    output.

    Raises:
        FeeExceedsAmount: If a payment does not exceed the per-output fee
        InsufficientFunds: If the coins of the asset cannot cover the payments
    """
    outputs: list[TxOutput] = []
    expected = 0

    for payment in payments:
        if payment.value <= per_output_fee:
            raise FeeExceedsAmount(
                f"Payment of {payment.value} does not cover the fee of {per_output_fee}"
            )
        expected += payment.value
        outputs.append(
            TxOutput(
                asset_id=asset_id,
                value=payment.value - per_output_fee,
                program_hash=payment.program_hash,
            )
        )

    needed = expected
    eligible = {ref: coin for ref, coin in coins.items() if coin.asset_id == asset_id}

    inputs: list[UTXOInput] = []
    spent: dict[UTXOInput, Coin] = {}
    change: TxOutput | None = None

    for ref, coin in sort_coins_by_value(eligible):
        inputs.append(ref)
        spent[ref] = coin

        if coin.value > expected:
            change = TxOutput(
                asset_id=asset_id,
                value=coin.value - expected,
                program_hash=change_program_hash,
            )
            # Change is always the last output
            outputs.append(change)
            expected = 0
            break
        elif coin.value == expected:
            expected = 0
            break
        else:
            expected -= coin.value
            logger.debug(f"Selected {ref} value={coin.value}, still need {expected}")

    if expected > 0:
        available = sum(coin.value for coin in eligible.values())
        raise InsufficientFunds(needed=needed, available=available)

    total_value = sum(coin.value for coin in spent.values())
    logger.debug(
        f"Selected {len(inputs)} coins totalling {total_value} "
        f"for {len(payments)} payments (change={change.value if change else 0})"
    )

    return CoinSelection(
        inputs=inputs,
        outputs=outputs,
        change=change,
        total_value=total_value,
        fee=per_output_fee * len(payments),
        spent_coins=spent,
    )
