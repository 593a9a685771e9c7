"""
Per-output fee calculation.

The configured fee is a total for the transaction; it is split evenly across
the requested outputs, each of which pays its share out of its own amount.
"""

from __future__ import annotations

import math

from loguru import logger

from dnasdk.config import Settings
from dnasdk.constants import FEE_CONFIG_DECIMALS, FEE_FROM_SIZE
from dnasdk.errors import InvalidAmount, InvalidFeeConfig, NoOutputsSpecified
from dnasdk.fixed64 import string_to_fixed64
from dnasdk.models import TransactionKind


def compute_fee(kind: TransactionKind, output_count: int, settings: Settings) -> int:
    """
    Calculate the fee charged to each requested output.

    Args:
        kind: Transaction kind the fee is configured for
        output_count: Number of requested outputs sharing the fee
        settings: Settings holding the fee table

    Returns:
        Per-output fee as a fixed-point integer (floor of total / count)

    Raises:
        NoOutputsSpecified: If output_count is less than one
        InvalidFeeConfig: If the configured fee is the size sentinel or is not
            a valid non-negative amount
    """
    if output_count < 1:
        raise NoOutputsSpecified("Fee needs at least one output to be charged to")

    configured = settings.fee_for(kind.fee_key)
    if configured is None:
        return 0

    if configured == FEE_FROM_SIZE:
        raise InvalidFeeConfig(
            f"Size-derived fee configured for {kind.fee_key}, which is not supported"
        )

    if not math.isfinite(configured) or configured < 0:
        raise InvalidFeeConfig(f"Invalid transaction fee for {kind.fee_key}: {configured}")

    try:
        total_fee = string_to_fixed64(f"{configured:.{FEE_CONFIG_DECIMALS}f}")
    except InvalidAmount as e:
        raise InvalidFeeConfig(f"Invalid transaction fee for {kind.fee_key}: {e}") from e

    per_output = total_fee // output_count
    logger.debug(f"{kind.fee_key} fee {total_fee} split over {output_count} outputs: {per_output}")
    return per_output
