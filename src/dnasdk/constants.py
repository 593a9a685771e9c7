"""
Chain constants used when building asset transactions.

Amounts are fixed-point integers scaled by 10**PRECISION, so 1.5 units of an
asset are stored as 150_000_000.
"""

from __future__ import annotations

# Fixed-point precision (decimal places) for every asset amount
PRECISION = 8
FIXED64_SCALE = 10**PRECISION

# Amounts must fit a signed 64-bit integer once scaled
FIXED64_MAX = 2**63 - 1
FIXED64_MIN = -(2**63)

# Configured fees carry 4 decimal places before conversion
FEE_CONFIG_DECIMALS = 4

# Configured fee meaning "derive the fee from the transaction size"
FEE_FROM_SIZE = -1

# Version byte prepended to a program hash in an address
ADDRESS_VERSION = 0x17

PROGRAM_HASH_LENGTH = 20
ASSET_ID_LENGTH = 32
TXID_LENGTH = 32

# Script opcodes used by single-signature contracts
OP_PUSHDATA1 = 0x4C
OP_PUSHDATA2 = 0x4D
OP_PUSHDATA4 = 0x4E
OP_CHECKSIG = 0xAC

# Nonce attributes carry a non-negative 63-bit integer
NONCE_BITS = 63
