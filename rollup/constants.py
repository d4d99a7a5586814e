"""
Optimistic Rollup Constants

All protocol constants defined here for single source of truth.
"""

from typing import Final

# ==============================================================================
# PROTOCOL
# ==============================================================================

PROTOCOL_VERSION: Final[int] = 1

# ==============================================================================
# DIGESTS
# ==============================================================================

STATE_ROOT_SIZE: Final[int] = 32                # SHA3-256 output

# ==============================================================================
# CHALLENGE WINDOW
# ==============================================================================

# Window length in caller-supplied time units (ticks, seconds, L1 blocks...)
DEFAULT_CHALLENGE_WINDOW: Final[int] = 5
MIN_CHALLENGE_WINDOW: Final[int] = 1

# ==============================================================================
# TRANSFER PAYLOADS
# ==============================================================================

# sender (u64) || receiver (u64) || amount (u64), big-endian
TRANSFER_PAYLOAD_SIZE: Final[int] = 24
MAX_U64: Final[int] = 2**64 - 1
