"""
Optimistic Rollup Core Data Structures

Records live in rollup.core.transaction, rollup.core.block and
rollup.core.challenge.
"""

from rollup.core.types import (
    StateRoot,
    BlockStatus,
    ChallengeResolution,
    BLOCK_TRANSITIONS,
    TERMINAL_BLOCK_STATUSES,
)

__all__ = [
    "StateRoot",
    "BlockStatus",
    "ChallengeResolution",
    "BLOCK_TRANSITIONS",
    "TERMINAL_BLOCK_STATUSES",
]
