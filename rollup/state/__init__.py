"""
Optimistic Rollup Chain State

Block/challenge lifecycle and the reference ledger.
"""

from rollup.state.chain import (
    RollupChain,
    Transition,
)
from rollup.state.ledger import (
    Ledger,
    ReplayOracle,
    Transfer,
    build_block_claim,
    decode_transfers,
)

__all__ = [
    # Chain
    "RollupChain",
    "Transition",
    # Ledger
    "Ledger",
    "ReplayOracle",
    "Transfer",
    "build_block_claim",
    "decode_transfers",
]
