"""
Optimistic Rollup Block

An ordered batch of transactions plus the submitter's claimed post-state root.
Blocks are created by RollupChain.submit_block and their status is changed
only through transition_to().
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Tuple

from rollup.core.transaction import Transaction
from rollup.core.types import BlockStatus, StateRoot
from rollup.crypto.merkle import merkle_root
from rollup.errors import InvalidTransitionError

logger = logging.getLogger(__name__)


@dataclass
class Block:
    """
    Rollup block.

    index is assigned by the chain at submission time and never reassigned.
    """
    index: int
    transactions: Tuple[Transaction, ...]
    claimed_state_root: StateRoot
    submitted_at: int
    submitter_id: Any = None
    status: BlockStatus = field(default=BlockStatus.PENDING)

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal

    def transition_to(self, target: BlockStatus) -> None:
        """
        Move to target status along an allowed edge.

        Raises:
            InvalidTransitionError: If the edge is not in the state machine
        """
        if not self.status.can_transition_to(target):
            raise InvalidTransitionError(
                f"block {self.index}", self.status.value, target.value
            )
        if target is not self.status:
            logger.debug(f"Block {self.index}: {self.status.value} -> {target.value}")
        self.status = target

    def transactions_root(self) -> StateRoot:
        """Compute Merkle root of transaction ids."""
        return merkle_root([tx.transaction_id() for tx in self.transactions])

    def to_dict(self) -> dict:
        """Export block as dictionary."""
        return {
            "index": self.index,
            "transactions": len(self.transactions),
            "transactions_root": self.transactions_root().hex(),
            "claimed_state_root": self.claimed_state_root.hex(),
            "submitted_at": self.submitted_at,
            "submitter_id": repr(self.submitter_id),
            "status": self.status.value,
        }

    def __repr__(self) -> str:
        return (
            f"Block(index={self.index}, tx={len(self.transactions)}, "
            f"root={self.claimed_state_root.hex()[:16]}..., "
            f"status={self.status.value})"
        )
