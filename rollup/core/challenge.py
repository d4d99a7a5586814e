"""
Optimistic Rollup Challenge

A dispute record against one block. Its resolution is set exactly once.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any

from rollup.core.types import ChallengeResolution
from rollup.errors import InvalidTransitionError


@dataclass
class Challenge:
    """Dispute raised against a block."""
    block_index: int
    challenge_id: int                   # Position in the block's challenge list
    challenger_id: Any
    reason: Any
    raised_at: int
    resolution: ChallengeResolution = field(default=ChallengeResolution.UNRESOLVED)

    @property
    def is_resolved(self) -> bool:
        return self.resolution.is_resolved

    def resolve(self, outcome: ChallengeResolution) -> None:
        """
        Record the adjudication outcome.

        Raises:
            InvalidTransitionError: If already resolved or outcome is UNRESOLVED
        """
        if self.is_resolved or not outcome.is_resolved:
            raise InvalidTransitionError(
                f"challenge {self.block_index}/{self.challenge_id}",
                self.resolution.value,
                outcome.value,
            )
        self.resolution = outcome

    def to_dict(self) -> dict:
        return {
            "block_index": self.block_index,
            "challenge_id": self.challenge_id,
            "challenger_id": repr(self.challenger_id),
            "reason": repr(self.reason),
            "raised_at": self.raised_at,
            "resolution": self.resolution.value,
        }
