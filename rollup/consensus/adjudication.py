"""
Optimistic Rollup Adjudication

Deterministic fraud-proof rule. Correctness is a property of the block, so
every unresolved challenge on a block receives the same verdict in one pass.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, List, Protocol, TYPE_CHECKING, runtime_checkable

from rollup.core.types import BlockStatus, ChallengeResolution, StateRoot
from rollup.errors import OracleError

if TYPE_CHECKING:
    from rollup.core.block import Block
    from rollup.core.challenge import Challenge

logger = logging.getLogger(__name__)


@runtime_checkable
class AdjudicationOracle(Protocol):
    """Ground-truth source for a block's correct post-state root."""

    def correct_state_root(self, block: "Block") -> StateRoot:
        ...


class CallableOracle:
    """Adapts a plain function Block -> StateRoot to AdjudicationOracle."""

    def __init__(self, func: Callable[["Block"], StateRoot]):
        self._func = func

    def correct_state_root(self, block: "Block") -> StateRoot:
        return self._func(block)


def as_oracle(oracle) -> AdjudicationOracle:
    """Accept either an oracle object or a bare callable."""
    if isinstance(oracle, AdjudicationOracle):
        return oracle
    if callable(oracle):
        return CallableOracle(oracle)
    raise TypeError(f"Not an adjudication oracle: {oracle!r}")


@dataclass(frozen=True)
class Verdict:
    """Outcome of adjudicating one block."""
    block_status: BlockStatus
    challenge_resolution: ChallengeResolution
    correct_state_root: StateRoot

    @property
    def is_fraud(self) -> bool:
        return self.block_status is BlockStatus.FRAUDULENT


def adjudicate(block: "Block", oracle: AdjudicationOracle) -> Verdict:
    """
    Compare the block's claim against the oracle's ground truth.

    Oracle exceptions propagate untouched. A response that is not a
    32-byte root raises OracleError.

    Args:
        block: Block under dispute
        oracle: Ground-truth provider

    Returns:
        Verdict applying to the block and all its unresolved challenges
    """
    truth = oracle.correct_state_root(block)
    if not isinstance(truth, StateRoot):
        try:
            truth = StateRoot(truth)
        except (TypeError, ValueError) as e:
            raise OracleError(block.index, f"malformed state root: {e}") from e

    if truth != block.claimed_state_root:
        logger.debug(
            f"Block {block.index} claim {block.claimed_state_root.hex()[:16]} "
            f"!= truth {truth.hex()[:16]}"
        )
        return Verdict(BlockStatus.FRAUDULENT, ChallengeResolution.UPHELD, truth)

    return Verdict(BlockStatus.FINALIZED, ChallengeResolution.REJECTED, truth)


def apply_verdict(verdict: Verdict, challenges: List["Challenge"]) -> int:
    """
    Resolve every unresolved challenge with the verdict's outcome.

    Returns:
        Number of challenges resolved
    """
    resolved = 0
    for challenge in challenges:
        if not challenge.is_resolved:
            challenge.resolve(verdict.challenge_resolution)
            resolved += 1
    return resolved
