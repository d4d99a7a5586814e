"""
Optimistic Rollup Chain

Block and challenge lifecycle: submit_block, challenge_block, resolve.

RollupChain is the only mutator of its blocks and challenges. Each public
operation either applies its whole effect or raises leaving the chain as it
found it.
Time is always supplied by the caller.
"""

from __future__ import annotations
import logging
from dataclasses import replace
from typing import Any, Dict, Iterable, List, NamedTuple, Tuple, Union

from rollup.constants import DEFAULT_CHALLENGE_WINDOW
from rollup.consensus.adjudication import (
    AdjudicationOracle,
    adjudicate,
    apply_verdict,
    as_oracle,
)
from rollup.consensus.window import ChallengeWindow
from rollup.core.block import Block
from rollup.core.challenge import Challenge
from rollup.core.transaction import Transaction
from rollup.core.types import BlockStatus, ChallengeResolution, StateRoot
from rollup.errors import (
    EmptyBatchError,
    InvalidParameterError,
    SelfChallengeError,
    UnknownBlockError,
    WindowClosedError,
)

logger = logging.getLogger(__name__)


class Transition(NamedTuple):
    """Terminal status change applied by resolve()."""
    index: int
    status: BlockStatus


class RollupChain:
    """
    Append-only chain of provisionally accepted blocks.

    Blocks below the watermark are terminal and never revisited.
    """

    def __init__(
        self,
        oracle: Union[AdjudicationOracle, Any],
        window_duration: int = DEFAULT_CHALLENGE_WINDOW,
    ):
        self._oracle = as_oracle(oracle)
        self._window = ChallengeWindow(window_duration)
        self._blocks: List[Block] = []
        self._challenges: Dict[int, List[Challenge]] = {}
        self._watermark = 0
        self._history: List[Transition] = []

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def window(self) -> ChallengeWindow:
        return self._window

    @property
    def window_duration(self) -> int:
        return self._window.duration

    @property
    def watermark(self) -> int:
        """Lowest block index not yet terminally resolved."""
        return self._watermark

    def chain_length(self) -> int:
        return len(self._blocks)

    def __len__(self) -> int:
        return len(self._blocks)

    @property
    def history(self) -> Tuple[Transition, ...]:
        """Every transition applied by resolve(), oldest first."""
        return tuple(self._history)

    def get_block(self, index: int) -> Block:
        """
        Get a snapshot of a block by index.

        Raises:
            UnknownBlockError: If no block has this index
        """
        return replace(self._blocks[self._check_index(index)])

    def get_challenges(self, index: int) -> Tuple[Challenge, ...]:
        """
        Get snapshots of all challenges raised against a block, in raising order.

        Raises:
            UnknownBlockError: If no block has this index
        """
        return tuple(replace(c) for c in self._challenges[self._check_index(index)])

    def blocks(self) -> Tuple[Block, ...]:
        return tuple(replace(b) for b in self._blocks)

    def pending_indices(self) -> List[int]:
        """Indices of blocks that are not yet terminal."""
        return [b.index for b in self._blocks[self._watermark:] if not b.is_terminal]

    def is_challengeable(self, index: int, now: int) -> bool:
        block = self._blocks[self._check_index(index)]
        return not block.is_terminal and self._window.is_open(block.submitted_at, now)

    def _check_index(self, index: int) -> int:
        if (
            isinstance(index, bool)
            or not isinstance(index, int)
            or index < 0
            or index >= len(self._blocks)
        ):
            raise UnknownBlockError(index, len(self._blocks))
        return index

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    def submit_block(
        self,
        transactions: Iterable[Transaction],
        claimed_state_root: Union[StateRoot, bytes],
        now: int,
        submitter_id: Any = None,
    ) -> int:
        """
        Append a new pending block at the tail of the chain.

        Args:
            transactions: Non-empty ordered batch
            claimed_state_root: Submitter's asserted post-state root
            now: Submission time
            submitter_id: Opaque submitter identity

        Returns:
            Index of the new block

        Raises:
            EmptyBatchError: If the batch is empty
            InvalidParameterError: If an item is not a Transaction or the root is malformed
        """
        batch = tuple(transactions)
        if not batch:
            raise EmptyBatchError()

        for position, tx in enumerate(batch):
            if not isinstance(tx, Transaction):
                raise InvalidParameterError(
                    "transactions", f"item {position} is {type(tx).__name__}, not Transaction"
                )

        if not isinstance(claimed_state_root, StateRoot):
            try:
                claimed_state_root = StateRoot(claimed_state_root)
            except ValueError as e:
                raise InvalidParameterError("claimed_state_root", str(e)) from e

        index = len(self._blocks)
        block = Block(
            index=index,
            transactions=batch,
            claimed_state_root=claimed_state_root,
            submitted_at=now,
            submitter_id=submitter_id,
        )
        self._blocks.append(block)
        self._challenges[index] = []

        logger.info(
            f"Block #{index} submitted by {submitter_id!r}: {len(batch)} tx, "
            f"root={claimed_state_root.hex()[:16]}, window closes at "
            f"{self._window.closes_at(now)}"
        )
        return index

    # ------------------------------------------------------------------
    # Challenges
    # ------------------------------------------------------------------

    def challenge_block(
        self,
        block_index: int,
        challenger_id: Any,
        reason: Any,
        now: int,
    ) -> int:
        """
        Dispute a block while its window is open.

        Args:
            block_index: Target block
            challenger_id: Opaque challenger identity
            reason: Opaque description of the suspected fault
            now: Current time

        Returns:
            Challenge id (position in the block's challenge list)

        Raises:
            UnknownBlockError: If the block does not exist
            WindowClosedError: If the block is terminal or its window has expired
            SelfChallengeError: If the challenger submitted the block
        """
        block = self._blocks[self._check_index(block_index)]

        if block.is_terminal:
            raise WindowClosedError(block_index, f"block is {block.status.value}")

        if not self._window.is_open(block.submitted_at, now):
            raise WindowClosedError(
                block_index,
                f"expired at {self._window.closes_at(block.submitted_at)}, now {now}",
            )

        if block.submitter_id is not None and challenger_id == block.submitter_id:
            raise SelfChallengeError(block_index, challenger_id)

        challenges = self._challenges[block_index]
        challenge = Challenge(
            block_index=block_index,
            challenge_id=len(challenges),
            challenger_id=challenger_id,
            reason=reason,
            raised_at=now,
        )
        challenges.append(challenge)

        if block.status is BlockStatus.PENDING:
            block.transition_to(BlockStatus.CHALLENGED)

        logger.info(
            f"Fraud challenge #{challenge.challenge_id} submitted on block "
            f"#{block_index} by {challenger_id!r}: {reason!r}"
        )
        return challenge.challenge_id

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve(self, now: int) -> List[Transition]:
        """
        Settle every block whose window has closed, in index order.

        Stops at the first block whose window is still open, so a later block
        is never settled before an earlier one. All-or-nothing: if the oracle
        raises, every block and challenge touched by this call is restored and
        the error propagates unchanged.

        Args:
            now: Current time

        Returns:
            Transitions applied by this call (empty if nothing changed)
        """
        transitions: List[Transition] = []
        watermark = self._watermark
        history_length = len(self._history)
        touched: List[Tuple[Block, BlockStatus, List[Tuple[Challenge, ChallengeResolution]]]] = []

        try:
            while self._watermark < len(self._blocks):
                block = self._blocks[self._watermark]

                if self._window.is_open(block.submitted_at, now):
                    logger.debug(
                        f"Block #{block.index} window open until "
                        f"{self._window.closes_at(block.submitted_at)}, stopping at now={now}"
                    )
                    break

                challenges = self._challenges[block.index]
                touched.append((block, block.status, [(c, c.resolution) for c in challenges]))

                target = self._settle(block, challenges)
                transition = Transition(block.index, target)
                transitions.append(transition)
                self._history.append(transition)
                self._watermark += 1
        except Exception:
            for block, status, resolutions in touched:
                block.status = status
                for challenge, resolution in resolutions:
                    challenge.resolution = resolution
            self._watermark = watermark
            del self._history[history_length:]
            logger.warning(
                f"Resolve at {now} rolled back {len(transitions)} transition(s) "
                f"after failure on block #{self._watermark + len(transitions)}"
            )
            raise

        if not transitions:
            logger.debug(f"Resolve at {now}: no transitions")

        return transitions

    def _settle(self, block: Block, challenges: List[Challenge]) -> BlockStatus:
        unresolved = [c for c in challenges if not c.is_resolved]

        if unresolved:
            # Oracle sees a snapshot, never the chain's own record
            verdict = adjudicate(replace(block), self._oracle)
            count = apply_verdict(verdict, unresolved)
            target = verdict.block_status
            logger.info(
                f"Block #{block.index}: {count} challenge(s) "
                f"{verdict.challenge_resolution.value}"
            )
        else:
            target = BlockStatus.FINALIZED

        block.transition_to(target)

        if target is BlockStatus.FRAUDULENT:
            logger.warning(f"Block #{block.index} marked FRAUDULENT")
        else:
            logger.info(f"Block #{block.index} finalized")
        return target

    def __repr__(self) -> str:
        return (
            f"RollupChain(length={len(self._blocks)}, watermark={self._watermark}, "
            f"window={self._window.duration})"
        )
