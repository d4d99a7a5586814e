"""
Optimistic Rollup Chain Service

Multi-actor facade over one RollupChain. Every operation holds a single
lock for its whole read-modify-write sequence, and reads time from the
injected clock.
"""

from __future__ import annotations
import asyncio
import logging
from typing import Any, Iterable, List, Optional, Tuple, Union

from rollup.core.block import Block
from rollup.core.challenge import Challenge
from rollup.core.transaction import Transaction
from rollup.core.types import StateRoot
from rollup.node.clock import Clock, SimulatedClock
from rollup.state.chain import RollupChain, Transition

logger = logging.getLogger(__name__)


class ChainService:
    """Serializes access to a RollupChain."""

    def __init__(self, chain: RollupChain, clock: Optional[Clock] = None):
        self.chain = chain
        self.clock = clock if clock is not None else SimulatedClock()
        self._lock = asyncio.Lock()

    async def submit_block(
        self,
        transactions: Iterable[Transaction],
        claimed_state_root: Union[StateRoot, bytes],
        submitter_id: Any = None,
    ) -> int:
        async with self._lock:
            return self.chain.submit_block(
                transactions, claimed_state_root, self.clock.now(), submitter_id
            )

    async def challenge_block(
        self,
        block_index: int,
        challenger_id: Any,
        reason: Any,
    ) -> int:
        async with self._lock:
            return self.chain.challenge_block(
                block_index, challenger_id, reason, self.clock.now()
            )

    async def resolve(self) -> List[Transition]:
        async with self._lock:
            return self.chain.resolve(self.clock.now())

    async def advance(self, ticks: int) -> List[Transition]:
        """
        Advance a simulated clock and settle whatever expired.

        Raises:
            TypeError: If the clock cannot be advanced
        """
        if not isinstance(self.clock, SimulatedClock):
            raise TypeError(f"{type(self.clock).__name__} cannot be advanced")

        async with self._lock:
            now = self.clock.advance(ticks)
            transitions = self.chain.resolve(now)

        if transitions:
            logger.info(f"Advanced to {now}: {len(transitions)} block(s) settled")
        return transitions

    async def get_block(self, index: int) -> Block:
        async with self._lock:
            return self.chain.get_block(index)

    async def get_challenges(self, index: int) -> Tuple[Challenge, ...]:
        async with self._lock:
            return self.chain.get_challenges(index)

    async def chain_length(self) -> int:
        async with self._lock:
            return self.chain.chain_length()

    async def run_resolver(self, interval: float, stop: asyncio.Event) -> int:
        """
        Call resolve() every interval seconds until stop is set.

        Returns:
            Total number of transitions applied
        """
        total = 0
        while not stop.is_set():
            total += len(await self.resolve())
            try:
                await asyncio.wait_for(stop.wait(), timeout=interval)
            except asyncio.TimeoutError:
                pass
        logger.info(f"Resolver stopped after {total} transition(s)")
        return total
