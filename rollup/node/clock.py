"""
Optimistic Rollup Clocks

Time sources handed to ChainService. The chain never reads time itself.
"""

from __future__ import annotations
import logging
import time
from typing import Protocol

from rollup.errors import InvalidParameterError

logger = logging.getLogger(__name__)


class Clock(Protocol):
    def now(self) -> int:
        ...


class SimulatedClock:
    """Logical L1 clock advanced explicitly in ticks."""

    def __init__(self, start: int = 0):
        self._time = start

    def now(self) -> int:
        return self._time

    def advance(self, ticks: int) -> int:
        """
        Move time forward.

        Raises:
            InvalidParameterError: If ticks is negative
        """
        if ticks < 0:
            raise InvalidParameterError("ticks", "clock cannot move backwards")
        self._time += ticks
        logger.debug(f"Advanced L1 time by {ticks} ticks to {self._time}")
        return self._time


class WallClock:
    """Whole seconds since the epoch."""

    def now(self) -> int:
        return int(time.time())
