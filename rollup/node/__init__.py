"""
Optimistic Rollup Node Components
"""

from rollup.node.clock import Clock, SimulatedClock, WallClock
from rollup.node.config import RollupConfig, ChainConfig, LogConfig, setup_logging
from rollup.node.service import ChainService

__all__ = [
    "Clock",
    "SimulatedClock",
    "WallClock",
    "RollupConfig",
    "ChainConfig",
    "LogConfig",
    "setup_logging",
    "ChainService",
]
