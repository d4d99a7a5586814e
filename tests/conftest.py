"""
Optimistic Rollup Test Fixtures
"""

import pytest

from rollup.core.transaction import Transaction
from rollup.core.types import StateRoot
from rollup.state.chain import RollupChain

WINDOW = 5


class FixedOracle:
    """Oracle reporting a configurable root per block index."""

    def __init__(self, default: StateRoot):
        self.default = default
        self.roots = {}
        self.calls = []

    def correct_state_root(self, block):
        self.calls.append(block.index)
        return self.roots.get(block.index, self.default)


class FailingOracle:
    """Oracle whose ground truth is unavailable."""

    def correct_state_root(self, block):
        raise LookupError(f"no ground truth for block {block.index}")


@pytest.fixture
def root_r1() -> StateRoot:
    return StateRoot(bytes([0x11] * 32))


@pytest.fixture
def root_r2() -> StateRoot:
    return StateRoot(bytes([0x22] * 32))


@pytest.fixture
def two_transactions():
    return [Transaction(b"transfer:1->2:40"), Transaction(b"transfer:2->3:10")]


@pytest.fixture
def oracle(root_r1) -> FixedOracle:
    """Oracle that agrees with R1 unless told otherwise."""
    return FixedOracle(root_r1)


@pytest.fixture
def chain(oracle) -> RollupChain:
    return RollupChain(oracle, window_duration=WINDOW)


@pytest.fixture
def failing_oracle() -> FailingOracle:
    return FailingOracle()
