"""
Optimistic Rollup Core Types

State root digest and the closed status enums for blocks and challenges.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet

from rollup.constants import STATE_ROOT_SIZE


@dataclass(frozen=True, slots=True)
class StateRoot:
    """
    Opaque fixed-size state commitment.

    SIZE: 32 bytes
    SERIALIZATION: raw bytes
    """
    data: bytes = field(default_factory=lambda: bytes(STATE_ROOT_SIZE))

    def __post_init__(self):
        if not isinstance(self.data, (bytes, bytearray)):
            raise ValueError(f"StateRoot data must be bytes, got {type(self.data).__name__}")
        if len(self.data) != STATE_ROOT_SIZE:
            raise ValueError(f"StateRoot must be {STATE_ROOT_SIZE} bytes, got {len(self.data)}")
        object.__setattr__(self, "data", bytes(self.data))

    def __bytes__(self) -> bytes:
        return bytes(self.data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StateRoot):
            return self.data == other.data
        if isinstance(other, bytes):
            return self.data == other
        return False

    def __hash__(self) -> int:
        return hash(bytes(self.data))

    def __repr__(self) -> str:
        return f"StateRoot({self.data.hex()[:16]}...)"

    def hex(self) -> str:
        return self.data.hex()

    @classmethod
    def from_hex(cls, hex_string: str) -> StateRoot:
        return cls(bytes.fromhex(hex_string))

    @classmethod
    def zero(cls) -> StateRoot:
        return cls(bytes(STATE_ROOT_SIZE))

    def serialize(self) -> bytes:
        """Serialize to raw bytes."""
        return bytes(self.data)


class BlockStatus(Enum):
    """Block lifecycle state."""
    PENDING = "pending"
    CHALLENGED = "challenged"
    FINALIZED = "finalized"
    FRAUDULENT = "fraudulent"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_BLOCK_STATUSES

    def can_transition_to(self, target: "BlockStatus") -> bool:
        return target in BLOCK_TRANSITIONS[self]


class ChallengeResolution(Enum):
    """Challenge adjudication outcome."""
    UNRESOLVED = "unresolved"
    UPHELD = "upheld"           # fraud confirmed
    REJECTED = "rejected"       # challenge invalid

    @property
    def is_resolved(self) -> bool:
        return self is not ChallengeResolution.UNRESOLVED


TERMINAL_BLOCK_STATUSES: FrozenSet[BlockStatus] = frozenset({
    BlockStatus.FINALIZED,
    BlockStatus.FRAUDULENT,
})

# Allowed edges of the block state machine
BLOCK_TRANSITIONS: Dict[BlockStatus, FrozenSet[BlockStatus]] = {
    BlockStatus.PENDING: frozenset({
        BlockStatus.CHALLENGED,
        BlockStatus.FINALIZED,
        BlockStatus.FRAUDULENT,
    }),
    BlockStatus.CHALLENGED: frozenset({
        BlockStatus.CHALLENGED,
        BlockStatus.FINALIZED,
        BlockStatus.FRAUDULENT,
    }),
    BlockStatus.FINALIZED: frozenset(),
    BlockStatus.FRAUDULENT: frozenset(),
}
