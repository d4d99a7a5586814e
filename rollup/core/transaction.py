"""
Optimistic Rollup Transaction

Immutable payload unit carried in a block. The core never interprets the
payload; execution semantics belong to the adjudication oracle.
"""

from __future__ import annotations
from dataclasses import dataclass

from rollup.core.types import StateRoot
from rollup.crypto.hash import sha3_256
from rollup.errors import InvalidParameterError


@dataclass(frozen=True, slots=True)
class Transaction:
    """Opaque transaction payload."""
    payload: bytes

    def __post_init__(self):
        if not isinstance(self.payload, bytes):
            raise InvalidParameterError(
                "payload", f"expected bytes, got {type(self.payload).__name__}"
            )

    def transaction_id(self) -> StateRoot:
        """Compute transaction ID (hash of payload)."""
        return sha3_256(self.payload)

    def size(self) -> int:
        return len(self.payload)

    def __repr__(self) -> str:
        return f"Transaction(id={self.transaction_id().hex()[:16]}..., size={self.size()})"
