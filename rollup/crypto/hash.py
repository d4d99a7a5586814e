"""
Optimistic Rollup Hash Functions

SHA3-256 per NIST FIPS 202.
"""

from __future__ import annotations
import hashlib
from typing import Union

from rollup.core.types import StateRoot


def sha3_256(data: Union[bytes, bytearray, memoryview]) -> StateRoot:
    """
    SHA3-256 hash function per NIST FIPS 202.

    Args:
        data: Input data to hash

    Returns:
        StateRoot: 32-byte hash output wrapped in StateRoot type
    """
    hasher = hashlib.sha3_256()
    hasher.update(data)
    return StateRoot(hasher.digest())
