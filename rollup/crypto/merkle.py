"""
Optimistic Rollup Merkle Root

Binary Merkle tree with SHA3-256 for batch content commitment.
"""

from __future__ import annotations
from typing import List

from rollup.core.types import StateRoot
from rollup.crypto.hash import sha3_256


def is_power_of_two(n: int) -> bool:
    """Check if n is a power of 2."""
    return n > 0 and (n & (n - 1)) == 0


def merkle_root(hashes: List[StateRoot]) -> StateRoot:
    """
    Compute Merkle root from a list of leaf digests.

    - Empty list returns zero digest
    - Single element returns that element
    - Otherwise, pad to power of 2 and build tree bottom-up

    Args:
        hashes: List of leaf digests

    Returns:
        Merkle root
    """
    if len(hashes) == 0:
        return StateRoot.zero()

    if len(hashes) == 1:
        return hashes[0]

    leaves = list(hashes)

    # Pad to power of 2 by duplicating last element
    while not is_power_of_two(len(leaves)):
        leaves.append(leaves[-1])

    while len(leaves) > 1:
        next_level = []
        for i in range(0, len(leaves), 2):
            combined = leaves[i].data + leaves[i + 1].data
            next_level.append(sha3_256(combined))
        leaves = next_level

    return leaves[0]
