"""
Optimistic Rollup Cryptographic Primitives
"""

from rollup.crypto.hash import sha3_256
from rollup.crypto.merkle import merkle_root

__all__ = [
    "sha3_256",
    "merkle_root",
]
