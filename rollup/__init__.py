"""
Optimistic Rollup Dispute Core

Blocks are accepted provisionally and become final only after surviving a
challenge window.
"""

__version__ = "0.1.0"
__author__ = "Rollup Protocol"

from rollup.constants import PROTOCOL_VERSION, DEFAULT_CHALLENGE_WINDOW

__all__ = [
    "PROTOCOL_VERSION",
    "DEFAULT_CHALLENGE_WINDOW",
    "__version__",
]
