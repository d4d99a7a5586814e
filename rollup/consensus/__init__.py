"""
Optimistic Rollup Dispute Rules

Challenge window policy and adjudication.
"""

from rollup.consensus.window import (
    ChallengeWindow,
    is_open,
    closes_at,
)
from rollup.consensus.adjudication import (
    AdjudicationOracle,
    CallableOracle,
    Verdict,
    adjudicate,
    apply_verdict,
    as_oracle,
)

__all__ = [
    # Window
    "ChallengeWindow",
    "is_open",
    "closes_at",
    # Adjudication
    "AdjudicationOracle",
    "CallableOracle",
    "Verdict",
    "adjudicate",
    "apply_verdict",
    "as_oracle",
]
