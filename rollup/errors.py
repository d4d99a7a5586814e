"""
Optimistic Rollup Error Handling

All error codes and exception classes.
"""

from enum import IntEnum
from typing import Optional, Any


class ErrorCode(IntEnum):
    """Protocol error codes."""

    # 1xxx - General errors
    UNKNOWN_ERROR = 1000
    INVALID_PARAMETER = 1001
    INVALID_TRANSITION = 1002

    # 2xxx - Submission errors
    EMPTY_BATCH = 2001
    OUT_OF_ORDER_SUBMISSION = 2002

    # 3xxx - Challenge errors
    UNKNOWN_BLOCK = 3001
    WINDOW_CLOSED = 3002
    SELF_CHALLENGE = 3003

    # 4xxx - Adjudication oracle errors
    ORACLE_ERROR = 4001


class RollupError(Exception):
    """Base exception for all rollup protocol errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: Optional[Any] = None
    ):
        self.code = code
        self.message = message
        self.details = details
        super().__init__(f"[{code.value}] {message}")

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict for API responses."""
        result = {
            "code": self.code.value,
            "name": self.code.name,
            "message": self.message,
        }
        if self.details is not None:
            result["details"] = self.details
        return result


# ==============================================================================
# General Errors (1xxx)
# ==============================================================================

class InvalidParameterError(RollupError):
    def __init__(self, param: str, message: str = ""):
        msg = f"Invalid parameter: {param}"
        if message:
            msg += f" - {message}"
        super().__init__(ErrorCode.INVALID_PARAMETER, msg, {"parameter": param})


class InvalidTransitionError(RollupError):
    """Raised when a status change is not an edge of the state machine."""

    def __init__(self, subject: str, current: str, target: str):
        super().__init__(
            ErrorCode.INVALID_TRANSITION,
            f"Invalid transition for {subject}: {current} -> {target}",
            {"subject": subject, "current": current, "target": target}
        )


# ==============================================================================
# Submission Errors (2xxx)
# ==============================================================================

class EmptyBatchError(RollupError):
    def __init__(self):
        super().__init__(
            ErrorCode.EMPTY_BATCH,
            "Block must contain at least one transaction"
        )


class OutOfOrderSubmissionError(RollupError):
    """
    Reserved. Submission always appends at the tail of the chain, so
    RollupChain never raises this; it exists to keep the taxonomy complete
    for callers that map error codes.
    """

    def __init__(self, expected: int, got: int):
        super().__init__(
            ErrorCode.OUT_OF_ORDER_SUBMISSION,
            f"Out of order submission: expected index {expected}, got {got}",
            {"expected": expected, "got": got}
        )


# ==============================================================================
# Challenge Errors (3xxx)
# ==============================================================================

class UnknownBlockError(RollupError):
    def __init__(self, index: Any, chain_length: int):
        super().__init__(
            ErrorCode.UNKNOWN_BLOCK,
            f"Unknown block: {index} (chain length {chain_length})",
            {"index": index, "chain_length": chain_length}
        )


class WindowClosedError(RollupError):
    def __init__(self, index: int, reason: str):
        super().__init__(
            ErrorCode.WINDOW_CLOSED,
            f"Challenge window closed for block {index}: {reason}",
            {"index": index, "reason": reason}
        )


class SelfChallengeError(RollupError):
    def __init__(self, index: int, challenger_id: Any):
        super().__init__(
            ErrorCode.SELF_CHALLENGE,
            f"Submitter {challenger_id!r} cannot challenge its own block {index}",
            {"index": index, "challenger_id": repr(challenger_id)}
        )


# ==============================================================================
# Oracle Errors (4xxx)
# ==============================================================================

class OracleError(RollupError):
    def __init__(self, index: int, message: str):
        super().__init__(
            ErrorCode.ORACLE_ERROR,
            f"Oracle failed for block {index}: {message}",
            {"index": index}
        )
