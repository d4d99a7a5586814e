"""
Optimistic Rollup Challenge Window

Pure time policy. A block may be disputed during the half-open interval
[submitted_at, submitted_at + window_duration).
"""

from __future__ import annotations
from dataclasses import dataclass

from rollup.constants import DEFAULT_CHALLENGE_WINDOW, MIN_CHALLENGE_WINDOW
from rollup.errors import InvalidParameterError


def is_open(submitted_at: int, now: int, window_duration: int) -> bool:
    """
    Check whether a challenge window is still open.

    now - submitted_at == window_duration counts as closed.

    Args:
        submitted_at: Block submission time
        now: Current time
        window_duration: Window length in the same units

    Returns:
        True if challenges are still accepted
    """
    return (now - submitted_at) < window_duration


def closes_at(submitted_at: int, window_duration: int) -> int:
    """First instant at which the window is closed."""
    return submitted_at + window_duration


@dataclass(frozen=True)
class ChallengeWindow:
    """Window policy bound to one chain's fixed duration."""
    duration: int = DEFAULT_CHALLENGE_WINDOW

    def __post_init__(self):
        if isinstance(self.duration, bool) or not isinstance(self.duration, int):
            raise InvalidParameterError("window_duration", "must be an integer")
        if self.duration < MIN_CHALLENGE_WINDOW:
            raise InvalidParameterError(
                "window_duration", f"must be at least {MIN_CHALLENGE_WINDOW}"
            )

    def is_open(self, submitted_at: int, now: int) -> bool:
        return is_open(submitted_at, now, self.duration)

    def is_expired(self, submitted_at: int, now: int) -> bool:
        return not is_open(submitted_at, now, self.duration)

    def closes_at(self, submitted_at: int) -> int:
        return closes_at(submitted_at, self.duration)
