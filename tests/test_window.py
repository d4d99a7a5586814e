"""
Optimistic Rollup Challenge Window Tests
"""

import pytest

from rollup.consensus.window import ChallengeWindow, closes_at, is_open
from rollup.errors import InvalidParameterError


class TestIsOpen:
    """Tests for the pure window function."""

    def test_open_at_submission(self):
        assert is_open(10, 10, 5)

    def test_open_before_boundary(self):
        assert is_open(10, 14, 5)

    def test_closed_at_exact_boundary(self):
        """Test now - submitted_at == duration counts as closed."""
        assert not is_open(10, 15, 5)

    def test_closed_after_boundary(self):
        assert not is_open(10, 100, 5)

    def test_closes_at(self):
        assert closes_at(10, 5) == 15


class TestChallengeWindow:
    """Tests for ChallengeWindow policy object."""

    def test_bound_duration(self):
        window = ChallengeWindow(3)
        assert window.is_open(0, 2)
        assert window.is_expired(0, 3)
        assert window.closes_at(7) == 10

    @pytest.mark.parametrize("duration", [0, -1, 2.5, True])
    def test_invalid_duration(self, duration):
        """Test non-positive or non-integer durations are rejected."""
        with pytest.raises(InvalidParameterError):
            ChallengeWindow(duration)
