"""
Optimistic Rollup Type Tests
"""

import pytest

from rollup.core.block import Block
from rollup.core.challenge import Challenge
from rollup.core.transaction import Transaction
from rollup.core.types import (
    BlockStatus,
    ChallengeResolution,
    StateRoot,
    TERMINAL_BLOCK_STATUSES,
)
from rollup.crypto.merkle import merkle_root
from rollup.errors import (
    ErrorCode,
    InvalidParameterError,
    InvalidTransitionError,
    WindowClosedError,
)


class TestStateRoot:
    """Tests for StateRoot type."""

    def test_zero(self):
        """Test zero root creation."""
        root = StateRoot.zero()
        assert root.data == bytes(32)
        assert root == StateRoot.zero()

    def test_hex_roundtrip(self):
        """Test root from hex string."""
        hex_str = "ab" * 32
        assert StateRoot.from_hex(hex_str).hex() == hex_str

    def test_wrong_size(self):
        """Test that non-32-byte data is rejected."""
        with pytest.raises(ValueError):
            StateRoot(bytes(31))

    def test_equality_with_bytes(self):
        """Test comparison against raw bytes."""
        data = bytes(range(32))
        assert StateRoot(data) == data
        assert StateRoot(data) != StateRoot.zero()

    def test_hashable(self):
        """Test roots can be used as dict keys."""
        data = bytes(range(32))
        assert {StateRoot(data): 1}[StateRoot(data)] == 1

    def test_bytearray_copied(self):
        """Test the root does not alias a caller's mutable buffer."""
        buffer = bytearray(32)
        root = StateRoot(buffer)
        buffer[0] = 1

        assert isinstance(root.data, bytes)
        assert root == StateRoot.zero()


class TestBlockStatus:
    """Tests for the block status machine."""

    def test_terminal_states(self):
        """Test only FINALIZED and FRAUDULENT are terminal."""
        assert TERMINAL_BLOCK_STATUSES == {BlockStatus.FINALIZED, BlockStatus.FRAUDULENT}
        assert not BlockStatus.PENDING.is_terminal
        assert not BlockStatus.CHALLENGED.is_terminal

    def test_allowed_edges(self):
        """Test edges out of non-terminal states."""
        assert BlockStatus.PENDING.can_transition_to(BlockStatus.CHALLENGED)
        assert BlockStatus.PENDING.can_transition_to(BlockStatus.FINALIZED)
        assert BlockStatus.CHALLENGED.can_transition_to(BlockStatus.CHALLENGED)
        assert BlockStatus.CHALLENGED.can_transition_to(BlockStatus.FRAUDULENT)
        assert not BlockStatus.CHALLENGED.can_transition_to(BlockStatus.PENDING)

    @pytest.mark.parametrize("terminal", [BlockStatus.FINALIZED, BlockStatus.FRAUDULENT])
    def test_terminal_has_no_edges(self, terminal):
        """Test terminal states accept no transition at all."""
        for target in BlockStatus:
            assert not terminal.can_transition_to(target)


class TestTransaction:
    """Tests for Transaction."""

    def test_immutable(self):
        """Test transaction payload cannot be reassigned."""
        tx = Transaction(b"payload")
        with pytest.raises(AttributeError):
            tx.payload = b"other"

    def test_rejects_non_bytes(self):
        """Test payload type check."""
        with pytest.raises(InvalidParameterError):
            Transaction("text")

    def test_transaction_id_deterministic(self):
        """Test id depends only on payload."""
        assert Transaction(b"a").transaction_id() == Transaction(b"a").transaction_id()
        assert Transaction(b"a").transaction_id() != Transaction(b"b").transaction_id()


class TestBlock:
    """Tests for Block."""

    def _block(self, status=BlockStatus.PENDING):
        return Block(
            index=0,
            transactions=(Transaction(b"x"), Transaction(b"y")),
            claimed_state_root=StateRoot.zero(),
            submitted_at=0,
            submitter_id="alice",
            status=status,
        )

    def test_transition_terminal_rejected(self):
        """Test a finalized block cannot change status."""
        block = self._block(BlockStatus.FINALIZED)
        with pytest.raises(InvalidTransitionError):
            block.transition_to(BlockStatus.FRAUDULENT)
        assert block.status is BlockStatus.FINALIZED

    def test_transactions_root(self):
        """Test transactions root matches Merkle root of ids."""
        block = self._block()
        expected = merkle_root([tx.transaction_id() for tx in block.transactions])
        assert block.transactions_root() == expected

    def test_to_dict(self):
        """Test audit export."""
        data = self._block().to_dict()
        assert data["index"] == 0
        assert data["transactions"] == 2
        assert data["status"] == "pending"


class TestChallenge:
    """Tests for Challenge."""

    def test_resolve_once(self):
        """Test resolution is set exactly once."""
        challenge = Challenge(0, 0, "bob", "bad root", 1)
        challenge.resolve(ChallengeResolution.UPHELD)
        assert challenge.resolution is ChallengeResolution.UPHELD

        with pytest.raises(InvalidTransitionError):
            challenge.resolve(ChallengeResolution.REJECTED)
        assert challenge.resolution is ChallengeResolution.UPHELD

    def test_to_dict(self):
        data = Challenge(2, 1, "bob", "bad root", 4).to_dict()
        assert data["block_index"] == 2
        assert data["challenge_id"] == 1
        assert data["resolution"] == "unresolved"

    def test_cannot_resolve_to_unresolved(self):
        """Test UNRESOLVED is not an outcome."""
        challenge = Challenge(0, 0, "bob", "bad root", 1)
        with pytest.raises(InvalidTransitionError):
            challenge.resolve(ChallengeResolution.UNRESOLVED)


class TestErrors:
    """Tests for error taxonomy."""

    def test_to_dict(self):
        """Test API-shaped error export."""
        err = WindowClosedError(3, "expired")
        data = err.to_dict()
        assert data["code"] == ErrorCode.WINDOW_CLOSED.value
        assert data["name"] == "WINDOW_CLOSED"
        assert data["details"]["index"] == 3
        assert str(err).startswith("[3002]")
