"""
Optimistic Rollup Reference Ledger

Balance-transfer payloads and a replaying adjudication oracle. The chain
itself never executes transactions; this module is one concrete ground-truth
source that can be injected into RollupChain.
"""

from __future__ import annotations
import logging
import struct
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, TYPE_CHECKING

from rollup.constants import MAX_U64, TRANSFER_PAYLOAD_SIZE
from rollup.core.transaction import Transaction
from rollup.core.types import BlockStatus, StateRoot
from rollup.crypto.hash import sha3_256
from rollup.crypto.merkle import merkle_root
from rollup.errors import InvalidParameterError, OracleError

if TYPE_CHECKING:
    from rollup.core.block import Block
    from rollup.state.chain import RollupChain

logger = logging.getLogger(__name__)

_TRANSFER_FORMAT = ">QQQ"


@dataclass(frozen=True)
class Transfer:
    """
    Balance transfer between two addresses.

    SIZE: 24 bytes
    SERIALIZATION: sender (u64) || receiver (u64) || amount (u64)
    """
    sender: int
    receiver: int
    amount: int

    def __post_init__(self):
        for name in ("sender", "receiver", "amount"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidParameterError(name, "must be an integer")
            if value < 0 or value > MAX_U64:
                raise InvalidParameterError(name, "must fit in u64")

    def encode(self) -> bytes:
        return struct.pack(_TRANSFER_FORMAT, self.sender, self.receiver, self.amount)

    @classmethod
    def decode(cls, payload: bytes) -> "Transfer":
        if len(payload) != TRANSFER_PAYLOAD_SIZE:
            raise ValueError(
                f"Transfer payload must be {TRANSFER_PAYLOAD_SIZE} bytes, got {len(payload)}"
            )
        sender, receiver, amount = struct.unpack(_TRANSFER_FORMAT, payload)
        return cls(sender=sender, receiver=receiver, amount=amount)

    def to_transaction(self) -> Transaction:
        return Transaction(self.encode())


@dataclass
class Ledger:
    """Address -> balance map with a deterministic state root."""
    balances: Dict[int, int] = field(default_factory=dict)

    def balance_of(self, address: int) -> int:
        return self.balances.get(address, 0)

    def credit(self, address: int, amount: int) -> None:
        balance = self.balance_of(address) + amount
        if balance < 0 or balance > MAX_U64:
            raise InvalidParameterError("amount", f"balance of {address} must fit in u64")
        self.balances[address] = balance

    def apply_transfer(self, transfer: Transfer) -> bool:
        """
        Apply a transfer if the sender can cover it.

        An uncovered transfer, or one that would push the receiver past
        u64, is skipped and leaves the ledger unchanged.

        Returns:
            True if the transfer was applied
        """
        sender_balance = self.balance_of(transfer.sender)
        if sender_balance < transfer.amount:
            logger.debug(
                f"Skipping transfer {transfer.sender} -> {transfer.receiver}: "
                f"balance {sender_balance} < {transfer.amount}"
            )
            return False

        if (
            transfer.receiver != transfer.sender
            and self.balance_of(transfer.receiver) + transfer.amount > MAX_U64
        ):
            logger.debug(
                f"Skipping transfer {transfer.sender} -> {transfer.receiver}: "
                f"receiver balance would exceed u64"
            )
            return False

        self.balances[transfer.sender] = sender_balance - transfer.amount
        self.credit(transfer.receiver, transfer.amount)
        return True

    def apply_all(self, transfers: Iterable[Transfer]) -> int:
        """Apply transfers in order; returns how many were applied."""
        return sum(1 for t in transfers if self.apply_transfer(t))

    def state_root(self) -> StateRoot:
        """
        Merkle root over non-zero balances.

        Accounts are sorted by address for deterministic ordering.
        """
        leaves = [
            sha3_256(struct.pack(">QQ", address, balance))
            for address, balance in sorted(self.balances.items())
            if balance
        ]
        return merkle_root(leaves)

    def copy(self) -> "Ledger":
        return Ledger(balances=dict(self.balances))

    def __repr__(self) -> str:
        return f"Ledger(accounts={len(self.balances)}, root={self.state_root().hex()[:16]}...)"


def decode_transfers(block: "Block") -> List[Transfer]:
    """
    Decode every transaction of a block as a Transfer.

    Raises:
        OracleError: If a payload is not a valid transfer
    """
    transfers = []
    for position, tx in enumerate(block.transactions):
        try:
            transfers.append(Transfer.decode(tx.payload))
        except (ValueError, InvalidParameterError) as e:
            raise OracleError(block.index, f"tx[{position}] undecodable: {e}") from e
    return transfers


def build_block_claim(ledger: Ledger, transfers: Iterable[Transfer]) -> StateRoot:
    """Honest post-state root of applying transfers to a copy of ledger."""
    post = ledger.copy()
    post.apply_all(transfers)
    return post.state_root()


class ReplayOracle:
    """
    Ground truth by replaying transfers from a genesis ledger.

    The pre-state of a block is genesis plus every earlier block that was not
    marked fraudulent. Earlier blocks are always terminal by the time a block
    is adjudicated, since the chain settles in index order.
    """

    def __init__(self, genesis: Ledger, chain: Optional["RollupChain"] = None):
        self.genesis = genesis.copy()
        self.chain = chain

    def bind(self, chain: "RollupChain") -> None:
        self.chain = chain

    def pre_state(self, index: int) -> Ledger:
        if self.chain is None:
            raise OracleError(index, "oracle is not bound to a chain")

        state = self.genesis.copy()
        for earlier in self.chain.blocks()[:index]:
            if earlier.status is BlockStatus.FRAUDULENT:
                continue
            state.apply_all(decode_transfers(earlier))
        return state

    def correct_state_root(self, block: "Block") -> StateRoot:
        post = self.pre_state(block.index)
        applied = post.apply_all(decode_transfers(block))
        root = post.state_root()
        logger.debug(
            f"Replayed block #{block.index}: {applied}/{len(block.transactions)} "
            f"transfers applied, root={root.hex()[:16]}"
        )
        return root
