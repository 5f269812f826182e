"""Blocks that seal a list of transactions under a Merkle root."""

from __future__ import annotations

import time
from collections.abc import Iterable

from merkchain.merkle import MerkleTree, sha256_hex
from merkchain.transaction import Transaction


class Block:
    """A block of transactions linked to its predecessor by hash."""

    def __init__(
        self,
        transactions: Iterable[Transaction],
        previous_hash: str,
        timestamp: int | None = None,
    ) -> None:
        self.transactions: tuple[Transaction, ...] = tuple(transactions)
        self.previous_hash = previous_hash
        self.timestamp = int(time.time()) if timestamp is None else timestamp
        self.merkle_root = MerkleTree(self.transactions).root
        self.hash = self.calculate_hash()

    def calculate_hash(self) -> str:
        """Hash the Merkle root, previous hash and timestamp as they stand now."""
        return sha256_hex(f"{self.merkle_root}{self.previous_hash}{self.timestamp}")

    def describe(self) -> str:
        """Return a multi-line human-readable description."""
        lines = [
            f"Merkle Root: {self.merkle_root}",
            f"Previous Hash: {self.previous_hash}",
            f"Timestamp: {self.timestamp}",
            f"Hash: {self.hash}",
            "Transactions:",
        ]
        lines.extend(tx.describe() for tx in self.transactions)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"Block(transactions={len(self.transactions)}, "
            f"previous_hash={self.previous_hash!r}, hash={self.hash!r})"
        )