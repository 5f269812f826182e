"""Merkle roots over SHA-256 hex digests."""

from __future__ import annotations

import hashlib
from collections.abc import Iterable, Sequence

from merkchain.transaction import Transaction


def sha256_hex(text: str) -> str:
    """Return the lowercase hex SHA-256 digest of ``text`` encoded as UTF-8."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def merkle_root(leaf_hashes: Sequence[str]) -> str:
    """Fold leaf hashes pairwise into a single root.

    An empty sequence yields an empty string and a single leaf is its own
    root. On levels of odd length the last hash is paired with itself.
    """
    level = list(leaf_hashes)
    if not level:
        return ""
    while len(level) > 1:
        if len(level) % 2:
            level.append(level[-1])
        level = [sha256_hex(left + right) for left, right in zip(level[::2], level[1::2])]
    return level[0]


class MerkleTree:
    """The Merkle tree over a list of transactions."""

    def __init__(self, transactions: Iterable[Transaction]) -> None:
        self.leaf_hashes: tuple[str, ...] = tuple(
            sha256_hex(tx.payload()) for tx in transactions
        )
        self.root: str = merkle_root(self.leaf_hashes)

    def describe(self) -> str:
        """Return a short textual summary of the tree."""
        return f"Merkle Root: {self.root}"

    def __repr__(self) -> str:
        return f"MerkleTree(leaves={len(self.leaf_hashes)}, root={self.root!r})"