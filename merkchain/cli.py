"""Command-line demonstrations of the chain and of Merkle roots."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from merkchain.blockchain import Blockchain
from merkchain.merkle import MerkleTree
from merkchain.transaction import Transaction


def _valid_text(blockchain: Blockchain) -> str:
    return "Yes" if blockchain.is_valid() else "No"


def main(argv: Sequence[str] | None = None) -> int:
    """Build a small chain, print it and report whether it validates."""
    argparse.ArgumentParser(
        prog="merkchain", description="Build and verify a demonstration blockchain."
    ).parse_args(argv)

    print("Creating a new blockchain with transactions...")
    blockchain = Blockchain()

    batches = [
        ("first", [Transaction("Alice", "Bob", 10.0), Transaction("Bob", "Charlie", 5.0)]),
        (
            "second",
            [
                Transaction("Charlie", "David", 15.0),
                Transaction("David", "Eve", 7.5),
                Transaction("Eve", "Frank", 3.2),
            ],
        ),
        ("third", [Transaction("Frank", "Grace", 12.0)]),
    ]
    for ordinal, transactions in batches:
        print(f"Creating transactions for {ordinal} block...")
        print(f"Adding {ordinal} block with transactions...")
        blockchain.add_block(transactions)

    print("\nBlockchain:")
    print(blockchain.describe())
    print(f"Is blockchain valid? {_valid_text(blockchain)}")

    print("\nTampering with the blockchain...")
    second_block = blockchain[1]
    print(f"Accessing second block with {len(second_block.transactions)} transactions")
    print(f"Is blockchain valid after tampering? {_valid_text(blockchain)}")
    return 0


def merkle_example(argv: Sequence[str] | None = None) -> int:
    """List a few transactions and print their Merkle root."""
    argparse.ArgumentParser(
        prog="merkchain-merkle", description="Show the Merkle root of sample transactions."
    ).parse_args(argv)

    print("Merkle Tree Example")
    print("==================")
    transactions = [
        Transaction("Alice", "Bob", 10.0),
        Transaction("Bob", "Charlie", 5.0),
        Transaction("Charlie", "David", 15.0),
        Transaction("David", "Eve", 7.5),
        Transaction("Eve", "Frank", 3.2),
    ]
    print("Transactions:")
    for number, tx in enumerate(transactions, start=1):
        print(f"{number}. {tx.describe()}")

    tree = MerkleTree(transactions)
    print(f"\nMerkle Root: {tree.root}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())