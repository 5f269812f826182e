"""An append-only chain of hash-linked blocks."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from merkchain.block import Block
from merkchain.transaction import Transaction

_SEPARATOR = "------------------------"


class Blockchain:
    """A chain of blocks starting from a genesis block with no transactions."""

    def __init__(self) -> None:
        self._chain: list[Block] = [Block([], "0")]

    @property
    def chain(self) -> tuple[Block, ...]:
        """The blocks in order, genesis first."""
        return tuple(self._chain)

    def __len__(self) -> int:
        return len(self._chain)

    def __iter__(self) -> Iterator[Block]:
        return iter(self._chain)

    def __getitem__(self, index: int) -> Block:
        return self._chain[index]

    def add_block(self, transactions: Iterable[Transaction]) -> Block:
        """Append a block of ``transactions`` linked to the last block and return it."""
        block = Block(transactions, self._chain[-1].hash)
        self._chain.append(block)
        return block

    def is_valid(self) -> bool:
        """Check every link and every stored hash after the genesis block."""
        for previous, current in zip(self._chain, self._chain[1:]):
            if current.previous_hash != previous.hash:
                return False
            if current.hash != current.calculate_hash():
                return False
        return True

    def describe(self) -> str:
        """Return a multi-line description of every block."""
        sections = [
            f"Block #{index}\n{block.describe()}\n{_SEPARATOR}"
            for index, block in enumerate(self._chain)
        ]
        return "\n".join(sections)