"""Value transfers between two parties."""

from __future__ import annotations

import time
from dataclasses import dataclass, field


def format_amount(amount: float) -> str:
    """Render an amount the way it appears in payloads: six significant digits."""
    return f"{amount:g}"


def _now() -> str:
    return str(int(time.time()))


@dataclass(frozen=True)
class Transaction:
    """A transfer of ``amount`` from ``sender`` to ``receiver``.

    The timestamp is the creation time in whole seconds since the epoch,
    kept as text because it is hashed as text.
    """

    sender: str
    receiver: str
    amount: float
    timestamp: str = field(default_factory=_now)

    def payload(self) -> str:
        """Return the text that is hashed to identify this transaction."""
        return f"{self.sender}{self.receiver}{format_amount(self.amount)}{self.timestamp}"

    def describe(self) -> str:
        """Return a one-line human-readable summary."""
        return (
            f"From: {self.sender} To: {self.receiver} "
            f"Amount: {format_amount(self.amount)} Timestamp: {self.timestamp}"
        )

    def __str__(self) -> str:
        return self.describe()