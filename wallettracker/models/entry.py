"""Entry models - the immutable record of a single wallet movement.

This module provides the EntryKind enum and the Entry class. An Entry is what
the balance engine appends to a ledger once a proposed movement has passed
validation.
"""

from enum import Enum
from uuid import uuid4
from datetime import datetime, UTC
from pydantic import BaseModel, ConfigDict, Field


# Largest value representable as a signed 64-bit integer. Balances and amounts
# never leave this range.
MAX_AMOUNT = 2**63 - 1


class EntryKind(str, Enum):
    """Kinds of wallet movement.

    There are exactly two kinds. The direction of a movement lives here and
    not in the sign of the amount: amounts are always positive.

    Attributes:
        DEPOSIT (str): Funds added to the wallet. Increases the balance.
        WITHDRAWAL (str): Funds removed from the wallet. Decreases the balance,
            and is only admitted when the balance covers it.
    """
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"

    @property
    def label(self) -> str:
        """Display string for this kind ("Deposit" / "Withdrawal")."""
        return _LABELS[self]

    @property
    def sign(self) -> int:
        """+1 for deposits, -1 for withdrawals."""
        return _SIGNS[self]

    def __str__(self) -> str:
        return self.label


_LABELS = {
    EntryKind.DEPOSIT: "Deposit",
    EntryKind.WITHDRAWAL: "Withdrawal",
}

_SIGNS = {
    EntryKind.DEPOSIT: 1,
    EntryKind.WITHDRAWAL: -1,
}


class Entry(BaseModel):
    """One accepted movement of funds.

    Entries are immutable once created. The ledger only ever appends them,
    it never edits or removes one.

    Usage Example:
        ```python
        entry = Entry(kind=EntryKind.DEPOSIT, address="wallet_1", amount=100)
        print(entry)                # Deposit of 100 to wallet_1
        print(entry.signed_amount)  # 100
        ```

    Attributes:
        entry_id (str): Unique identifier for this entry. Auto-generated UUID.
        kind (EntryKind): Deposit or withdrawal.
        address (str): Wallet identifier the entry concerns. Free-form, kept
            as metadata.
        amount (int): Positive magnitude of the movement, at most MAX_AMOUNT.
        created_at (datetime): UTC timestamp when the entry was accepted.
    """

    model_config = ConfigDict(frozen=True)

    entry_id: str = Field(
        default_factory=lambda: str(uuid4()),
        description="Unique entry ID"
    )
    kind: EntryKind = Field(
        description="Deposit or withdrawal"
    )
    address: str = Field(
        description="Wallet address the entry concerns"
    )
    amount: int = Field(
        gt=0,
        le=MAX_AMOUNT,
        strict=True,
        description="Positive amount of the movement"
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="Entry timestamp"
    )

    @property
    def signed_amount(self) -> int:
        """Amount with the direction applied (+ for deposits, - for withdrawals).

        Example:
            ```python
            Entry(kind=EntryKind.WITHDRAWAL, address="w", amount=30).signed_amount  # -30
            ```
        """
        return self.kind.sign * self.amount

    def __str__(self) -> str:
        return f"{self.kind.label} of {self.amount} to {self.address}"
