"""Validator - admissibility rules for a proposed wallet movement.

validate() is a pure function of (kind, amount, current_balance). It never
touches a ledger; the balance engine calls it and acts on the result.

Rules:
- The amount must be an integer in 1..MAX_AMOUNT.
- A withdrawal must not exceed the current balance. Withdrawing the exact
  balance is allowed and leaves the wallet at zero.
- A deposit must not push the balance past MAX_AMOUNT.
"""

from typing import Optional

from wallettracker.errors import (
    ErrorKind,
    WalletError,
    invalid_amount_message,
    insufficient_funds_message,
)
from wallettracker.models import EntryKind, MAX_AMOUNT


class ValidationResult:
    """Outcome of validating a proposed movement.

    Attributes:
        success (bool): True if the movement is admissible
        error (Optional[ErrorKind]): Rejection reason when success is False
        error_message (Optional[str]): Human-readable rejection reason
        requested (Optional[int]): The amount that was checked
        available (Optional[int]): The balance it was checked against
    """

    def __init__(self, success: bool, error: Optional[ErrorKind] = None,
                 error_message: Optional[str] = None,
                 requested: Optional[int] = None, available: Optional[int] = None):
        self.success = success
        self.error = error
        self.error_message = error_message
        self.requested = requested
        self.available = available

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(success=True)

    def to_error(self) -> WalletError:
        """Build the WalletError matching this (failed) result."""
        if self.success:
            raise ValueError("Validation succeeded, there is no error to build")
        return WalletError(
            self.error,
            self.error_message,
            requested=self.requested,
            available=self.available,
        )

    def __bool__(self) -> bool:
        return self.success

    def __repr__(self) -> str:
        if self.success:
            return "ValidationResult(success=True)"
        return f"ValidationResult(success=False, error={self.error.value})"


def is_valid_amount(amount: object) -> bool:
    """Check that amount is an int (not a bool) in 1..MAX_AMOUNT."""
    if isinstance(amount, bool) or not isinstance(amount, int):
        return False
    return 0 < amount <= MAX_AMOUNT


def validate(kind: EntryKind, amount: int, current_balance: int) -> ValidationResult:
    """Decide whether a movement may be applied to a wallet.

    Args:
        kind (EntryKind): Deposit or withdrawal
        amount (int): Proposed amount, expected positive
        current_balance (int): Balance before the movement

    Returns:
        ValidationResult: success, or the ErrorKind explaining the rejection

    Example:
        ```python
        validate(EntryKind.WITHDRAWAL, 150, 100).error  # ErrorKind.INSUFFICIENT_FUNDS
        validate(EntryKind.DEPOSIT, 0, 100).error       # ErrorKind.INVALID_AMOUNT
        validate(EntryKind.WITHDRAWAL, 100, 100).success  # True
        ```
    """
    kind = EntryKind(kind)

    if not is_valid_amount(amount):
        return ValidationResult(
            success=False,
            error=ErrorKind.INVALID_AMOUNT,
            error_message=invalid_amount_message(amount),
            requested=amount if isinstance(amount, int) else None,
            available=current_balance,
        )

    if kind is EntryKind.WITHDRAWAL:
        if amount > current_balance:
            return ValidationResult(
                success=False,
                error=ErrorKind.INSUFFICIENT_FUNDS,
                error_message=insufficient_funds_message(amount, current_balance),
                requested=amount,
                available=current_balance,
            )
        return ValidationResult.ok()

    # Deposit: checked addition against the 64-bit ceiling
    if current_balance > MAX_AMOUNT - amount:
        return ValidationResult(
            success=False,
            error=ErrorKind.INVALID_AMOUNT,
            error_message=invalid_amount_message(amount),
            requested=amount,
            available=current_balance,
        )
    return ValidationResult.ok()
