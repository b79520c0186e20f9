"""Error taxonomy for wallet operations.

Rejected operations are an expected outcome, so the validator and the balance
engine report them as values (an ErrorKind inside a result object). WalletError
exists for callers that would rather raise, see ApplyResult.unwrap().
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Reasons an operation can be rejected.

    Attributes:
        INVALID_AMOUNT (str): The amount is not a positive, processable
            quantity: zero, negative, not an integer, or large enough that the
            resulting balance would leave the signed 64-bit range.
        INSUFFICIENT_FUNDS (str): A withdrawal asks for more than the current
            balance.
    """
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"


def invalid_amount_message(amount: object) -> str:
    return f"Invalid transaction amount: {amount}"


def insufficient_funds_message(requested: int, available: int) -> str:
    return (
        f"Insufficient funds for withdrawal of {requested}. "
        f"Available balance: {available}"
    )


class WalletError(Exception):
    """Exception form of a rejected wallet operation.

    Attributes:
        kind (ErrorKind): Why the operation was rejected
        message (str): Human-readable description
        requested (Optional[int]): Amount asked for, when known
        available (Optional[int]): Balance at the time, for INSUFFICIENT_FUNDS
    """

    def __init__(self, kind: ErrorKind, message: str,
                 requested: Optional[int] = None, available: Optional[int] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.requested = requested
        self.available = available

    def __repr__(self) -> str:
        return f"WalletError(kind={self.kind.value}, message={self.message!r})"
