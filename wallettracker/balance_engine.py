"""Balance Engine - applies validated movements to a wallet ledger.

The balance engine is responsible for:
- Holding the ordered, append-only sequence of accepted entries
- Keeping the running balance in step with that sequence
- Consulting the validator before every append
- Reporting rejections as typed results rather than exceptions

Key Principle: the balance is a pure fold over the accepted entries. It is
never set directly, and a rejected movement leaves the ledger exactly as it
was.
"""

import threading
from typing import Iterable, Iterator, List, Optional, Tuple

from wallettracker.errors import ErrorKind, WalletError
from wallettracker.logging_config import get_logger
from wallettracker.models import Entry, EntryKind
from wallettracker.validator import validate

logger = get_logger(__name__)


class ApplyResult:
    """Result of applying a movement to a ledger.

    Attributes:
        success (bool): True if the entry was accepted
        balance (int): Ledger balance after the call. Unchanged on failure.
        entry (Optional[Entry]): The appended entry, when accepted
        error (Optional[ErrorKind]): Rejection reason, when rejected
        error_message (Optional[str]): Human-readable rejection reason
    """

    def __init__(self, success: bool, balance: int, entry: Optional[Entry] = None,
                 error: Optional[ErrorKind] = None, error_message: Optional[str] = None,
                 wallet_error: Optional[WalletError] = None):
        self.success = success
        self.balance = balance
        self.entry = entry
        self.error = error
        self.error_message = error_message
        self._wallet_error = wallet_error

    def unwrap(self) -> int:
        """Return the new balance, or raise the WalletError for a rejection.

        Raises:
            WalletError: If the movement was rejected
        """
        if self.success:
            return self.balance
        if self._wallet_error is not None:
            raise self._wallet_error
        raise WalletError(self.error, self.error_message)

    def __bool__(self) -> bool:
        return self.success

    def __repr__(self) -> str:
        if self.success:
            return f"ApplyResult(success=True, balance={self.balance})"
        return f"ApplyResult(success=False, error={self.error.value})"


class ReplayResult:
    """Result of folding an entry sequence into a balance.

    Attributes:
        success (bool): True if every entry was admissible in order
        balance (int): Final balance, or the balance reached before the
            first inadmissible entry
        applied (int): Number of entries folded in before stopping
        error (Optional[ErrorKind]): Why the fold stopped
        error_message (Optional[str]): Human-readable reason
    """

    def __init__(self, success: bool, balance: int, applied: int,
                 error: Optional[ErrorKind] = None, error_message: Optional[str] = None):
        self.success = success
        self.balance = balance
        self.applied = applied
        self.error = error
        self.error_message = error_message

    def __repr__(self) -> str:
        if self.success:
            return f"ReplayResult(success=True, balance={self.balance})"
        return f"ReplayResult(success=False, applied={self.applied}, error={self.error.value})"


class Ledger:
    """Append-only record of accepted entries plus the derived balance.

    A Ledger is owned by one session. Create one with new_session() (or
    Ledger()), pass it explicitly to every call, and drop it when the run
    ends; there is no process-wide ledger.

    The only mutation path is apply(). Reads go through `balance`,
    `entries`, len() and iteration, none of which expose the internal list.

    Concurrency:
        apply() holds an internal lock around validate-then-append, so a
        ledger shared between threads (e.g. by the HTTP API) still never goes
        negative.

    Usage Example:
        ```python
        ledger = Ledger()
        ledger.apply(EntryKind.DEPOSIT, "addrA", 100)       # success, balance 100
        result = ledger.apply(EntryKind.WITHDRAWAL, "addrA", 150)
        result.error                                          # INSUFFICIENT_FUNDS
        ledger.balance                                        # 100
        ```
    """

    def __init__(self):
        self._entries: List[Entry] = []
        self._balance = 0
        self._lock = threading.Lock()

    @property
    def balance(self) -> int:
        """Current balance. Always >= 0."""
        return self._balance

    @property
    def entries(self) -> Tuple[Entry, ...]:
        """Accepted entries in acceptance order (a snapshot)."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(tuple(self._entries))

    def apply(self, kind: EntryKind, address: str, amount: int) -> ApplyResult:
        """Validate a movement and append it if admissible.

        Args:
            kind (EntryKind): Deposit or withdrawal
            address (str): Wallet address, stored on the entry as metadata
            amount (int): Positive amount

        Returns:
            ApplyResult: New balance on success; ErrorKind and the unchanged
                balance on rejection
        """
        kind = EntryKind(kind)
        with self._lock:
            current = self._balance
            verdict = validate(kind, amount, current)

            if not verdict.success:
                logger.warning(
                    "Rejected %s of %s for %s: %s",
                    kind.label.lower(), amount, address, verdict.error_message,
                )
                return ApplyResult(
                    success=False,
                    balance=current,
                    error=verdict.error,
                    error_message=verdict.error_message,
                    wallet_error=verdict.to_error(),
                )

            entry = Entry(kind=kind, address=address, amount=amount)
            new_balance = current + entry.signed_amount
            self._entries.append(entry)
            self._balance = new_balance

        logger.info("%s of %s to %s, balance %s", kind.label, amount, address, new_balance)
        return ApplyResult(success=True, balance=new_balance, entry=entry)

    def verify(self) -> bool:
        """Check that the stored balance equals a fresh fold of the entries."""
        replay = replay_balance(self.entries)
        return replay.success and replay.balance == self._balance

    def __repr__(self) -> str:
        return f"<Ledger(entries={len(self._entries)}, balance={self._balance})>"


def new_session() -> Ledger:
    """Start an empty ledger (balance 0, no history)."""
    return Ledger()


def apply(ledger: Ledger, kind: EntryKind, address: str, amount: int) -> ApplyResult:
    """Apply a movement to `ledger`. See Ledger.apply()."""
    return ledger.apply(kind, address, amount)


def balance_of(ledger: Ledger) -> int:
    """Current balance of `ledger`, without side effects."""
    return ledger.balance


def replay_balance(entries: Iterable[Entry]) -> ReplayResult:
    """Fold an ordered entry sequence into a balance, starting from zero.

    Each entry is checked with the same rules apply() uses, against the
    balance reached so far. The fold stops at the first entry that would
    have been rejected.

    Args:
        entries (Iterable[Entry]): Entries in chronological order

    Returns:
        ReplayResult: The final balance, or where and why the fold stopped

    Example:
        ```python
        entries = [
            Entry(kind=EntryKind.DEPOSIT, address="w", amount=100),
            Entry(kind=EntryKind.WITHDRAWAL, address="w", amount=30),
        ]
        replay_balance(entries).balance  # 70
        ```
    """
    balance = 0
    applied = 0
    for entry in entries:
        verdict = validate(entry.kind, entry.amount, balance)
        if not verdict.success:
            return ReplayResult(
                success=False,
                balance=balance,
                applied=applied,
                error=verdict.error,
                error_message=verdict.error_message,
            )
        balance += entry.signed_amount
        applied += 1
    return ReplayResult(success=True, balance=balance, applied=applied)
