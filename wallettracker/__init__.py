"""Wallet Tracker - validated deposit/withdrawal ledger for a single wallet."""

__version__ = "0.1.0"

# Core models
from wallettracker.models import Entry, EntryKind, MAX_AMOUNT
from wallettracker.errors import ErrorKind, WalletError

# Components
from wallettracker.validator import validate, ValidationResult
from wallettracker.balance_engine import (
    Ledger,
    ApplyResult,
    ReplayResult,
    new_session,
    apply,
    balance_of,
    replay_balance,
)
from wallettracker.history import format_entry, render_history

__all__ = [
    # Models
    "Entry",
    "EntryKind",
    "MAX_AMOUNT",
    # Errors
    "ErrorKind",
    "WalletError",
    # Components
    "validate",
    "ValidationResult",
    "Ledger",
    "ApplyResult",
    "ReplayResult",
    "new_session",
    "apply",
    "balance_of",
    "replay_balance",
    "format_entry",
    "render_history",
]
