"""Core data models for the wallet tracker."""

from wallettracker.models.entry import Entry, EntryKind, MAX_AMOUNT

__all__ = [
    "Entry",
    "EntryKind",
    "MAX_AMOUNT",
]
