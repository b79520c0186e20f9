"""History View - read-only rendering of a ledger's entries."""

from typing import List

from wallettracker.balance_engine import Ledger
from wallettracker.models import Entry


def format_entry(entry: Entry) -> str:
    """Render one entry, e.g. "Withdrawal of 30 to wallet_1"."""
    return str(entry)


def render_history(ledger: Ledger) -> List[str]:
    """Render every accepted entry, oldest first, with the running balance.

    The view is rebuilt from the ledger on every call and never modifies it.

    Args:
        ledger (Ledger): The ledger to render

    Returns:
        List[str]: One line per entry, e.g.
            "Deposit of 100 to wallet_1 | Running balance: 100".
            Empty for an empty ledger.
    """
    lines = []
    running = 0
    for entry in ledger.entries:
        running += entry.signed_amount
        lines.append(f"{format_entry(entry)} | Running balance: {running}")
    return lines
