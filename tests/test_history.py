"""Tests for the history view."""

from wallettracker import EntryKind, Entry, format_entry, new_session, render_history


class TestRenderHistory:

    def test_empty_ledger(self):
        assert render_history(new_session()) == []

    def test_lines_in_acceptance_order_with_running_balance(self):
        ledger = new_session()
        ledger.apply(EntryKind.DEPOSIT, "history_wallet", 100)
        ledger.apply(EntryKind.WITHDRAWAL, "history_wallet", 30)
        ledger.apply(EntryKind.DEPOSIT, "history_wallet", 50)

        assert render_history(ledger) == [
            "Deposit of 100 to history_wallet | Running balance: 100",
            "Withdrawal of 30 to history_wallet | Running balance: 70",
            "Deposit of 50 to history_wallet | Running balance: 120",
        ]

    def test_rejected_entries_not_rendered(self):
        ledger = new_session()
        ledger.apply(EntryKind.DEPOSIT, "w", 10)
        ledger.apply(EntryKind.WITHDRAWAL, "w", 11)

        assert render_history(ledger) == ["Deposit of 10 to w | Running balance: 10"]

    def test_read_only_and_restartable(self):
        """Test rendering twice gives the same view and leaves the ledger alone."""
        ledger = new_session()
        ledger.apply(EntryKind.DEPOSIT, "w", 10)

        first = render_history(ledger)
        second = render_history(ledger)

        assert first == second
        assert ledger.balance == 10
        assert len(ledger) == 1

    def test_view_tracks_new_entries(self):
        ledger = new_session()
        ledger.apply(EntryKind.DEPOSIT, "w", 10)
        assert len(render_history(ledger)) == 1

        ledger.apply(EntryKind.DEPOSIT, "w", 5)
        assert len(render_history(ledger)) == 2


class TestFormatEntry:

    def test_format_entry(self):
        entry = Entry(kind=EntryKind.DEPOSIT, address="wallet_1", amount=100)
        assert format_entry(entry) == "Deposit of 100 to wallet_1"
