"""Tests for the admissibility rules."""

import pytest

from wallettracker.errors import ErrorKind, WalletError
from wallettracker.models import EntryKind, MAX_AMOUNT
from wallettracker.validator import validate, is_valid_amount


class TestAmountRules:
    """Amount must be a positive 64-bit integer, whatever the kind."""

    @pytest.mark.parametrize("kind", list(EntryKind))
    @pytest.mark.parametrize("amount", [0, -1, -5])
    def test_non_positive_amount(self, kind, amount):
        result = validate(kind, amount, 1000)
        assert result.success is False
        assert result.error is ErrorKind.INVALID_AMOUNT
        assert result.error_message == f"Invalid transaction amount: {amount}"

    def test_amount_above_max(self):
        result = validate(EntryKind.DEPOSIT, MAX_AMOUNT + 1, 0)
        assert result.error is ErrorKind.INVALID_AMOUNT

    def test_non_integer_amounts(self):
        assert validate(EntryKind.DEPOSIT, 1.5, 0).error is ErrorKind.INVALID_AMOUNT
        assert validate(EntryKind.DEPOSIT, "10", 0).error is ErrorKind.INVALID_AMOUNT
        assert validate(EntryKind.DEPOSIT, True, 0).error is ErrorKind.INVALID_AMOUNT

    def test_is_valid_amount(self):
        assert is_valid_amount(1) is True
        assert is_valid_amount(MAX_AMOUNT) is True
        assert is_valid_amount(0) is False
        assert is_valid_amount(False) is False


class TestWithdrawalRules:
    """Withdrawals must be covered by the current balance."""

    def test_within_balance(self):
        assert validate(EntryKind.WITHDRAWAL, 40, 100).success is True

    def test_exact_balance_allowed(self):
        """Test emptying the wallet is permitted."""
        assert validate(EntryKind.WITHDRAWAL, 100, 100).success is True

    def test_exceeds_balance(self):
        result = validate(EntryKind.WITHDRAWAL, 150, 100)
        assert result.success is False
        assert result.error is ErrorKind.INSUFFICIENT_FUNDS
        assert result.requested == 150
        assert result.available == 100
        assert result.error_message == (
            "Insufficient funds for withdrawal of 150. Available balance: 100"
        )

    def test_from_empty_wallet(self):
        assert validate(EntryKind.WITHDRAWAL, 1, 0).error is ErrorKind.INSUFFICIENT_FUNDS

    def test_invalid_amount_checked_first(self):
        """Test a zero withdrawal is INVALID_AMOUNT even on an empty wallet."""
        assert validate(EntryKind.WITHDRAWAL, 0, 0).error is ErrorKind.INVALID_AMOUNT


class TestDepositRules:
    """Deposits have no upper bound other than 64-bit overflow."""

    def test_large_deposit(self):
        assert validate(EntryKind.DEPOSIT, 10**15, 0).success is True

    def test_deposit_reaching_max(self):
        assert validate(EntryKind.DEPOSIT, 1, MAX_AMOUNT - 1).success is True

    def test_deposit_overflow(self):
        result = validate(EntryKind.DEPOSIT, 1, MAX_AMOUNT)
        assert result.success is False
        assert result.error is ErrorKind.INVALID_AMOUNT


class TestValidationResult:

    def test_bool(self):
        assert bool(validate(EntryKind.DEPOSIT, 1, 0)) is True
        assert bool(validate(EntryKind.DEPOSIT, 0, 0)) is False

    def test_to_error(self):
        err = validate(EntryKind.WITHDRAWAL, 10, 5).to_error()
        assert isinstance(err, WalletError)
        assert err.kind is ErrorKind.INSUFFICIENT_FUNDS
        assert err.available == 5

    def test_to_error_on_success_raises(self):
        with pytest.raises(ValueError):
            validate(EntryKind.DEPOSIT, 1, 0).to_error()

    def test_accepts_raw_kind_value(self):
        assert validate("withdrawal", 10, 5).error is ErrorKind.INSUFFICIENT_FUNDS

    def test_pure(self):
        """Test repeated calls give the same answer."""
        first = validate(EntryKind.WITHDRAWAL, 10, 5)
        second = validate(EntryKind.WITHDRAWAL, 10, 5)
        assert (first.success, first.error) == (second.success, second.error)
