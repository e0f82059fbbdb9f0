"""Tests for the income share calculator."""

from datetime import date
from decimal import Decimal

import pytest

from shared_ledger.engine import calculate_shares
from shared_ledger.models.transaction import ExpenseType, Owner


TOLERANCE = Decimal("1e-20")


class TestCalculateShares:
    """Tests for calculate_shares."""

    def test_equal_incomes_split_evenly(self, make_transaction):
        """Test 1000/1000 in March 2025 gives 0.5 each."""
        march = date(2025, 3, 5)
        shares = calculate_shares([
            make_transaction(Owner.LORENZO, "1000", ExpenseType.INCOME, march),
            make_transaction(Owner.MARIA, "1000", ExpenseType.INCOME, march),
        ])
        assert shares[Owner.LORENZO] == Decimal("0.5")
        assert shares[Owner.MARIA] == Decimal("0.5")

    def test_proportional_to_income(self, march_2025_transactions):
        """Test 6000/4000 gives 0.6/0.4."""
        shares = calculate_shares(march_2025_transactions)
        assert shares[Owner.LORENZO] == Decimal("0.6")
        assert shares[Owner.MARIA] == Decimal("0.4")

    def test_zero_income_falls_back_to_even(self, make_transaction):
        """Test the 0.5/0.5 fallback when nobody had income."""
        shares = calculate_shares([
            make_transaction(Owner.LORENZO, "300", ExpenseType.HOUSEHOLD),
        ])
        assert shares == {Owner.LORENZO: Decimal("0.5"), Owner.MARIA: Decimal("0.5")}

    def test_empty_month_falls_back_to_even(self):
        """Test the fallback on an empty list."""
        assert calculate_shares([]) == {
            Owner.LORENZO: Decimal("0.5"),
            Owner.MARIA: Decimal("0.5"),
        }

    def test_only_one_owner_has_income(self, make_transaction):
        """Test that the owner without income gets a zero share."""
        shares = calculate_shares([
            make_transaction(Owner.MARIA, "2500", ExpenseType.INCOME),
        ])
        assert shares[Owner.MARIA] == Decimal("1")
        assert shares[Owner.LORENZO] == Decimal("0")

    def test_non_income_types_are_ignored(self, make_transaction):
        """Test that credits and settlements do not count as income."""
        shares = calculate_shares([
            make_transaction(Owner.LORENZO, "100", ExpenseType.INCOME),
            make_transaction(Owner.MARIA, "100", ExpenseType.INCOME),
            make_transaction(Owner.MARIA, "900", ExpenseType.CREDIT),
            make_transaction(Owner.MARIA, "900", ExpenseType.SETTLEMENT),
        ])
        assert shares[Owner.MARIA] == Decimal("0.5")

    @pytest.mark.parametrize(
        "lorenzo,maria",
        [("1", "2"), ("3000", "7000"), ("1234.56", "987.65"), ("0", "0"), ("0.01", "0")],
    )
    def test_shares_sum_to_one(self, make_transaction, lorenzo, maria):
        """Test that shares always sum to 1 within tolerance."""
        shares = calculate_shares([
            make_transaction(Owner.LORENZO, lorenzo, ExpenseType.INCOME),
            make_transaction(Owner.MARIA, maria, ExpenseType.INCOME),
        ])
        assert abs(shares[Owner.LORENZO] + shares[Owner.MARIA] - 1) < TOLERANCE
