"""Shared fixtures for Shared Ledger tests."""

from datetime import date
from decimal import Decimal

import pytest

from shared_ledger.models.transaction import ExpenseType, Owner, Transaction


@pytest.fixture
def make_transaction():
    """Factory for transactions with sensible defaults."""

    def _make(
        owner=Owner.LORENZO,
        amount="100",
        expense_type=ExpenseType.PERSONAL,
        when=date(2025, 3, 15),
        description="test",
        category=None,
    ) -> Transaction:
        return Transaction(
            owner=owner,
            description=description,
            amount=Decimal(amount),
            expense_type=expense_type,
            date=when,
            category=category,
        )

    return _make


@pytest.fixture
def march_2025_transactions(make_transaction):
    """
    A realistic month.

    Lorenzo earns 6000, Maria 4000 (60/40 income split).
    """
    march = date(2025, 3, 10)
    return [
        make_transaction(Owner.LORENZO, "6000", ExpenseType.INCOME, march, "Salary"),
        make_transaction(Owner.MARIA, "4000", ExpenseType.INCOME, march, "Salary"),
        make_transaction(Owner.LORENZO, "1000", ExpenseType.HOUSEHOLD, march, "Rent"),
        make_transaction(Owner.MARIA, "200", ExpenseType.SPLIT_5050, march, "Dinner"),
        make_transaction(Owner.MARIA, "50", ExpenseType.PAID_FOR_PARTNER, march, "Haircut"),
        make_transaction(Owner.LORENZO, "80", ExpenseType.PERSONAL, march, "Book"),
        make_transaction(Owner.MARIA, "30", ExpenseType.CREDIT, march, "Refund"),
        make_transaction(Owner.LORENZO, "100", ExpenseType.SETTLEMENT, march, "Pix"),
    ]
