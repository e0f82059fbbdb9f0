"""
Income Share Calculator

Each owner's fraction of the month's combined income. Household costs
are split by these fractions.
"""

from decimal import Decimal
from typing import Iterable

from shared_ledger.engine.filters import filter_transactions, sum_transactions
from shared_ledger.models.transaction import ExpenseType, Owner, Transaction


EVEN_SHARE = Decimal("0.5")


def calculate_shares(
    month_transactions: Iterable[Transaction],
) -> dict[Owner, Decimal]:
    """
    Calculate each owner's share of combined income.

    Falls back to 0.5/0.5 when the month has no combined income, so
    household costs are split evenly instead of dividing by zero.
    """
    incomes = filter_transactions(month_transactions, expense_type=ExpenseType.INCOME)
    by_owner = {
        owner: sum_transactions(filter_transactions(incomes, owner=owner))
        for owner in Owner
    }
    combined = sum(by_owner.values(), Decimal("0"))

    if combined == 0:
        return {owner: EVEN_SHARE for owner in Owner}

    return {owner: income / combined for owner, income in by_owner.items()}
