"""All-Months Driver - one combined total per month present, newest first."""

from typing import Iterable

from shared_ledger.engine.combined_totals import calculate_combined_monthly_totals
from shared_ledger.engine.grouping import group_by_month
from shared_ledger.models.totals import CombinedMonthlyTotals
from shared_ledger.models.transaction import Transaction


def calculate_all_monthly_totals(
    transactions: Iterable[Transaction],
    include_categories: bool = True,
) -> list[CombinedMonthlyTotals]:
    """
    Calculate combined totals for every month that has transactions.

    Months without transactions never appear. The result is sorted by
    month descending (most recent first).
    """
    grouped = group_by_month(transactions)
    totals = [
        calculate_combined_monthly_totals(month_tx, month_key, include_categories)
        for month_key, month_tx in grouped.items()
    ]
    return sorted(totals, key=lambda t: t.month_key, reverse=True)
