"""
Settlement Engine Package

Pure, deterministic computation from a list of transactions to monthly
totals. Nothing here performs I/O, logs, or keeps state between calls.

Data flows one way:
    transactions -> grouped by month -> per-owner totals
                 -> combined totals -> sorted report
"""

from shared_ledger.engine.combined_totals import calculate_combined_monthly_totals
from shared_ledger.engine.filters import (
    filter_transactions,
    sum_by_type,
    sum_transactions,
)
from shared_ledger.engine.grouping import group_by_month
from shared_ledger.engine.person_totals import (
    calculate_person_monthly_totals,
    sum_by_category,
    sum_uncategorized_spend,
)
from shared_ledger.engine.report import calculate_all_monthly_totals
from shared_ledger.engine.shares import calculate_shares

__all__ = [
    "calculate_all_monthly_totals",
    "calculate_combined_monthly_totals",
    "calculate_person_monthly_totals",
    "calculate_shares",
    "filter_transactions",
    "group_by_month",
    "sum_by_category",
    "sum_by_type",
    "sum_transactions",
    "sum_uncategorized_spend",
]
