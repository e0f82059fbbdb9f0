"""
Month Grouping

Partitions a transaction collection into calendar-month buckets.
Relative order inside each bucket follows the source sequence.
"""

from typing import Iterable

from shared_ledger.models.transaction import MonthKey, Transaction


def group_by_month(
    transactions: Iterable[Transaction],
) -> dict[MonthKey, list[Transaction]]:
    """
    Group transactions by the month of their date.

    No transaction is dropped or duplicated. Only months that have at
    least one transaction appear as keys.
    """
    groups: dict[MonthKey, list[Transaction]] = {}
    for tx in transactions:
        groups.setdefault(MonthKey.from_date(tx.date), []).append(tx)
    return groups
