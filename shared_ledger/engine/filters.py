"""Filtering and summing helpers shared by the aggregators."""

from decimal import Decimal
from typing import Iterable, Optional

from shared_ledger.models.transaction import ExpenseType, Owner, Transaction


ZERO = Decimal("0")


def filter_transactions(
    transactions: Iterable[Transaction],
    owner: Optional[Owner] = None,
    expense_type: Optional[ExpenseType] = None,
) -> list[Transaction]:
    """
    Filter transactions by owner and/or expense type.

    A filter left as None matches everything.
    """
    return [
        tx for tx in transactions
        if (owner is None or tx.owner is owner)
        and (expense_type is None or tx.expense_type is expense_type)
    ]


def sum_transactions(transactions: Iterable[Transaction]) -> Decimal:
    return sum((tx.amount for tx in transactions), ZERO)


def sum_by_type(
    transactions: Iterable[Transaction],
    owner: Optional[Owner] = None,
) -> dict[ExpenseType, Decimal]:
    """
    Sum amounts per expense type in a single pass.

    Every ExpenseType is present in the result, zero when unused.
    """
    totals = {expense_type: ZERO for expense_type in ExpenseType}
    for tx in transactions:
        if owner is not None and tx.owner is not owner:
            continue
        totals[tx.expense_type] += tx.amount
    return totals
