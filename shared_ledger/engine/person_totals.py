"""
Per-Owner Monthly Aggregator

Computes one owner's full breakdown for a month: what they earned, what
they spent per expense type, their fair share of shared costs, and the
resulting debt to their partner.

Debt formula:
    should_pay     = split_5050_portion + household_portion + partner_paid_for_me
    actually_paid  = split_5050_paid + household_paid + paid_for_partner
    debt           = should_pay - actually_paid - settlement

Settlement payments reduce debt directly; they are not part of
actually_paid because they repay debt rather than fund an expense.
There is no floor or cap, and the two owners' debts are computed
independently.
"""

from decimal import Decimal
from typing import Optional, Sequence

from shared_ledger.engine.filters import ZERO, sum_by_type
from shared_ledger.engine.shares import EVEN_SHARE, calculate_shares
from shared_ledger.models.totals import PersonMonthlyTotals
from shared_ledger.models.transaction import (
    SHAREABLE_TYPES,
    Category,
    ExpenseType,
    MonthKey,
    Owner,
    Transaction,
)


def sum_by_category(
    transactions: Sequence[Transaction],
    owner: Optional[Owner] = None,
) -> dict[Category, Decimal]:
    """
    Sum categorized transactions per category.

    Every expense type counts, income and settlement included;
    uncategorized transactions are left out.
    """
    totals: dict[Category, Decimal] = {}
    for tx in transactions:
        if tx.category is None:
            continue
        if owner is not None and tx.owner is not owner:
            continue
        totals[tx.category] = totals.get(tx.category, ZERO) + tx.amount
    return totals


def sum_uncategorized_spend(transactions: Sequence[Transaction]) -> Decimal:
    """Shareable spend that carries no category."""
    return sum(
        (
            tx.amount for tx in transactions
            if tx.category is None and tx.expense_type in SHAREABLE_TYPES
        ),
        ZERO,
    )


def calculate_person_monthly_totals(
    month_transactions: Sequence[Transaction],
    owner: Owner,
    month_key: MonthKey,
    include_categories: bool = True,
) -> PersonMonthlyTotals:
    """
    Calculate monthly totals for a single owner.

    Args:
        month_transactions: All transactions of the month, both owners
        owner: Owner to compute the breakdown for
        month_key: Month the transactions belong to
        include_categories: Whether to fill `category_totals`

    Returns:
        The owner's PersonMonthlyTotals
    """
    partner = owner.partner
    share_percent = calculate_shares(month_transactions)[owner]

    mine = sum_by_type(month_transactions, owner=owner)
    theirs = sum_by_type(month_transactions, owner=partner)
    month = sum_by_type(month_transactions)

    # What this owner should pay
    split_5050_portion = month[ExpenseType.SPLIT_5050] * EVEN_SHARE
    household_portion = month[ExpenseType.HOUSEHOLD] * share_percent
    partner_paid_for_me = theirs[ExpenseType.PAID_FOR_PARTNER]
    should_pay = split_5050_portion + household_portion + partner_paid_for_me

    # What this owner actually paid toward shared costs
    actually_paid = (
        mine[ExpenseType.SPLIT_5050]
        + mine[ExpenseType.HOUSEHOLD]
        + mine[ExpenseType.PAID_FOR_PARTNER]
    )

    debt = should_pay - actually_paid - mine[ExpenseType.SETTLEMENT]
    total = sum((mine[t] for t in SHAREABLE_TYPES), ZERO)

    return PersonMonthlyTotals(
        owner=owner,
        month_key=month_key,
        income=mine[ExpenseType.INCOME],
        share_percent=share_percent,
        credit=mine[ExpenseType.CREDIT],
        split_5050_paid=mine[ExpenseType.SPLIT_5050],
        split_5050_portion=split_5050_portion,
        paid_for_partner=mine[ExpenseType.PAID_FOR_PARTNER],
        household_paid=mine[ExpenseType.HOUSEHOLD],
        household_portion=household_portion,
        personal=mine[ExpenseType.PERSONAL],
        settlement=mine[ExpenseType.SETTLEMENT],
        total=total,
        debt=debt,
        category_totals=(
            sum_by_category(month_transactions, owner=owner)
            if include_categories else None
        ),
    )
