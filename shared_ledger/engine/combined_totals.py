"""Combined Monthly Aggregator - month-wide totals plus both owners' breakdowns."""

from typing import Sequence

from shared_ledger.engine.filters import ZERO, sum_by_type
from shared_ledger.engine.person_totals import (
    calculate_person_monthly_totals,
    sum_by_category,
    sum_uncategorized_spend,
)
from shared_ledger.models.totals import CombinedMonthlyTotals
from shared_ledger.models.transaction import (
    SHAREABLE_TYPES,
    ExpenseType,
    MonthKey,
    Owner,
    Transaction,
)


def calculate_combined_monthly_totals(
    month_transactions: Sequence[Transaction],
    month_key: MonthKey,
    include_categories: bool = True,
) -> CombinedMonthlyTotals:
    """
    Calculate combined monthly totals for both owners.

    `grand_total` is the shareable spend only; income, credit and
    settlement are reported separately and never added in. Category
    totals cover every categorized transaction, so they are not a
    breakdown of `grand_total`; `uncategorized_total` is computed from
    the shareable spend directly.
    """
    lorenzo = calculate_person_monthly_totals(
        month_transactions, Owner.LORENZO, month_key, include_categories
    )
    maria = calculate_person_monthly_totals(
        month_transactions, Owner.MARIA, month_key, include_categories
    )

    month = sum_by_type(month_transactions)
    grand_total = sum((month[t] for t in SHAREABLE_TYPES), ZERO)

    return CombinedMonthlyTotals(
        month_key=month_key,
        total_income=month[ExpenseType.INCOME],
        total_credit=month[ExpenseType.CREDIT],
        total_split_5050=month[ExpenseType.SPLIT_5050],
        total_paid_for_partner=month[ExpenseType.PAID_FOR_PARTNER],
        total_household=month[ExpenseType.HOUSEHOLD],
        total_personal=month[ExpenseType.PERSONAL],
        total_settlement=month[ExpenseType.SETTLEMENT],
        grand_total=grand_total,
        uncategorized_total=(
            sum_uncategorized_spend(month_transactions)
            if include_categories else grand_total
        ),
        category_totals=(
            sum_by_category(month_transactions) if include_categories else None
        ),
        lorenzo=lorenzo,
        maria=maria,
    )
