"""
Derived Monthly Totals

Outputs of the reconciliation engine. These are recomputed wholesale from
the transaction list on every call and never updated in place.

Sign convention for `debt`: positive means the owner owes their partner,
negative means the partner owes them.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from shared_ledger.models.transaction import Category, MonthKey, Owner


class PersonMonthlyTotals(BaseModel):
    """One owner's breakdown for one month."""
    model_config = ConfigDict(frozen=True)

    owner: Owner
    month_key: MonthKey

    income: Decimal
    share_percent: Decimal = Field(
        ...,
        description="Fraction of combined income for the month (0-1)"
    )
    credit: Decimal

    # Split 50/50
    split_5050_paid: Decimal
    split_5050_portion: Decimal

    paid_for_partner: Decimal

    # Household (split by income share)
    household_paid: Decimal
    household_portion: Decimal

    personal: Decimal
    settlement: Decimal

    total: Decimal = Field(
        ...,
        description="Spend paid by this owner; excludes income, credit and settlement"
    )
    debt: Decimal = Field(
        ...,
        description="Positive = owes partner, negative = partner owes them"
    )

    category_totals: Optional[dict[Category, Decimal]] = None


class CombinedMonthlyTotals(BaseModel):
    """
    Month-wide totals for both owners.

    `grand_total` only covers shareable spend
    (Split 50/50 + Paid for Partner + Household + Personal).
    """
    model_config = ConfigDict(frozen=True)

    month_key: MonthKey

    total_income: Decimal
    total_credit: Decimal
    total_split_5050: Decimal
    total_paid_for_partner: Decimal
    total_household: Decimal
    total_personal: Decimal
    total_settlement: Decimal
    grand_total: Decimal
    uncategorized_total: Decimal = Field(
        description="Shareable spend that carries no category (all of it when categories are not tracked)"
    )

    category_totals: Optional[dict[Category, Decimal]] = None

    lorenzo: PersonMonthlyTotals
    maria: PersonMonthlyTotals

    def for_owner(self, owner: Owner) -> PersonMonthlyTotals:
        """Get the breakdown for one owner."""
        return self.lorenzo if owner is Owner.LORENZO else self.maria

    @property
    def categorized_total(self) -> Decimal:
        """Sum of all category totals (zero if categories were not tracked)."""
        if not self.category_totals:
            return Decimal("0")
        return sum(self.category_totals.values(), Decimal("0"))
