"""
Core Transaction Models for Shared Ledger

These models define the strict schemas for every money movement the
reconciliation engine consumes. They are designed to:
1. Enforce type safety at runtime
2. Be immutable once built (the engine never mutates its input)
3. Be hashable where they are used as grouping keys

DESIGN DECISION: Owners, expense types and categories are closed enums.
Anything outside these sets must be rejected by ingestion, never guessed.
"""

from datetime import date, timedelta
from decimal import Decimal
from enum import Enum
from functools import total_ordering
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class Owner(str, Enum):
    """
    The two household members whose shared finances are tracked.

    There are exactly two owners. Every "partner" lookup goes through
    `Owner.partner` so no code compares owner names as strings.
    """
    LORENZO = "Lorenzo"
    MARIA = "Maria"

    @property
    def partner(self) -> "Owner":
        """The other owner."""
        return Owner.MARIA if self is Owner.LORENZO else Owner.LORENZO


class ExpenseType(str, Enum):
    """
    Financial role of a transaction.

    The amount is always a magnitude; the type decides how it flows
    through the debt formula.
    """
    INCOME = "Income"
    HOUSEHOLD = "Household"              # Split proportionally to income
    SPLIT_5050 = "Split 50/50"           # Split evenly
    PERSONAL = "Personal"
    PAID_FOR_PARTNER = "Paid for Partner"
    CREDIT = "Credit"
    SETTLEMENT = "Settlement"            # Transfer that pays down debt


# Expense types that count as spend in totals and category breakdowns
SHAREABLE_TYPES: frozenset[ExpenseType] = frozenset({
    ExpenseType.SPLIT_5050,
    ExpenseType.PAID_FOR_PARTNER,
    ExpenseType.HOUSEHOLD,
    ExpenseType.PERSONAL,
})


class Category(str, Enum):
    """
    Secondary reporting classification of spend.

    Orthogonal to ExpenseType and never used in any debt formula.
    Values are the labels used in the household spreadsheet.
    """
    GROCERIES = "Mercado"
    TRANSPORT = "Transporte"
    WATER = "Água"
    ELECTRICITY = "Luz"
    DINING = "Comida boa"
    CHILD = "Filho"
    ENTERTAINMENT = "Entretenimento"
    HEALTH = "Saúde"
    HOME = "Casa"
    EDUCATION = "Educação"
    SUBSCRIPTION = "Subscription"


# =============================================================================
# TRANSACTION
# =============================================================================

class Transaction(BaseModel):
    """
    A single normalized money movement.

    Amount sign is NOT validated here - ingestion decides what is
    acceptable. Only finiteness is enforced by the Decimal type.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    id: str = Field(
        default_factory=lambda: str(uuid4()),
        description="Opaque unique identifier"
    )
    owner: Owner
    description: str = Field(
        default="",
        description="Free text description"
    )
    amount: Decimal = Field(
        ...,
        description="Magnitude of the movement; direction comes from expense_type"
    )
    expense_type: ExpenseType
    date: date
    category: Optional[Category] = None
    row_number: Optional[int] = Field(
        default=None,
        ge=1,
        description="1-indexed row in the source sheet, if imported"
    )

    @property
    def month_key(self) -> "MonthKey":
        return MonthKey.from_date(self.date)


# =============================================================================
# MONTH KEY
# =============================================================================

@total_ordering
class MonthKey(BaseModel):
    """
    Calendar month used as the grouping key.

    `month` is 0-based (0 = January, 11 = December).
    Ordered by year, then month.
    """
    model_config = ConfigDict(frozen=True)

    year: int
    month: int = Field(..., ge=0, le=11)

    @classmethod
    def from_date(cls, value: date) -> "MonthKey":
        return cls(year=value.year, month=value.month - 1)

    @property
    def first_day(self) -> date:
        return date(self.year, self.month + 1, 1)

    @property
    def last_day(self) -> date:
        if self.month == 11:
            return date(self.year, 12, 31)
        return date(self.year, self.month + 2, 1) - timedelta(days=1)

    def contains(self, value: date) -> bool:
        """Check if a date falls inside this month."""
        return self.first_day <= value <= self.last_day

    def _sort_key(self) -> tuple[int, int]:
        return (self.year, self.month)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MonthKey):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month + 1:02d}"
