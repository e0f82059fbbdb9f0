"""
Field Parsers for Ingestion

Turns raw spreadsheet cells into typed values. Each parser either
returns a valid value or raises an IngestionError subclass; the row
loop in the parser module turns those into per-row error messages.

Both the Portuguese labels used in the household sheet and the English
enum values are accepted.
"""

import re
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Optional

from shared_ledger.models.transaction import Category, ExpenseType, Owner


class IngestionError(Exception):
    """Base exception for ingestion errors."""
    pass


class InvalidAmountError(IngestionError):
    """Cell could not be read as a money amount."""
    pass


class InvalidDateError(IngestionError):
    """Cell could not be read as a calendar date."""
    pass


class InvalidCategoryError(IngestionError):
    """Cell holds a category label we do not know."""
    pass


# Portuguese sheet labels -> expense type
TYPE_ALIASES: dict[str, ExpenseType] = {
    "Renda": ExpenseType.INCOME,
    "Despesa Familiar": ExpenseType.HOUSEHOLD,
    "Despesa 50/50": ExpenseType.SPLIT_5050,
    "Despesa Pessoal": ExpenseType.PERSONAL,
    "Pagou para o outro": ExpenseType.PAID_FOR_PARTNER,
    "Credito": ExpenseType.CREDIT,
    "Quitacao": ExpenseType.SETTLEMENT,
}

# Spellings found in older sheets
CATEGORY_ALIASES: dict[str, Category] = {
    "entreterimento": Category.ENTERTAINMENT,
    "agua": Category.WATER,
    "saude": Category.HEALTH,
    "educacao": Category.EDUCATION,
}

_CURRENCY_PREFIX = re.compile(r"R\$\s*")
_BR_DATE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{2}|\d{4})$")
_ISO_DATE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


def parse_owner(value: str) -> Optional[Owner]:
    """Match an owner name, ignoring case. None if unknown."""
    cleaned = value.strip().lower()
    for owner in Owner:
        if owner.value.lower() == cleaned:
            return owner
    return None


def parse_expense_type(value: str) -> Optional[ExpenseType]:
    """
    Map a type label to ExpenseType.

    Portuguese labels are checked first, then English values.
    None if the label is unknown.
    """
    cleaned = value.strip()
    if cleaned in TYPE_ALIASES:
        return TYPE_ALIASES[cleaned]
    try:
        return ExpenseType(cleaned)
    except ValueError:
        return None


def parse_category(value: str) -> Optional[Category]:
    """
    Map a category label to Category.

    Accepts sheet labels and enum names, ignoring case.
    Raises InvalidCategoryError for a non-empty unknown label.
    """
    cleaned = value.strip()
    if not cleaned:
        return None

    lowered = cleaned.lower()
    for category in Category:
        if lowered in (category.value.lower(), category.name.lower()):
            return category
    if lowered in CATEGORY_ALIASES:
        return CATEGORY_ALIASES[lowered]

    raise InvalidCategoryError(f"Invalid category \"{value}\".")


def parse_amount(value: str) -> Decimal:
    """
    Parse a BRL amount string.

    Handles both separator conventions by looking at the last separator:
    - BR format: "R$3.950,00" (period = thousands, comma = decimal)
    - US format: "R$3,950.00" (comma = thousands, period = decimal)
    """
    cleaned = _CURRENCY_PREFIX.sub("", value).strip().replace(" ", "")
    if not cleaned:
        raise InvalidAmountError(f"Invalid amount \"{value}\".")

    last_comma = cleaned.rfind(",")
    last_period = cleaned.rfind(".")
    if last_comma > last_period:
        cleaned = cleaned.replace(".", "").replace(",", ".")
    elif last_period > last_comma:
        cleaned = cleaned.replace(",", "")

    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        raise InvalidAmountError(f"Invalid amount \"{value}\".") from None

    if not amount.is_finite():
        raise InvalidAmountError(f"Invalid amount \"{value}\".")
    return amount


def parse_date(value: str, two_digit_year_pivot: int = 50) -> date:
    """
    Parse a D/M/YY, D/M/YYYY or ISO YYYY-MM-DD date.

    Two-digit years below the pivot are 20YY, the rest 19YY.
    """
    cleaned = value.strip()

    iso = _ISO_DATE.match(cleaned)
    br = _BR_DATE.match(cleaned)
    if iso:
        year, month, day = (int(part) for part in iso.groups())
    elif br:
        day, month, year = (int(part) for part in br.groups())
        if len(br.group(3)) == 2:
            year += 2000 if year < two_digit_year_pivot else 1900
    else:
        raise InvalidDateError(f"Invalid date \"{value}\".")

    try:
        return date(year, month, day)
    except ValueError:
        raise InvalidDateError(f"Invalid date \"{value}\".") from None


def format_amount(amount: Decimal) -> str:
    """Format an amount the way the household sheet stores it (R$1234,56)."""
    return f"R${amount:.2f}".replace(".", ",")


def format_date(value: date) -> str:
    """Format a date as D/M/YY."""
    return f"{value.day}/{value.month}/{value.year % 100:02d}"
