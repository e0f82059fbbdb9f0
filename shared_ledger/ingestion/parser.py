"""
Transaction Ingestion

Reads tabular sources (CSV text or already-fetched spreadsheet rows) into
validated Transaction values for the settlement engine.

IMPORTANT: Ingestion NEVER silently fixes a row. A row that cannot be
read is skipped and reported with its 1-based row number, and the
caller decides what to show the user.
"""

import csv
import io
from typing import Iterable, Optional, Sequence

from pydantic import BaseModel, Field

from shared_ledger.ingestion.formats import (
    IngestionError,
    format_amount,
    format_date,
    parse_amount,
    parse_category,
    parse_date,
    parse_expense_type,
    parse_owner,
)
from shared_ledger.models.transaction import Owner, Transaction


# Accepted header names per column (Portuguese, English)
HEADER_ALIASES: dict[str, tuple[str, ...]] = {
    "owner": ("dono", "owner"),
    "description": ("descricao", "description"),
    "amount": ("valor", "amount"),
    "type": ("tipo", "type"),
    "date": ("data", "date"),
}
OPTIONAL_HEADER_ALIASES: dict[str, tuple[str, ...]] = {
    "category": ("categoria", "category"),
}

EXPORT_HEADER = ["Owner", "Description", "Amount", "Type", "Date"]


class ParseResult(BaseModel):
    """Outcome of reading one source."""

    transactions: list[Transaction] = Field(default_factory=list)
    errors: list[str] = Field(
        default_factory=list,
        description="Human-readable message per rejected row"
    )
    skipped: int = Field(
        default=0,
        ge=0,
        description="Rows skipped, blank rows included"
    )

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0


def _find_column(headers: list[str], aliases: tuple[str, ...]) -> Optional[int]:
    for idx, header in enumerate(headers):
        if header in aliases:
            return idx
    return None


def _cell(row: Sequence, idx: Optional[int]) -> str:
    if idx is None or idx >= len(row) or row[idx] is None:
        return ""
    return str(row[idx]).strip()


def _is_blank(row: Sequence) -> bool:
    return not row or all(cell is None or str(cell).strip() == "" for cell in row)


def parse_rows(
    rows: Sequence[Sequence],
    two_digit_year_pivot: int = 50,
    source: str = "Sheet",
) -> ParseResult:
    """
    Parse spreadsheet rows into transactions.

    The first row must be the header. Column order is free; headers are
    matched case-insensitively against Portuguese and English names.

    Args:
        rows: 2D array of cell values, header first
        two_digit_year_pivot: Passed to the date parser
        source: Name used in the "empty" error message

    Returns:
        ParseResult with the valid transactions, per-row errors and
        the number of skipped rows
    """
    if len(rows) < 2:
        return ParseResult(errors=[f"{source} is empty or has no data rows"])

    headers = [str(h).strip().lower() for h in rows[0]]
    columns = {
        name: _find_column(headers, aliases)
        for name, aliases in HEADER_ALIASES.items()
    }

    missing = [name for name, idx in columns.items() if idx is None]
    if missing:
        return ParseResult(errors=[
            "Missing required columns. Expected: Dono/Owner, Descricao/Description, "
            "Valor/Amount, Tipo/Type, Data/Date. "
            f"Found: {', '.join(headers)}"
        ])

    category_idx = _find_column(headers, OPTIONAL_HEADER_ALIASES["category"])

    transactions: list[Transaction] = []
    errors: list[str] = []
    skipped = 0

    for i, row in enumerate(rows[1:], start=2):
        if _is_blank(row):
            skipped += 1
            continue

        owner_str = _cell(row, columns["owner"])
        type_str = _cell(row, columns["type"])

        owner = parse_owner(owner_str)
        if owner is None:
            expected = " or ".join(o.value for o in Owner)
            errors.append(f"Row {i}: Invalid owner \"{owner_str}\". Expected {expected}.")
            skipped += 1
            continue

        expense_type = parse_expense_type(type_str)
        if expense_type is None:
            errors.append(f"Row {i}: Invalid type \"{type_str}\".")
            skipped += 1
            continue

        try:
            amount = parse_amount(_cell(row, columns["amount"]))
            tx_date = parse_date(_cell(row, columns["date"]), two_digit_year_pivot)
            category = parse_category(_cell(row, category_idx))
        except IngestionError as e:
            errors.append(f"Row {i}: {e}")
            skipped += 1
            continue

        transactions.append(Transaction(
            owner=owner,
            description=_cell(row, columns["description"]),
            amount=amount,
            expense_type=expense_type,
            date=tx_date,
            category=category,
            row_number=i,
        ))

    return ParseResult(transactions=transactions, errors=errors, skipped=skipped)


def parse_csv(content: str, two_digit_year_pivot: int = 50) -> ParseResult:
    """
    Parse CSV text into transactions.

    Quoted fields may contain commas. Blank lines count as skipped rows.
    """
    rows = list(csv.reader(io.StringIO(content.strip())))
    return parse_rows(rows, two_digit_year_pivot=two_digit_year_pivot, source="CSV file")


def export_csv(transactions: Iterable[Transaction]) -> str:
    """
    Export transactions to the CSV layout parse_csv reads.

    A Category column is added only when some transaction has one.
    """
    transactions = list(transactions)
    with_category = any(tx.category is not None for tx in transactions)

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(EXPORT_HEADER + (["Category"] if with_category else []))
    for tx in transactions:
        row = [
            tx.owner.value,
            tx.description,
            format_amount(tx.amount),
            tx.expense_type.value,
            format_date(tx.date),
        ]
        if with_category:
            row.append(tx.category.value if tx.category else "")
        writer.writerow(row)

    return buffer.getvalue().rstrip("\n")
