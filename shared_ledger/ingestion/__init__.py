"""Ingestion package - tabular sources in, validated transactions out."""

from shared_ledger.ingestion.formats import (
    IngestionError,
    InvalidAmountError,
    InvalidCategoryError,
    InvalidDateError,
    parse_amount,
    parse_category,
    parse_date,
    parse_expense_type,
    parse_owner,
)
from shared_ledger.ingestion.parser import (
    ParseResult,
    export_csv,
    parse_csv,
    parse_rows,
)

__all__ = [
    # Exceptions
    "IngestionError",
    "InvalidAmountError",
    "InvalidCategoryError",
    "InvalidDateError",
    # Field parsers
    "parse_amount",
    "parse_category",
    "parse_date",
    "parse_expense_type",
    "parse_owner",
    # Sources
    "ParseResult",
    "export_csv",
    "parse_csv",
    "parse_rows",
]
