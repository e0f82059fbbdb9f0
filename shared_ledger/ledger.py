"""
Transaction Ledger for Shared Ledger

This module ties together ingestion, the settlement engine and the
audit log around an in-memory collection of transactions.

DESIGN DECISION: The ledger holds transactions only, never derived
totals. Every report is recomputed from the current collection by the
engine, so there is no cached state that can go stale.
"""

from typing import Iterable, Optional, Sequence
from uuid import uuid4

from shared_ledger.audit import AuditLogger, configure_logging, create_correlation_id
from shared_ledger.config import LedgerSettings, get_settings
from shared_ledger.engine import (
    calculate_all_monthly_totals,
    calculate_combined_monthly_totals,
)
from shared_ledger.ingestion import ParseResult, export_csv, parse_csv, parse_rows
from shared_ledger.models.totals import CombinedMonthlyTotals
from shared_ledger.models.transaction import MonthKey, Transaction


class LedgerError(Exception):
    """Base exception for ledger operations."""
    pass


class TransactionNotFoundError(LedgerError):
    """No transaction with the given id."""

    def __init__(self, transaction_id: str):
        self.transaction_id = transaction_id
        super().__init__(f"Transaction not found: {transaction_id}")


class TransactionLedger:
    """
    In-memory transaction collection with reporting.

    Not thread-safe: callers sharing a ledger across threads must
    serialize mutations themselves.
    """

    def __init__(
        self,
        transactions: Optional[Iterable[Transaction]] = None,
        settings: Optional[LedgerSettings] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._transactions: list[Transaction] = list(transactions or [])
        self._settings = settings or get_settings()
        configure_logging(self._settings.log_level)
        self._audit = audit_logger or AuditLogger()

    @property
    def transactions(self) -> list[Transaction]:
        """Copy of the transactions in insertion order."""
        return list(self._transactions)

    def __len__(self) -> int:
        return len(self._transactions)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def add(self, transaction: Transaction) -> Transaction:
        """
        Add a transaction under a freshly generated id.

        Returns the stored transaction (the input is left untouched).
        """
        stored = transaction.model_copy(update={"id": str(uuid4())})
        self._transactions.append(stored)
        self._audit.log_transaction_added(stored)
        return stored

    def remove(self, transaction_id: str) -> Transaction:
        """
        Remove a transaction by id.

        Raises:
            TransactionNotFoundError: If no transaction has this id
        """
        for idx, tx in enumerate(self._transactions):
            if tx.id == transaction_id:
                del self._transactions[idx]
                self._audit.log_transaction_removed(transaction_id)
                return tx
        raise TransactionNotFoundError(transaction_id)

    def import_transactions(self, transactions: Iterable[Transaction]) -> int:
        """Append transactions as-is. Returns how many were added."""
        new = list(transactions)
        self._transactions.extend(new)
        return len(new)

    def replace_all(self, transactions: Iterable[Transaction]) -> None:
        self._transactions = list(transactions)
        self._audit.log_ledger_replaced(len(self._transactions))

    def clear(self) -> None:
        count = len(self._transactions)
        self._transactions = []
        self._audit.log_ledger_cleared(count)

    # -------------------------------------------------------------------------
    # Ingestion
    # -------------------------------------------------------------------------

    def load_csv(self, content: str) -> ParseResult:
        """Parse CSV text and import every valid row."""
        result = parse_csv(content, two_digit_year_pivot=self._settings.two_digit_year_pivot)
        self._import_result(result, source="csv")
        return result

    def load_rows(self, rows: Sequence[Sequence]) -> ParseResult:
        """Parse spreadsheet rows (header first) and import every valid row."""
        result = parse_rows(rows, two_digit_year_pivot=self._settings.two_digit_year_pivot)
        self._import_result(result, source="sheet")
        return result

    def _import_result(self, result: ParseResult, source: str) -> None:
        correlation_id = create_correlation_id()
        imported = self.import_transactions(result.transactions)
        self._audit.log_import(
            source=source,
            imported=imported,
            errors=result.errors,
            skipped=result.skipped,
            correlation_id=correlation_id,
        )

    def export_csv(self) -> str:
        return export_csv(self._transactions)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def search(self, query: str = "") -> list[Transaction]:
        """
        Transactions whose description contains `query` (case-insensitive),
        newest first. An empty query matches everything.
        """
        needle = query.strip().lower()
        matches = [
            tx for tx in self._transactions
            if not needle or needle in tx.description.lower()
        ]
        return sorted(matches, key=lambda tx: tx.date, reverse=True)

    def monthly_totals(self) -> list[CombinedMonthlyTotals]:
        """Combined totals for every month with transactions, newest first."""
        totals = calculate_all_monthly_totals(
            self._transactions,
            include_categories=self._settings.include_category_totals,
        )
        self._audit.log_report_computed(len(totals), len(self._transactions))
        return totals

    def month_totals(self, month_key: MonthKey) -> Optional[CombinedMonthlyTotals]:
        """Combined totals for one month, or None if it has no transactions."""
        month_tx = [tx for tx in self._transactions if month_key.contains(tx.date)]
        if not month_tx:
            return None
        return calculate_combined_monthly_totals(
            month_tx,
            month_key,
            include_categories=self._settings.include_category_totals,
        )
