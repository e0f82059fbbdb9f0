"""
Data Models Package

This package contains all Pydantic models used in the Shared Ledger system.
Transactions flow in, monthly totals flow out.
"""

from shared_ledger.models.transaction import (
    SHAREABLE_TYPES,
    Category,
    ExpenseType,
    MonthKey,
    Owner,
    Transaction,
)
from shared_ledger.models.totals import (
    CombinedMonthlyTotals,
    PersonMonthlyTotals,
)
from shared_ledger.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Transaction models
    "SHAREABLE_TYPES",
    "Category",
    "ExpenseType",
    "MonthKey",
    "Owner",
    "Transaction",
    # Derived totals
    "CombinedMonthlyTotals",
    "PersonMonthlyTotals",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
