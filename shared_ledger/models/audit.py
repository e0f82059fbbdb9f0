"""
Audit Models for Shared Ledger

Every change to the transaction collection and every import is logged.
This provides:
1. Traceability of where each month's figures came from
2. Visibility into rows that ingestion rejected
3. Debugging information when totals look wrong

DESIGN DECISION: Audit events are append-only. We never modify them.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Ingestion
    TRANSACTIONS_IMPORTED = "transactions_imported"
    ROWS_SKIPPED = "rows_skipped"

    # Ledger changes
    TRANSACTION_ADDED = "transaction_added"
    TRANSACTION_REMOVED = "transaction_removed"
    LEDGER_REPLACED = "ledger_replaced"
    LEDGER_CLEARED = "ledger_cleared"

    # Reporting
    REPORT_COMPUTED = "report_computed"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"


class AuditEvent(BaseModel):
    """
    A single audit event.

    Every significant ledger action creates one of these.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType
    severity: AuditSeverity = AuditSeverity.INFO

    # Context - what entity is this about?
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'transaction', 'ledger', 'report')"
    )
    entity_id: Optional[str] = None

    # Correlation - for tracking related events
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate related events (e.g., one import)"
    )

    description: str = Field(..., max_length=500)
    details: dict[str, Any] = Field(default_factory=dict)

    def to_log_dict(self) -> dict:
        """Convert to a dictionary suitable for structured logging."""
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.transactions_imported("csv", 12, 1, correlation_id)
        event = AuditEventBuilder.transaction_removed(tx_id)
    """

    @staticmethod
    def transactions_imported(
        source: str,
        imported: int,
        skipped: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTIONS_IMPORTED,
            entity_type="ledger",
            correlation_id=correlation_id,
            description=f"Imported {imported} transactions from {source}",
            details={
                "source": source,
                "imported": imported,
                "skipped": skipped,
            },
        )

    @staticmethod
    def rows_skipped(
        source: str,
        errors: list[str],
        skipped: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ROWS_SKIPPED,
            severity=AuditSeverity.WARNING,
            entity_type="ledger",
            correlation_id=correlation_id,
            description=f"Skipped {skipped} rows from {source}",
            details={
                "source": source,
                "skipped": skipped,
                "errors": errors,
            },
        )

    @staticmethod
    def transaction_added(
        transaction_id: str,
        owner: str,
        expense_type: str,
        amount: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTION_ADDED,
            entity_type="transaction",
            entity_id=transaction_id,
            description=f"Transaction added for {owner}: {expense_type}",
            details={
                "owner": owner,
                "expense_type": expense_type,
                "amount": amount,
            },
        )

    @staticmethod
    def transaction_removed(transaction_id: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTION_REMOVED,
            entity_type="transaction",
            entity_id=transaction_id,
            description=f"Transaction removed: {transaction_id}",
        )

    @staticmethod
    def ledger_replaced(count: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LEDGER_REPLACED,
            entity_type="ledger",
            description=f"Ledger replaced with {count} transactions",
            details={"count": count},
        )

    @staticmethod
    def ledger_cleared(count: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LEDGER_CLEARED,
            severity=AuditSeverity.WARNING,
            entity_type="ledger",
            description=f"Ledger cleared ({count} transactions dropped)",
            details={"count": count},
        )

    @staticmethod
    def report_computed(
        month_count: int,
        transaction_count: int,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.REPORT_COMPUTED,
            severity=AuditSeverity.DEBUG,
            entity_type="report",
            description=f"Monthly totals computed for {month_count} months",
            details={
                "month_count": month_count,
                "transaction_count": transaction_count,
            },
        )
