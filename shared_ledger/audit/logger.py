"""
Audit Logger

DESIGN DECISION: Every change to the ledger and every import is logged.
This provides:
1. Traceability of the figures in each monthly report
2. A record of the rows ingestion refused
3. Debugging capability

The audit logger:
- Writes structured JSON lines through structlog
- Keeps the events of the current session in memory, newest last
- Supports correlation IDs to trace related events
"""

import logging
from typing import Optional
from uuid import UUID, uuid4

import structlog

from shared_ledger.config import get_settings
from shared_ledger.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity
from shared_ledger.models.transaction import Transaction


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


PACKAGE_LOGGER = "shared_ledger"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Route structlog output through the stdlib root logger and set the
    package log level.

    Args:
        level: Standard level name. Defaults to `get_settings().log_level`
               (the `LEDGER_LOG_LEVEL` environment variable).

    A root handler is installed only if none exists yet; the level is
    applied to the `shared_ledger` logger so it holds either way.
    """
    if level is None:
        level = get_settings().log_level
    logging.basicConfig(format="%(message)s")
    logging.getLogger(PACKAGE_LOGGER).setLevel(getattr(logging, level.upper()))


class AuditLogger:
    """
    Central audit logging service.

    Logs events to the structured local log and keeps them in memory
    so callers can inspect what happened during a session.
    """

    def __init__(self, max_events: int = 1000):
        """
        Initialize audit logger.

        Args:
            max_events: How many events to retain in memory.
                        Older events are dropped first.
        """
        self._events: list[AuditEvent] = []
        self._max_events = max_events
        self._logger = structlog.get_logger(f"{PACKAGE_LOGGER}.audit")

    def log(self, event: AuditEvent) -> None:
        """Log an audit event at the event's severity."""
        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        self._events.append(event)
        if len(self._events) > self._max_events:
            del self._events[: len(self._events) - self._max_events]

    def recent_events(self, limit: int = 100) -> list[AuditEvent]:
        """Get the most recent events, newest first."""
        return list(reversed(self._events[-limit:])) if limit > 0 else []

    def events_by_correlation_id(self, correlation_id: UUID) -> list[AuditEvent]:
        """Get all events for one correlation ID in chronological order."""
        return [e for e in self._events if e.correlation_id == correlation_id]

    def log_import(
        self,
        source: str,
        imported: int,
        errors: list[str],
        skipped: int,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log an import, plus a warning when rows were skipped."""
        self.log(AuditEventBuilder.transactions_imported(
            source=source,
            imported=imported,
            skipped=skipped,
            correlation_id=correlation_id,
        ))
        if skipped or errors:
            self.log(AuditEventBuilder.rows_skipped(
                source=source,
                errors=errors,
                skipped=skipped,
                correlation_id=correlation_id,
            ))

    def log_transaction_added(self, transaction: Transaction) -> None:
        self.log(AuditEventBuilder.transaction_added(
            transaction_id=transaction.id,
            owner=transaction.owner.value,
            expense_type=transaction.expense_type.value,
            amount=str(transaction.amount),
        ))

    def log_transaction_removed(self, transaction_id: str) -> None:
        self.log(AuditEventBuilder.transaction_removed(transaction_id))

    def log_ledger_replaced(self, count: int) -> None:
        self.log(AuditEventBuilder.ledger_replaced(count))

    def log_ledger_cleared(self, count: int) -> None:
        self.log(AuditEventBuilder.ledger_cleared(count))

    def log_report_computed(self, month_count: int, transaction_count: int) -> None:
        self.log(AuditEventBuilder.report_computed(month_count, transaction_count))


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this at the start of an import and pass it to every event it causes.
    """
    return uuid4()
