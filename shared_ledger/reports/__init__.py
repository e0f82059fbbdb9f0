"""Reporting package."""

from shared_ledger.reports.category_flow import (
    CategoryFlow,
    FlowLink,
    FlowNode,
    build_category_flow,
)

__all__ = ["CategoryFlow", "FlowLink", "FlowNode", "build_category_flow"]
