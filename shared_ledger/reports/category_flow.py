"""
Category Flow Report

Turns one month's combined totals into a flow from income to spending
categories, ready for a Sankey-style chart. Uncategorized spend goes to
a single "Other" node.
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from shared_ledger.models.totals import CombinedMonthlyTotals
from shared_ledger.models.transaction import Category


INCOME_NODE_ID = "income"
UNCATEGORIZED_NODE_ID = "uncategorized"

INCOME_COLOR = "#22c55e"
UNCATEGORIZED_COLOR = "#9ca3af"
DEFAULT_COLOR = "#6b7280"

CATEGORY_COLORS: dict[Category, str] = {
    Category.GROCERIES: "#10b981",
    Category.TRANSPORT: "#3b82f6",
    Category.WATER: "#06b6d4",
    Category.ELECTRICITY: "#fbbf24",
    Category.DINING: "#ec4899",
    Category.CHILD: "#8b5cf6",
    Category.ENTERTAINMENT: "#f97316",
    Category.HEALTH: "#ef4444",
    Category.HOME: "#6366f1",
    Category.EDUCATION: "#14b8a6",
    Category.SUBSCRIPTION: "#a855f7",
}


class FlowNode(BaseModel):
    id: str
    name: str
    color: str


class FlowLink(BaseModel):
    source: str
    target: str
    value: Decimal


class CategoryFlow(BaseModel):
    """Nodes and links of the flow, links sorted by value descending."""

    nodes: list[FlowNode] = Field(default_factory=list)
    links: list[FlowLink] = Field(default_factory=list)


def category_node_id(category: Category) -> str:
    return f"cat-{category.value}"


def build_category_flow(month_totals: CombinedMonthlyTotals) -> CategoryFlow:
    """
    Build the income -> category flow for one month.

    Only categories with a positive total get a node. Positive spend
    with no category becomes the "Other" node.
    """
    nodes = [FlowNode(id=INCOME_NODE_ID, name="Income", color=INCOME_COLOR)]
    links: list[FlowLink] = []

    for category, amount in (month_totals.category_totals or {}).items():
        if amount <= 0:
            continue
        node_id = category_node_id(category)
        nodes.append(FlowNode(
            id=node_id,
            name=category.value,
            color=CATEGORY_COLORS.get(category, DEFAULT_COLOR),
        ))
        links.append(FlowLink(source=INCOME_NODE_ID, target=node_id, value=amount))

    uncategorized = month_totals.uncategorized_total
    if uncategorized > 0:
        nodes.append(FlowNode(
            id=UNCATEGORIZED_NODE_ID,
            name="Other",
            color=UNCATEGORIZED_COLOR,
        ))
        links.append(FlowLink(
            source=INCOME_NODE_ID,
            target=UNCATEGORIZED_NODE_ID,
            value=uncategorized,
        ))

    links.sort(key=lambda link: link.value, reverse=True)
    return CategoryFlow(nodes=nodes, links=links)
