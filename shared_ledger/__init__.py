"""
Shared Ledger - Source Package

Shared household finances for two co-habiting owners: who paid for
what, and how much each owner owes the other, month by month.

DESIGN PRINCIPLES:
1. The settlement engine is pure - same transactions, same totals
2. Bad input is rejected at ingestion, never guessed at
3. No silent corrections
4. Every ledger change is auditable
"""

__version__ = "1.0.0"
__author__ = "Shared Ledger Team"
