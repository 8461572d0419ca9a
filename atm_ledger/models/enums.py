"""
Shared enumerations for the ledger models.
"""

import enum


class TransactionType(str, enum.Enum):
    """Kind of balance change; the value is what appears in log lines."""
    WITHDRAWAL = "Withdrawal"
    DEPOSIT = "Deposit"
