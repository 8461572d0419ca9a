"""
In-memory domain models.

Import from here so callers don't depend on the module layout.
"""

from atm_ledger.models.account import Account, AccountKey
from atm_ledger.models.enums import TransactionType

__all__ = ["Account", "AccountKey", "TransactionType"]
