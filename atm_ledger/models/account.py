"""
Account model.

An account is identified by the pair (account number, PIN).
The pair is a value: two AccountKey instances built from the
same numbers are equal, hash the same and find the same
entry in a dict.
"""

from dataclasses import dataclass
from decimal import Decimal

from atm_ledger.models.enums import TransactionType


@dataclass(frozen=True, order=True)
class AccountKey:
    """Composite identifier of an account."""
    account_number: int
    pin: int

    def __repr__(self) -> str:
        # PINs stay out of logs and tracebacks
        return f"<AccountKey {self.account_number}>"


@dataclass
class Account:
    """Owner and current balance. Mutated only by the ledger service."""
    owner_name: str
    balance: Decimal


def format_transaction(
    transaction_type: TransactionType, amount: Decimal, balance: Decimal
) -> str:
    """
    Render one transaction log line.

    Export files are compared token by token, so the punctuation
    and field order here must not change.
    """
    return (
        f"{transaction_type.value} - Amount: ${amount:.2f}, "
        f"Updated Balance: ${balance:.2f}"
    )
