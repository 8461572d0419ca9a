"""
Pydantic schemas for account operations.

These define the HTTP contract. The service itself takes
plain arguments; the API layer unpacks these models.
"""

from decimal import Decimal

from pydantic import BaseModel, Field


# --- Request Schemas ---

class AccountRegister(BaseModel):
    """Request to register a new account."""
    account_number: int = Field(ge=0)
    pin: int = Field(ge=0)
    owner_name: str = Field(min_length=1, max_length=100)
    initial_balance: Decimal = Field(default=Decimal("0"), ge=0)


class CashRequest(BaseModel):
    """Withdrawal or deposit against an account."""
    pin: int
    amount: Decimal = Field(gt=0, decimal_places=2)


class LedgerExportRequest(BaseModel):
    pin: int


# --- Response Schemas ---

class AccountResponse(BaseModel):
    """Account in API responses. The PIN is never echoed back."""
    account_number: int
    owner_name: str
    balance: Decimal


class TransactionLogResponse(BaseModel):
    account_number: int
    transactions: list[str]


class LedgerExportResponse(BaseModel):
    """Where the ledger was written and how many lines it holds."""
    account_number: int
    file_path: str
    lines: int
