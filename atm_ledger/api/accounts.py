"""
Account API endpoints.

The API layer is thin: it handles HTTP concerns (status codes,
response formatting) and delegates all business logic to the
LedgerService. Domain errors map to status codes:

    AccountNotFoundError    -> 404
    InvalidArgumentError    -> 400 (registration)
    InsufficientFundsError  -> 409

Non-positive cash amounts never reach the service: CashRequest
rejects them with 422.
"""

import os

from fastapi import APIRouter, Depends, HTTPException

from atm_ledger.api.deps import get_ledger
from atm_ledger.config import get_settings
from atm_ledger.errors import (
    AccountNotFoundError,
    InsufficientFundsError,
    InvalidArgumentError,
)
from atm_ledger.services.ledger_service import LedgerService
from atm_ledger.schemas.account import (
    AccountRegister,
    AccountResponse,
    CashRequest,
    LedgerExportRequest,
    LedgerExportResponse,
    TransactionLogResponse,
)

router = APIRouter(prefix="/accounts", tags=["Accounts"])


def _account_response(
    ledger: LedgerService, account_number: int, pin: int
) -> AccountResponse:
    account = ledger.get_account(account_number, pin)
    return AccountResponse(
        account_number=account_number,
        owner_name=account.owner_name,
        balance=account.balance,
    )


@router.post("", response_model=AccountResponse, status_code=201)
def register_account(
    request: AccountRegister,
    ledger: LedgerService = Depends(get_ledger),
):
    """Register a new account with an empty transaction log."""
    try:
        account = ledger.register_account(
            request.account_number,
            request.pin,
            request.owner_name,
            request.initial_balance,
        )
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return AccountResponse(
        account_number=request.account_number,
        owner_name=account.owner_name,
        balance=account.balance,
    )


@router.get("/{account_number}", response_model=AccountResponse)
def get_account(
    account_number: int,
    pin: int,
    ledger: LedgerService = Depends(get_ledger),
):
    try:
        return _account_response(ledger, account_number, pin)
    except AccountNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/{account_number}/withdrawals", response_model=AccountResponse)
def withdraw_cash(
    account_number: int,
    request: CashRequest,
    ledger: LedgerService = Depends(get_ledger),
):
    """
    Withdraw cash and return the updated account.

    A withdrawal larger than the balance is a conflict with the
    account's state, not a malformed request, hence 409.
    """
    try:
        ledger.withdraw_cash(account_number, request.pin, request.amount)
        return _account_response(ledger, account_number, request.pin)
    except AccountNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InsufficientFundsError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("/{account_number}/deposits", response_model=AccountResponse)
def deposit_cash(
    account_number: int,
    request: CashRequest,
    ledger: LedgerService = Depends(get_ledger),
):
    """Deposit cash and return the updated account."""
    try:
        ledger.deposit_cash(account_number, request.pin, request.amount)
        return _account_response(ledger, account_number, request.pin)
    except AccountNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get(
    "/{account_number}/transactions",
    response_model=TransactionLogResponse,
)
def get_transactions(
    account_number: int,
    pin: int,
    ledger: LedgerService = Depends(get_ledger),
):
    """Get an account's transaction log, oldest first."""
    try:
        transactions = ledger.get_transaction_log(account_number, pin)
    except AccountNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return TransactionLogResponse(
        account_number=account_number,
        transactions=transactions,
    )


@router.post(
    "/{account_number}/ledger-export",
    response_model=LedgerExportResponse,
)
def export_ledger(
    account_number: int,
    request: LedgerExportRequest,
    ledger: LedgerService = Depends(get_ledger),
):
    """
    Write the account's ledger into the configured export directory.

    The file name is derived from the account number; clients
    can't choose a path on the server.
    """
    export_dir = get_settings().LEDGER_EXPORT_DIR
    file_path = os.path.join(export_dir, f"ledger-{account_number}.txt")

    try:
        ledger.get_account(account_number, request.pin)
        os.makedirs(export_dir, exist_ok=True)
        lines = ledger.print_ledger(file_path, account_number, request.pin)
    except AccountNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except OSError as e:
        raise HTTPException(
            status_code=500, detail=f"Could not write ledger: {e.strerror}"
        )

    return LedgerExportResponse(
        account_number=account_number,
        file_path=file_path,
        lines=lines,
    )
