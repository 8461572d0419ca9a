"""
Ledger service — the core of the ATM backend.

This service enforces the fundamental rules:
1. An (account number, PIN) pair is registered at most once
2. Withdrawal and deposit amounts are strictly positive
3. A balance never goes below zero
4. The transaction log is append-only

Every check runs before any state changes. A rejected
operation leaves balances and logs exactly as they were.
"""

import logging
import math
import threading
from decimal import Decimal, InvalidOperation

from atm_ledger.errors import (
    AccountNotFoundError,
    InsufficientFundsError,
    InvalidArgumentError,
)
from atm_ledger.models.account import Account, AccountKey, format_transaction
from atm_ledger.models.enums import TransactionType

logger = logging.getLogger(__name__)


def to_decimal(value) -> Decimal:
    """
    Convert a caller-supplied amount to Decimal.

    Floats go through str() so 300.30 becomes Decimal("300.3")
    rather than its binary expansion.
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Amount must be a number, got {value!r}")
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            raise InvalidArgumentError(f"Amount must be finite, got {value!r}")
        amount = Decimal(str(value))
    else:
        try:
            amount = Decimal(str(value))
        except InvalidOperation:
            raise InvalidArgumentError(
                f"Amount must be a number, got {value!r}"
            ) from None

    if not amount.is_finite():
        raise InvalidArgumentError(f"Amount must be finite, got {value!r}")
    return amount


class LedgerService:
    """
    All account state lives inside one LedgerService instance.

    Two services never share accounts, so each test or each
    application can build its own. A single re-entrant lock
    guards both mappings; withdraw and deposit read and write
    the balance inside it.
    """

    def __init__(self):
        self._accounts: dict[AccountKey, Account] = {}
        self._transactions: dict[AccountKey, list[str]] = {}
        self._lock = threading.RLock()

    # --- Registration ---

    def register_account(
        self,
        account_number: int,
        pin: int,
        owner_name: str,
        initial_balance,
    ) -> Account:
        """
        Register a new account with an empty transaction log.

        Raises InvalidArgumentError if the (account number, PIN)
        pair is already registered or isn't a pair of integers,
        the owner name is blank or the opening balance is negative.
        """
        key = self._key(account_number, pin)

        if not isinstance(owner_name, str) or not owner_name.strip():
            raise InvalidArgumentError("Owner name must not be empty")

        balance = to_decimal(initial_balance)
        if balance < 0:
            raise InvalidArgumentError(
                f"Initial balance must not be negative, got {balance}"
            )

        with self._lock:
            if key in self._accounts:
                logger.warning(
                    "Duplicate registration rejected",
                    extra={"account_number": account_number, "action": "register"},
                )
                raise InvalidArgumentError(
                    f"Account {account_number} is already registered"
                )

            account = Account(owner_name=owner_name, balance=balance)
            self._accounts[key] = account
            self._transactions[key] = []

        logger.info(
            "Account registered",
            extra={"account_number": account_number, "action": "register"},
        )
        return account

    # --- Balance mutation ---

    def withdraw_cash(self, account_number: int, pin: int, amount) -> None:
        """
        Withdraw cash from an account.

        Checks, in order: the amount is positive, the account
        exists, the balance covers the amount. Withdrawing the
        full balance is allowed and leaves zero.
        """
        amount = self._positive_amount(amount, TransactionType.WITHDRAWAL)
        key = self._key(account_number, pin)

        with self._lock:
            account = self._get(key)
            if amount > account.balance:
                logger.warning(
                    "Withdrawal refused for insufficient funds",
                    extra={"account_number": account_number, "action": "withdraw"},
                )
                raise InsufficientFundsError(
                    f"Insufficient funds: available={account.balance}, "
                    f"requested={amount}"
                )

            account.balance -= amount
            self._transactions[key].append(format_transaction(
                TransactionType.WITHDRAWAL, amount, account.balance,
            ))

        logger.info(
            "Cash withdrawn",
            extra={"account_number": account_number, "action": "withdraw"},
        )

    def deposit_cash(self, account_number: int, pin: int, amount) -> None:
        """Deposit cash into an account."""
        amount = self._positive_amount(amount, TransactionType.DEPOSIT)
        key = self._key(account_number, pin)

        with self._lock:
            account = self._get(key)
            account.balance += amount
            self._transactions[key].append(format_transaction(
                TransactionType.DEPOSIT, amount, account.balance,
            ))

        logger.info(
            "Cash deposited",
            extra={"account_number": account_number, "action": "deposit"},
        )

    # --- Export ---

    def print_ledger(self, file_path, account_number: int, pin: int) -> int:
        """
        Write an account's transaction log to a file, one line each.

        The account is looked up before the file is opened, so an
        unknown account never creates or truncates the target.
        Errors opening or writing the file propagate as OSError.
        Returns the number of lines written.
        """
        key = self._key(account_number, pin)

        with self._lock:
            self._get(key)
            lines = list(self._transactions[key])

        with open(file_path, "w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")

        logger.info(
            "Ledger exported (%d lines)", len(lines),
            extra={"account_number": account_number, "action": "print_ledger"},
        )
        return len(lines)

    # --- Read access ---

    def get_accounts(self) -> dict[AccountKey, Account]:
        """Return the live account mapping."""
        return self._accounts

    def get_transactions(self) -> dict[AccountKey, list[str]]:
        """
        Return the live transaction log mapping.

        The lists are the service's own; appending to one
        appends to that account's ledger.
        """
        return self._transactions

    def get_account(self, account_number: int, pin: int) -> Account:
        """Get an account by number and PIN."""
        with self._lock:
            return self._get(self._key(account_number, pin))

    def get_balance(self, account_number: int, pin: int) -> Decimal:
        return self.get_account(account_number, pin).balance

    def get_transaction_log(self, account_number: int, pin: int) -> list[str]:
        """Return a copy of an account's log lines, oldest first."""
        key = self._key(account_number, pin)
        with self._lock:
            self._get(key)
            return list(self._transactions[key])

    # --- Helpers ---

    def _key(self, account_number: int, pin: int) -> AccountKey:
        """Build a key, rejecting anything but plain integers."""
        for name, value in (("Account number", account_number), ("PIN", pin)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidArgumentError(
                    f"{name} must be an integer, got {type(value).__name__}"
                )
        return AccountKey(account_number, pin)

    def _get(self, key: AccountKey) -> Account:
        account = self._accounts.get(key)
        if account is None:
            raise AccountNotFoundError(
                f"Account {key.account_number} not found"
            )
        return account

    def _positive_amount(self, amount, transaction_type: TransactionType) -> Decimal:
        amount = to_decimal(amount)
        if amount <= 0:
            raise InvalidArgumentError(
                f"{transaction_type.value} amount must be positive, got {amount}"
            )
        return amount
