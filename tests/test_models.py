"""
Tests for the account key, log line format and logging setup.
"""

import json
import logging
from decimal import Decimal

from atm_ledger.logging_config import JSONFormatter, LOGGER_NAME, setup_logging
from atm_ledger.models.account import AccountKey, format_transaction
from atm_ledger.models.enums import TransactionType


class TestAccountKey:

    def test_equal_keys_hash_equal(self):
        assert AccountKey(1, 2) == AccountKey(1, 2)
        assert hash(AccountKey(1, 2)) == hash(AccountKey(1, 2))

    def test_pin_is_part_of_identity(self):
        assert AccountKey(1, 2) != AccountKey(1, 3)

    def test_keys_are_ordered(self):
        assert sorted([AccountKey(2, 1), AccountKey(1, 9), AccountKey(1, 3)]) == [
            AccountKey(1, 3), AccountKey(1, 9), AccountKey(2, 1),
        ]

    def test_repr_hides_pin(self):
        assert "4321" not in repr(AccountKey(1111, 4321))


class TestFormatTransaction:

    def test_withdrawal_line(self):
        line = format_transaction(
            TransactionType.WITHDRAWAL, Decimal("200.4"), Decimal("99.9")
        )
        assert line == "Withdrawal - Amount: $200.40, Updated Balance: $99.90"

    def test_deposit_line(self):
        line = format_transaction(
            TransactionType.DEPOSIT, Decimal("40000"), Decimal("40099.9")
        )
        assert line == "Deposit - Amount: $40000.00, Updated Balance: $40099.90"


class TestLogging:

    def test_setup_is_idempotent(self):
        setup_logging("DEBUG")
        logger = setup_logging("INFO")

        assert logger.name == LOGGER_NAME
        assert len(logger.handlers) == 1
        assert logger.level == logging.INFO

    def test_formatter_emits_json_with_extras(self):
        record = logging.LogRecord(
            "atm_ledger.services", logging.INFO, __file__, 1,
            "Cash deposited", None, None,
        )
        record.account_number = 1111
        record.action = "deposit"

        data = json.loads(JSONFormatter().format(record))
        assert data["message"] == "Cash deposited"
        assert data["account_number"] == 1111
        assert data["action"] == "deposit"
        assert "pin" not in data
