"""Business logic services."""

from atm_ledger.services.ledger_service import LedgerService

__all__ = ["LedgerService"]
