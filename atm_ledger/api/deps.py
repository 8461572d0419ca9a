"""
Shared FastAPI dependencies.
"""

from fastapi import Request

from atm_ledger.services.ledger_service import LedgerService


def get_ledger(request: Request) -> LedgerService:
    """
    Provide the application's ledger service to a route.

    The service is created once per application in
    create_app() and stored on app.state. Tests override
    this dependency with a fresh instance.
    """
    return request.app.state.ledger
