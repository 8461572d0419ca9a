"""
ATM Ledger — FastAPI Application.

This is the entry point for the application.
All routers are registered here.
"""

from fastapi import FastAPI

from atm_ledger.config import get_settings
from atm_ledger.logging_config import setup_logging
from atm_ledger.api.health import router as health_router
from atm_ledger.api.accounts import router as accounts_router
from atm_ledger.services.ledger_service import LedgerService


def create_app(ledger: LedgerService | None = None) -> FastAPI:
    """
    Build the application around one ledger service.

    Each app owns its ledger; nothing is shared between apps
    and nothing survives a restart.
    """
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="In-memory ATM ledger: accounts, cash movements, ledger export",
        debug=settings.DEBUG,
    )
    app.state.ledger = ledger if ledger is not None else LedgerService()

    # Register routers
    app.include_router(health_router)
    app.include_router(accounts_router)
    return app


app = create_app()
