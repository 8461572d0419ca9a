"""
Health check endpoint.

Used by load balancers, monitoring systems, and humans
to verify the application is running and responsive.
"""

from fastapi import APIRouter, Depends

from atm_ledger.api.deps import get_ledger
from atm_ledger.services.ledger_service import LedgerService

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check(ledger: LedgerService = Depends(get_ledger)):
    """Return application health status and the number of registered accounts."""
    return {
        "status": "healthy",
        "service": "atm-ledger",
        "accounts": len(ledger.get_accounts()),
    }
