"""
Shared test fixtures.

Every test gets its own LedgerService, so no account or
transaction leaks from one test into another.
"""

import pytest
from fastapi.testclient import TestClient

from atm_ledger.api.deps import get_ledger
from atm_ledger.main import app
from atm_ledger.services.ledger_service import LedgerService


@pytest.fixture
def ledger():
    """Provide a fresh, empty ledger for direct service testing."""
    return LedgerService()


@pytest.fixture
def client(ledger):
    """
    Provide a test client backed by the test ledger.

    We override the get_ledger dependency so the app uses the
    same ledger the test can inspect directly.
    """
    app.dependency_overrides[get_ledger] = lambda: ledger
    yield TestClient(app)
    app.dependency_overrides.clear()
