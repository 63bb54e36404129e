"""
Pytest configuration and fixtures for testing
"""
from datetime import datetime, timezone

import httpx
import pytest

from config.settings import Settings
from main import app
from services.trial_service import TrialService

# Fixed evaluation time so every trial check is deterministic
NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def service():
    """TrialService bound to default trial rules, independent of the environment"""
    return TrialService(Settings(TRIAL_WARNING_DAYS=3, TRIAL_LENGTH_DAYS=7, PREMIUM_STATUS="premium"))


@pytest.fixture
async def async_client(service, monkeypatch):
    """
    Async HTTP client fixture running requests against the app in-process.
    The router's service is swapped for the fixed-rules one so endpoint
    results do not depend on TRIAL_* environment variables.
    """
    monkeypatch.setattr("routers.trial_router.trial_service", service)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
