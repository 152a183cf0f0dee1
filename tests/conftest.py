import os

# Keep API tests deterministic: no rate limiting, no real credentials.
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ.pop("GEMINI_API_KEY", None)

import pytest
from fastapi.testclient import TestClient

from app.routers.dependencies import get_orchestrator
from app.server import app
from app.services.generator import AnalysisOrchestrator


@pytest.fixture
def client():
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def use_orchestrator():
    """Route /api/analyze through an orchestrator built from the given key and client."""

    def _install(completion_client, api_key="test-key"):
        app.dependency_overrides[get_orchestrator] = lambda: AnalysisOrchestrator(
            api_key=api_key, client=completion_client
        )

    yield _install
    app.dependency_overrides.clear()
