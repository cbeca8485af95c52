import httpx
import pytest
from fastapi.testclient import TestClient

from api.main import app
from core.config import Settings, get_settings
from core.dependencies import get_http_transport


class StubStripe:
    """Records outbound requests and answers with a canned JSON body."""
    def __init__(self):
        self.status_code = 200
        self.body = {"id": "cs_test_1", "url": "https://pay.example/sess_1"}
        self.error: Exception | None = None
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, json=self.body)


@pytest.fixture
def stripe_stub() -> StubStripe:
    return StubStripe()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, STRIPE_SECRET_KEY="sk_test_123", ORGANIZATION_NAME="Test Shul")


@pytest.fixture
def client(settings, stripe_stub):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_http_transport] = lambda: httpx.MockTransport(stripe_stub)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()
