import os

os.environ.setdefault("JWT_SECRET", "test-jwt-secret")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from salon_api.domain.payments.stripe_service import StripePaymentsService  # noqa: E402
from salon_api.main import app  # noqa: E402

WEBHOOK_SECRET = "whsec_test_secret"


@pytest.fixture
def client():
    """Test client with fresh in-memory stores and a test-mode Stripe service"""
    with TestClient(app) as c:
        app.state.payments = StripePaymentsService(
            api_key="sk_test_dummy", webhook_secret=WEBHOOK_SECRET, timeout=5
        )
        yield c


def signup(client: TestClient, email: str, password: str = "s3cret-pass") -> str:
    response = client.post("/api/signup", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["token"]


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def token(client):
    return signup(client, "ada@example.com")


@pytest.fixture
def auth_headers(token):
    return bearer(token)
