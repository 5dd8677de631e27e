import uuid

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from messenger.config import Settings
from messenger.main import create_app


TEST_SECRET = "test-secret"


@pytest.fixture
def test_settings() -> Settings:
    """
    Settings for an isolated app: fixed secret and near-instant simulated replies.
    """
    return Settings(jwt_secret=TEST_SECRET, reply_delay_min_ms=5, reply_delay_max_ms=20)


@pytest.fixture
def messenger_app(test_settings):
    """A fresh FastAPI app with empty in-memory stores for every test."""
    return create_app(test_settings)


@pytest.fixture
def state(messenger_app):
    return messenger_app.state.messenger


@pytest_asyncio.fixture
async def client(messenger_app):
    """
    Provide an HTTPX AsyncClient bound to the FastAPI app.
    """
    transport = ASGITransport(app=messenger_app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client
    await messenger_app.state.messenger.replies.cancel_all()


@pytest_asyncio.fixture
async def register_user(client):
    """
    Factory fixture registering a user through the API.
    Returns (registration body, password).
    """

    async def _register(name: str = "Alice", password: str = "UserPass!23", email: str | None = None):
        email = email or f"{uuid.uuid4().hex[:8]}@example.com"
        resp = await client.post(
            "/api/register",
            json={"name": name, "email": email, "password": password},
        )
        assert resp.status_code == 201, resp.text
        return resp.json(), password

    return _register


@pytest_asyncio.fixture
async def auth_header_factory(client):
    """
    Helper fixture to obtain Authorization headers via the login endpoint.
    """

    async def _get_headers(email: str, password: str) -> dict[str, str]:
        resp = await client.post(
            "/api/login",
            json={"email": email, "password": password},
        )
        assert resp.status_code == 200, resp.text
        token = resp.json()["token"]
        return {"Authorization": f"Bearer {token}"}

    return _get_headers
