import uuid

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

from phatfit.config import Settings
from phatfit.core.security import TokenService, hash_password
from phatfit.main import create_app
from phatfit.services.credential_store import UserStore


TEST_DB_URL = "sqlite://:memory:"
TEST_SECRET = "test-secret-" + uuid.uuid4().hex


@pytest_asyncio.fixture
async def store():
    """
    Provide a UserStore bound to a clean in-memory SQLite database.
    Tables are recreated from scratch for every test.
    """
    if Tortoise._inited:
        await Tortoise.close_connections()
    user_store = UserStore(TEST_DB_URL, generate_schemas=True)
    await user_store.open()
    yield user_store
    await user_store.close()


@pytest.fixture
def tokens():
    return TokenService(TEST_SECRET)


@pytest_asyncio.fixture
async def client(store, tokens):
    """
    Provide an HTTPX AsyncClient bound to a fresh app sharing the test store.
    """
    settings = Settings(env="test", database_url=TEST_DB_URL, jwt_secret=TEST_SECRET)
    app = create_app(settings, store=store, tokens=tokens)
    # ASGITransport does not run the lifespan; the store fixture already opened the DB
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


@pytest_asyncio.fixture
async def create_user(store):
    """
    Factory fixture to create users directly through the store.
    """

    async def _create_user(password: str = "UserPass!23", name: str = "Test User"):
        user = await store.create_user(
            f"{uuid.uuid4().hex[:8]}@example.com",
            hash_password(password),
            name,
        )
        return user, password

    return _create_user


@pytest_asyncio.fixture
async def auth_header_factory(client):
    """
    Helper fixture to obtain Authorization headers via the login endpoint.
    """

    async def _get_headers(email: str, password: str) -> dict[str, str]:
        resp = await client.post("/api/login", json={"email": email, "password": password})
        assert resp.status_code == 200, resp.text
        return {"Authorization": f"Bearer {resp.json()['token']}"}

    return _get_headers
