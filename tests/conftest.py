"""
Shared fixtures.

The app is pointed at a throwaway SQLite file before anything under
``rental_manager`` is imported; every test that asks for ``client`` starts
from empty tables plus the seeded admin account.
"""
import os
import tempfile

_DB_DIR = tempfile.mkdtemp(prefix="rental-manager-tests-")
os.environ["DATABASE_PATH"] = os.path.join(_DB_DIR, "test.db")
os.environ["SIGNING_KEY"] = "test-signing-key-0123456789abcdefghijklmnop"
os.environ["ENVIRONMENT"] = "testing"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from rental_manager.core.bootstrap import bootstrap  # noqa: E402
from rental_manager.core.config import settings  # noqa: E402
from rental_manager.core.database import Base, engine  # noqa: E402
from rental_manager.main import app  # noqa: E402


@pytest.fixture
async def database():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await bootstrap()
    yield
    await engine.dispose()


@pytest.fixture
async def client(database):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def login(client):
    async def _login(email: str, password: str) -> dict:
        response = await client.post("/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _login


@pytest.fixture
async def admin_headers(login):
    return await login(settings.admin_email, settings.admin_password)


@pytest.fixture
def approved_user(client, login, admin_headers):
    """Factory: register, approve and log in a landlord. Returns auth headers."""

    async def _make(email: str, password: str = "landlord-pw") -> dict:
        response = await client.post("/register", json={"email": email, "password": password})
        assert response.status_code == 201, response.text

        pending = await client.get("/admin/users/pending", headers=admin_headers)
        user_id = next(u["id"] for u in pending.json()["users"] if u["email"] == email)
        approved = await client.post(f"/admin/users/{user_id}/approve", headers=admin_headers)
        assert approved.status_code == 200, approved.text

        return await login(email, password)

    return _make


@pytest.fixture
async def landlord(approved_user):
    return await approved_user("landlord@example.com")


@pytest.fixture
async def other_landlord(approved_user):
    return await approved_user("other@example.com")
