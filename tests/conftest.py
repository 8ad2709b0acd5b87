# tests/conftest.py
import pytest
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient

from donation_api.core.config import Settings
from donation_api.core.errors import StoreError
from donation_api.core.sessions import SessionRegistry
from donation_api.deps import get_repo, get_sessions
from donation_api.main import create_app
from donation_api.repos import InMemoryDonationRepo

SAMPLE_DONATION = {
    "firstName": "A",
    "lastName": "B",
    "email": "a@b.com",
    "address": "X",
    "country": "Y",
    "amount": 10,
    "cardNumber": "4111",
    "cardExpiry": "12/30",
    "cardCvc": "123",
}


class BrokenRepo:
    """Repository whose every store call fails."""

    async def ping(self):
        raise StoreError("store unreachable")

    async def ensure_indexes(self):
        raise StoreError("store unreachable")

    async def insert_donation(self, record):
        raise StoreError("insert failed")

    async def list_donations(self):
        raise StoreError("find failed")


@pytest.fixture(scope="session")
def anyio_backend():
    # keep AnyIO on asyncio for the whole test session
    return "asyncio"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        admin_password="secret",
        use_mongo=False,
        static_dir=str(tmp_path / "no-static"),
    )


@pytest.fixture
def repo():
    return InMemoryDonationRepo()


@pytest.fixture
def sessions():
    return SessionRegistry()


def build_app(settings, repo, sessions):
    app = create_app(settings)
    app.dependency_overrides[get_repo] = lambda: repo
    app.dependency_overrides[get_sessions] = lambda: sessions
    return app


@pytest.fixture
async def test_client(settings, repo, sessions):
    app = build_app(settings, repo, sessions)
    async with LifespanManager(app):
        transport = ASGITransport(app=app, raise_app_exceptions=True)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac


async def login(ac: AsyncClient, password: str = "secret") -> dict:
    r = await ac.post("/api/admin/login", json={"password": password})
    assert r.status_code == 200, r.text
    return {"Authorization": f"Bearer {r.json()['token']}"}
