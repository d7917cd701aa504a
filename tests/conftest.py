"""
Shared fixtures: an app wired to a throwaway SQLite database and an
httpx client talking to it in-process.
"""

import httpx
import pytest
import pytest_asyncio

from config.settings import Settings
from database.session import init_db
from main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        jwt_secret="test-secret",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'tasks.db'}",
        bcrypt_rounds=4,
    )


@pytest_asyncio.fixture
async def app(settings):
    app = create_app(settings)
    await init_db(app.state.context.engine)
    yield app
    await app.state.context.engine.dispose()


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def signup_and_login(client):
    """Helper: create an account and return its token."""

    async def _signup_and_login(email: str, password: str = "p", name: str = "A") -> str:
        resp = await client.post(
            "/signup", json={"name": name, "email": email, "password": password}
        )
        assert resp.status_code == 200, resp.text
        resp = await client.post("/login", json={"email": email, "password": password})
        assert resp.status_code == 200, resp.text
        return resp.json()["token"]

    return _signup_and_login
