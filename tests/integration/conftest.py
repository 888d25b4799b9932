"""Shared fixtures — the app wired to a throwaway SQLite database."""

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from articles_api.infrastructure.database import Database
from articles_api.main import create_app


@pytest_asyncio.fixture
async def database(tmp_path):
    database = Database(f"sqlite:///{tmp_path / 'articles.db'}")
    await database.create_all()
    yield database
    await database.dispose()


@pytest_asyncio.fixture
async def app(database):
    app = create_app()
    app.state.database = database
    return app


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
