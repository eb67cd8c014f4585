"""Pytest configuration and fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from hoopstats.core.config import Settings
from hoopstats.db.session import init_models
from hoopstats.main import create_app

# In-memory store, one per test
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
def test_settings():
    return Settings(DATABASE_URL=TEST_DATABASE_URL, SERVE_UI=False)


@pytest.fixture
async def test_app(test_settings):
    """App with its own store and all tables created."""
    app = create_app(test_settings)
    await init_models(app.state.engine)

    yield app

    await app.state.engine.dispose()


@pytest.fixture
async def client(test_app):
    async with AsyncClient(
        transport=ASGITransport(app=test_app), base_url="http://test"
    ) as client:
        yield client


@pytest.fixture
async def test_session(test_app):
    """Session on the same per-test store, for query layer tests."""
    async with test_app.state.sessionmaker() as session:
        yield session


@pytest.fixture
def sample_player():
    return {
        "name": "A. Player",
        "team": "Boston Celtics",
        "points_per_game": 20,
        "assists_per_game": 5,
        "rebounds_per_game": 7,
    }


@pytest.fixture
async def roster(client):
    """Three players on two teams, returns their ids by name."""
    players = [
        {"name": "LeBron James", "team": "Los Angeles Lakers", "points_per_game": 25},
        {"name": "Luka Doncic", "team": "Dallas Mavericks", "points_per_game": 33},
        {"name": "Jaylen Brown", "team": "Boston Celtics", "points_per_game": 23},
    ]
    ids = {}
    for player in players:
        response = await client.post("/players/add", json=player)
        ids[player["name"]] = response.json()["id"]
    return ids
