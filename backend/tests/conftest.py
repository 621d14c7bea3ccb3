import os

# must be set before battery_market.core.config builds its cached settings
os.environ.setdefault("MARKET_DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient

from battery_market.core.config import Settings
from battery_market.core.db import build_engine, make_session_factory
from battery_market.core.sessions import InMemorySessionStore
from battery_market.main import create_app

DEFAULT_PASSWORD = "secret123"


def _settings(**overrides) -> Settings:
    values = {"MARKET_DATABASE_URL": "sqlite://", "MARKET_ADMIN_USERNAME": None, "MARKET_ADMIN_PASSWORD": None}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings():
    return _settings()


@pytest.fixture
def db_engine():
    """Fresh in-memory SQLite database per test."""
    engine = build_engine("sqlite://")
    yield engine
    engine.dispose()


@pytest.fixture
def session_store():
    return InMemorySessionStore()


@pytest.fixture
def app(settings, db_engine, session_store):
    return create_app(settings=settings, engine=db_engine, session_store=session_store)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session(app):
    """Session on the same database the app under test uses (schema already created)."""
    session = make_session_factory(app.state.engine)()
    yield session
    session.close()


def auth(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def register(client):
    def _register(username, password=DEFAULT_PASSWORD, **profile):
        res = client.post("/api/register", json={"username": username, "password": password, **profile})
        assert res.status_code == 201, res.text
        body = res.json()
        body["headers"] = auth(body["token"])
        return body

    return _register


def battery_payload(user_id, **overrides):
    payload = {
        "userId": user_id,
        "title": "Home storage unit",
        "description": "Wall-mounted lithium battery",
        "price": "5000",
        "listingType": "sell",
        "batteryType": "new",
        "category": "residential",
        "technologyType": "LFP",
        "capacity": "10",
        "voltage": "48",
        "manufacturer": "LG",
        "location": "Bavaria",
        "country": "DE",
        "certifications": ["CE", "UL9540"],
        "images": [],
        "additionalSpecs": {"ipRating": "IP55"},
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def create_battery(client):
    def _create(user_id, **overrides):
        res = client.post("/api/batteries", json=battery_payload(user_id, **overrides))
        assert res.status_code == 201, res.text
        return res.json()

    return _create
