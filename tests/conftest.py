import asyncio
import os

# keep the app's own engine off the developer database during tests
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from ecoevents.database import get_db, init_models
from ecoevents.main import app


@pytest.fixture
def test_engine(tmp_path):
    """Fresh SQLite file per test; NullPool so no connection outlives its event loop."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)
    asyncio.run(init_models(engine))
    yield engine
    asyncio.run(engine.dispose())


@pytest.fixture
def session_factory(test_engine):
    return async_sessionmaker(test_engine, expire_on_commit=False)


@pytest.fixture
def run_db(session_factory):
    """Run ``operation(session)`` to completion and return its result."""

    def _run(operation):
        async def _wrapped():
            async with session_factory() as session:
                return await operation(session)

        return asyncio.run(_wrapped())

    return _run


@pytest.fixture
def client(session_factory):
    """Test client whose requests use the per-test database"""

    async def get_test_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = get_test_db
    yield TestClient(app)
    app.dependency_overrides = {}


@pytest.fixture
def valid_event_data():
    return {
        "name": "Taller de Compostaje Urbano",
        "description": "Aprende a crear tu propio compost en casa.",
        "date": "2025-06-14",
        "time": "10:30",
        "venue": "Parque Central, Madrid",
        "activity_type": "Taller",
        "organizer": "EcoMadrid",
        "max_capacity": 25,
    }


@pytest.fixture
def create_event(client, valid_event_data):
    def _create(**overrides):
        response = client.post("/events", json={**valid_event_data, **overrides})
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_faq(client):
    counter = {"n": 0}

    def _create(**overrides):
        counter["n"] += 1
        payload = {
            "question": f"¿Pregunta de prueba {counter['n']}?",
            "answer": f"Respuesta de prueba {counter['n']}.",
            "category": "General",
        }
        payload.update(overrides)
        response = client.post("/faqs", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_comment(client):
    def _create(event_id, content="¡Tengo muchas ganas de ir!", **extra):
        response = client.post("/comments", json={"event_id": event_id, "content": content, **extra})
        assert response.status_code == 201, response.text
        return response.json()

    return _create
