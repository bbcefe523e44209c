"""API test fixtures — seeded in-memory inventory + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the inventario table
    - The app under test receives its pool explicitly via app.state.db_manager
    - ASGITransport does not run the lifespan, so no real database is touched

Design Decisions:
    - raise_app_exceptions=False: the catch-all handler's 500 is returned to
      the client instead of re-raised into the test
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import create_async_engine

from joyas_api.db.base import Base
from joyas_api.infrastructure.database import DatabaseSessionManager
from joyas_api.main import create_app
from joyas_api.models.inventory_item import InventoryItem

SEED_ROWS = [
    {"id": 1, "nombre": "Collar Heart", "categoria": "collar", "metal": "oro", "precio": 20000, "stock": 2},
    {"id": 2, "nombre": "Collar History", "categoria": "collar", "metal": "plata", "precio": 15000, "stock": 5},
    {"id": 3, "nombre": "Aros Berry", "categoria": "aros", "metal": "oro", "precio": 12000, "stock": 10},
    {"id": 4, "nombre": "Aros Hook Blue", "categoria": "aros", "metal": "oro", "precio": 25000, "stock": 4},
    {"id": 5, "nombre": "Anillo Wish", "categoria": "aros", "metal": "plata", "precio": 30000, "stock": 4},
    {"id": 6, "nombre": "Anillo Cuarzo Greece", "categoria": "anillo", "metal": "oro", "precio": 40000, "stock": 2},
    {"id": 7, "nombre": "Anillo Simple", "categoria": "anillo", "metal": "plata", "precio": 300, "stock": 8},
    {"id": 8, "nombre": "Anillo Cobre", "categoria": "anillo", "metal": "cobre", "precio": 450, "stock": 3},
    {"id": 9, "nombre": "Collar Cobre", "categoria": "collar", "metal": "cobre", "precio": 200, "stock": 6},
    {"id": 10, "nombre": "Anillo Lujo", "categoria": "anillo", "metal": "oro", "precio": 600, "stock": 1},
]


class FailingDatabase:
    """Stand-in pool whose every statement fails with internal detail."""

    def __init__(self):
        self.calls = 0

    async def fetch_all(self, sql, params=None):
        self.calls += 1
        raise RuntimeError("relation inventario: secret internal detail")

    async def health_check(self):
        return False


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        await conn.execute(insert(InventoryItem.__table__), SEED_ROWS)
    yield engine
    await engine.dispose()


@pytest.fixture
def db_manager(test_engine):
    return DatabaseSessionManager(test_engine)


@pytest.fixture
def test_app(db_manager):
    app = create_app()
    app.state.db_manager = db_manager
    return app


async def _client_for(app):
    return AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    )


@pytest.fixture
async def client(test_app):
    async with await _client_for(test_app) as c:
        yield c


@pytest.fixture
def failing_db():
    return FailingDatabase()


@pytest.fixture
async def failing_client(failing_db):
    """Client whose pool raises on every statement."""
    app = create_app()
    app.state.db_manager = failing_db
    async with await _client_for(app) as c:
        yield c
