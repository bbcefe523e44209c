"""App lifespan — pool built at startup, ready line logged, pool disposed on shutdown."""

import logging

import pytest

from joyas_api.config import Settings
from joyas_api.infrastructure.database import DatabaseSessionManager
from joyas_api.infrastructure.observability import HANDLER_NAME
from joyas_api.main import create_app


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        port=4321,
        log_format="text",
    )


@pytest.fixture(autouse=True)
def restore_root_logging():
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler.get_name() == HANDLER_NAME:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def disposed(monkeypatch):
    calls = []
    original = DatabaseSessionManager.dispose

    async def recording_dispose(self):
        calls.append(self)
        await original(self)

    monkeypatch.setattr(DatabaseSessionManager, "dispose", recording_dispose)
    return calls


async def test_startup_builds_pool_and_logs_ready_line(settings, disposed, caplog):
    app = create_app(settings)
    with caplog.at_level(logging.INFO, logger="joyas_api.main"):
        async with app.router.lifespan_context(app):
            db = app.state.db_manager
            assert isinstance(db, DatabaseSessionManager)
            assert await db.health_check() is True
            assert disposed == []

    messages = [r.getMessage() for r in caplog.records if r.name == "joyas_api.main"]
    assert "Servidor corriendo en el puerto 4321" in messages
    assert disposed == [db]


async def test_repeated_startup_keeps_a_single_log_handler(settings, disposed):
    app = create_app(settings)
    for _ in range(2):
        async with app.router.lifespan_context(app):
            pass

    ours = [h for h in logging.getLogger().handlers if h.get_name() == HANDLER_NAME]
    assert len(ours) == 1
    assert len(disposed) == 2
