"""Database Session Manager — verifies error mapping, rollback and health check."""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError

from bankapi.core.errors import DatabaseError
from bankapi.infrastructure import database
from bankapi.infrastructure.database import DatabaseSessionManager, get_db, init_db


@pytest.fixture
async def manager():
    m = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    yield m
    await m.dispose()


async def test_health_check_true_for_reachable_db(manager):
    assert await manager.health_check() is True


@pytest.mark.parametrize(
    ("raised", "operation"),
    [
        (IntegrityError("stmt", {}, Exception("dup")), "commit"),
        (OperationalError("stmt", {}, Exception("down")), "execute"),
        (SQLAlchemyError("generic"), "unknown"),
    ],
)
async def test_sqlalchemy_errors_mapped_to_database_error(manager, raised, operation):
    with pytest.raises(DatabaseError) as info:
        async with manager.session():
            raise raised

    assert info.value.operation == operation
    assert info.value.http_status == 500


async def test_non_database_errors_propagate_unchanged(manager):
    with pytest.raises(ValueError):
        async with manager.session():
            raise ValueError("not a db error")


async def test_get_db_requires_initialization(monkeypatch):
    monkeypatch.setattr(database, "db_manager", None)

    with pytest.raises(RuntimeError, match="not initialized"):
        await get_db().__anext__()


async def test_init_db_sets_singleton(monkeypatch):
    monkeypatch.setattr(database, "db_manager", None)

    manager = init_db("sqlite+aiosqlite:///:memory:", pool_size=5, max_overflow=1)

    assert database.db_manager is manager
    await database.close_db()
    assert database.db_manager is None
