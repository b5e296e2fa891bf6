"""Test config and shared fixtures."""
import pytest
from typing import Sequence
from sqlalchemy import create_engine, event, text

from dataaccess.database.base import BaseDatabaseAccess
from dataaccess.database.manager import DatabaseManager


class SQLiteDatabaseAccess(BaseDatabaseAccess):
    """
    File-backed SQLite adapter for tests.

    Runs the shared BaseDatabaseAccess code path end to end and counts every
    DBAPI connection opened and closed by the engines it builds.
    """

    backend = "sqlite"
    sync_driver = "sqlite"
    async_driver = "sqlite+aiosqlite"

    def __init__(self, settings=None):
        super().__init__(settings)
        self.opened = 0
        self.closed = 0

    def _on_connect(self, dbapi_connection, connection_record):
        self.opened += 1

    def _on_close(self, dbapi_connection, connection_record):
        self.closed += 1

    def _track(self, engine):
        event.listen(engine, "connect", self._on_connect)
        event.listen(engine, "close", self._on_close)
        return engine

    def make_engine(self, connection_string):
        return self._track(super().make_engine(connection_string))

    def make_async_engine(self, connection_string):
        engine = super().make_async_engine(connection_string)
        self._track(engine.sync_engine)
        return engine

    def frame_procedure(self, name: str, parameter_names: Sequence[str], returns_rows: bool) -> str:
        # SQLite has no stored routines; the statement reaches the engine and fails there
        args = ", ".join(f":{p}" for p in parameter_names)
        return f"CALL {name}({args})"


@pytest.fixture
def sqlite_target(tmp_path) -> str:
    """Create a SQLite database seeded with a single users row (7, 'Ada')."""
    target = f"sqlite:///{tmp_path / 'dataaccess.db'}"
    engine = create_engine(target)
    with engine.begin() as conn:
        conn.execute(text("CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT NOT NULL)"))
        conn.execute(text("INSERT INTO users (id, name) VALUES (7, 'Ada')"))
    engine.dispose()
    return target


@pytest.fixture
def db() -> SQLiteDatabaseAccess:
    """Return a fresh SQLite adapter."""
    return SQLiteDatabaseAccess()


@pytest.fixture(autouse=True)
def reset_database_manager():
    """Drop the process-wide manager between tests."""
    DatabaseManager.reset_instance()
    yield
    DatabaseManager.reset_instance()
