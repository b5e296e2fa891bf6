from typing import Sequence
from .base import BaseDatabaseAccess

class PostgreSQLDatabaseAccess(BaseDatabaseAccess):
    """PostgreSQL backend (psycopg2 / asyncpg)."""

    backend = "postgresql"
    sync_driver = "postgresql+psycopg2"
    async_driver = "postgresql+asyncpg"

    def frame_procedure(self, name: str, parameter_names: Sequence[str], returns_rows: bool) -> str:
        args = ", ".join(f"{p} => :{p}" for p in parameter_names)
        # Row-returning routines are functions; writes go through CALL
        if returns_rows:
            return f"SELECT * FROM {name}({args})"
        return f"CALL {name}({args})"
