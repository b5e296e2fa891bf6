"""
Database access facade: interface and shared implementation.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence, Type, TypeVar
from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool
from sqlalchemy.sql.elements import TextClause
from dataaccess.config import settings as app_settings
from dataaccess.logging.logger import get_logger
from .binding import bind_parameters, map_row, parameter_names
from .connection import mask_target, parse_connection_target

T = TypeVar("T")

logger = get_logger("database")


class IDatabaseAccess(ABC):
    """Load/save operations against a relational database, in blocking and suspending form."""

    @abstractmethod
    def load_many(
        self,
        sql: str,
        parameters: Any,
        connection_string: str,
        is_stored_procedure: bool = False,
        row_type: Type[T] = dict,
    ) -> List[T]:
        """Load all rows, in database order."""
        pass

    @abstractmethod
    async def load_many_async(
        self,
        sql: str,
        parameters: Any,
        connection_string: str,
        is_stored_procedure: bool = False,
        row_type: Type[T] = dict,
    ) -> List[T]:
        """Load all rows, in database order, without blocking the event loop."""
        pass

    @abstractmethod
    def load_one(
        self,
        sql: str,
        parameters: Any,
        connection_string: str,
        is_stored_procedure: bool = False,
        row_type: Type[T] = dict,
    ) -> Optional[T]:
        """Load the first row, or None when nothing matches."""
        pass

    @abstractmethod
    async def load_one_async(
        self,
        sql: str,
        parameters: Any,
        connection_string: str,
        is_stored_procedure: bool = False,
        row_type: Type[T] = dict,
    ) -> Optional[T]:
        """Load the first row, or None when nothing matches, without blocking the event loop."""
        pass

    @abstractmethod
    def save(
        self,
        sql: str,
        parameters: Any,
        connection_string: str,
        is_stored_procedure: bool = False,
    ) -> None:
        """Execute a write and commit it."""
        pass

    @abstractmethod
    async def save_async(
        self,
        sql: str,
        parameters: Any,
        connection_string: str,
        is_stored_procedure: bool = False,
    ) -> None:
        """Execute a write and commit it, without blocking the event loop."""
        pass


class BaseDatabaseAccess(IDatabaseAccess):
    """
    Stateless implementation shared by every backend.

    Each call builds a NullPool engine, opens exactly one connection, and disposes
    both before returning or raising. Errors are never caught here. Subclasses only
    name their drivers, frame stored procedure calls, and may add default URL
    query options.
    """

    backend: str = ""
    sync_driver: str = ""
    async_driver: str = ""

    def __init__(self, settings=None):
        self.settings = settings or app_settings

    # --- Backend hooks ---

    def default_query(self) -> Dict[str, str]:
        """URL query options applied when the connection target does not set them."""
        return {}

    def build_url(self, connection_string: str, is_async: bool = False) -> URL:
        """Bind a connection target to this backend's driver."""
        driver = self.async_driver if is_async else self.sync_driver
        return parse_connection_target(connection_string, driver, self.default_query())

    def make_engine(self, connection_string: str) -> Engine:
        return create_engine(
            self.build_url(connection_string),
            poolclass=NullPool,
            echo=self.settings.SQL_ECHO,
        )

    def make_async_engine(self, connection_string: str) -> AsyncEngine:
        return create_async_engine(
            self.build_url(connection_string, is_async=True),
            poolclass=NullPool,
            echo=self.settings.SQL_ECHO,
        )

    @abstractmethod
    def frame_procedure(self, name: str, parameter_names: Sequence[str], returns_rows: bool) -> str:
        """Statement text that calls stored routine ``name`` with the named bind parameters."""
        pass

    def build_statement(self, sql: str, bound, is_stored_procedure: bool, returns_rows: bool) -> TextClause:
        if is_stored_procedure:
            sql = self.frame_procedure(sql, parameter_names(bound), returns_rows)
        return text(sql)

    def _log_dispatch(self, operation: str, url: URL, is_stored_procedure: bool) -> None:
        logger.debug(
            f"{self.backend} {operation} -> {mask_target(url)} (stored_procedure={is_stored_procedure})"
        )

    # --- Blocking operations ---

    def _fetch(self, operation, sql, parameters, connection_string, is_stored_procedure, first_only):
        bound = bind_parameters(parameters)
        statement = self.build_statement(sql, bound, is_stored_procedure, returns_rows=True)
        engine = self.make_engine(connection_string)
        try:
            self._log_dispatch(operation, engine.url, is_stored_procedure)
            with engine.connect() as connection:
                result = connection.execute(statement, bound).mappings()
                if first_only:
                    row = result.first()
                    return [] if row is None else [row]
                return result.all()
        finally:
            engine.dispose()

    def load_many(self, sql, parameters, connection_string, is_stored_procedure=False, row_type=dict):
        rows = self._fetch("load_many", sql, parameters, connection_string, is_stored_procedure, False)
        return [map_row(row_type, row) for row in rows]

    def load_one(self, sql, parameters, connection_string, is_stored_procedure=False, row_type=dict):
        rows = self._fetch("load_one", sql, parameters, connection_string, is_stored_procedure, True)
        return map_row(row_type, rows[0]) if rows else None

    def save(self, sql, parameters, connection_string, is_stored_procedure=False):
        bound = bind_parameters(parameters, allow_many=True)
        # empty batch: nothing to execute
        if bound == []:
            return
        statement = self.build_statement(sql, bound, is_stored_procedure, returns_rows=False)
        engine = self.make_engine(connection_string)
        try:
            self._log_dispatch("save", engine.url, is_stored_procedure)
            with engine.begin() as connection:
                connection.execute(statement, bound)
        finally:
            engine.dispose()

    # --- Suspending operations ---

    async def _fetch_async(self, operation, sql, parameters, connection_string, is_stored_procedure, first_only):
        bound = bind_parameters(parameters)
        statement = self.build_statement(sql, bound, is_stored_procedure, returns_rows=True)
        engine = self.make_async_engine(connection_string)
        try:
            self._log_dispatch(operation, engine.url, is_stored_procedure)
            async with engine.connect() as connection:
                result = (await connection.execute(statement, bound)).mappings()
                if first_only:
                    row = result.first()
                    return [] if row is None else [row]
                return result.all()
        finally:
            await engine.dispose()

    async def load_many_async(self, sql, parameters, connection_string, is_stored_procedure=False, row_type=dict):
        rows = await self._fetch_async("load_many_async", sql, parameters, connection_string, is_stored_procedure, False)
        return [map_row(row_type, row) for row in rows]

    async def load_one_async(self, sql, parameters, connection_string, is_stored_procedure=False, row_type=dict):
        rows = await self._fetch_async("load_one_async", sql, parameters, connection_string, is_stored_procedure, True)
        return map_row(row_type, rows[0]) if rows else None

    async def save_async(self, sql, parameters, connection_string, is_stored_procedure=False):
        bound = bind_parameters(parameters, allow_many=True)
        # empty batch: nothing to execute
        if bound == []:
            return
        statement = self.build_statement(sql, bound, is_stored_procedure, returns_rows=False)
        engine = self.make_async_engine(connection_string)
        try:
            self._log_dispatch("save_async", engine.url, is_stored_procedure)
            async with engine.begin() as connection:
                await connection.execute(statement, bound)
        finally:
            await engine.dispose()
