from typing import Dict, Optional, Type
from dataaccess.exceptions import UnknownBackendError
from .base import BaseDatabaseAccess
from .mssql_driver import MSSQLDatabaseAccess
from .mysql_driver import MySQLDatabaseAccess
from .postgresql_driver import PostgreSQLDatabaseAccess

_ALIASES = {
    "sqlserver": "mssql",
    "mariadb": "mysql",
    "postgres": "postgresql",
    "pg": "postgresql",
}


class DatabaseManager:
    """Registry of backend adapters; adapters are stateless so one instance per backend is reused."""
    _instance = None

    def __init__(self, settings):
        self.settings = settings
        self._backends: Dict[str, Type[BaseDatabaseAccess]] = {}
        self._adapters: Dict[str, BaseDatabaseAccess] = {}
        self.register("mssql", MSSQLDatabaseAccess)
        self.register("mysql", MySQLDatabaseAccess)
        self.register("postgresql", PostgreSQLDatabaseAccess)

    @classmethod
    def get_instance(cls, settings=None):
        if cls._instance is None:
            if settings is None:
                from dataaccess.config import settings as app_settings
                settings = app_settings
            cls._instance = cls(settings)
        return cls._instance

    @classmethod
    def reset_instance(cls):
        cls._instance = None

    @staticmethod
    def _normalize(backend: str) -> str:
        name = backend.strip().lower()
        return _ALIASES.get(name, name)

    def register(self, backend: str, adapter_class: Type[BaseDatabaseAccess]) -> None:
        """Register (or replace) the adapter class for a backend name."""
        name = self._normalize(backend)
        self._backends[name] = adapter_class
        self._adapters.pop(name, None)

    @property
    def backends(self):
        return sorted(self._backends)

    def get(self, backend: Optional[str] = None) -> BaseDatabaseAccess:
        """Return the adapter for ``backend``, or for DEFAULT_BACKEND when omitted."""
        name = self._normalize(backend or self.settings.DEFAULT_BACKEND)
        if name not in self._backends:
            raise UnknownBackendError(backend or name, available=self._backends)
        if name not in self._adapters:
            self._adapters[name] = self._backends[name](self.settings)
        return self._adapters[name]


def get_database_access(backend: Optional[str] = None) -> BaseDatabaseAccess:
    """Shortcut for DatabaseManager.get_instance().get(backend)."""
    return DatabaseManager.get_instance().get(backend)
