"""
Database access facade: generic load/save operations over SQL Server, MySQL and PostgreSQL.
"""

from .database import (
    BaseDatabaseAccess,
    DatabaseManager,
    IDatabaseAccess,
    MSSQLDatabaseAccess,
    MySQLDatabaseAccess,
    PostgreSQLDatabaseAccess,
    get_database_access,
)
from .exceptions import ConnectionTargetError, DataAccessError, UnknownBackendError

__all__ = [
    "IDatabaseAccess",
    "BaseDatabaseAccess",
    "MSSQLDatabaseAccess",
    "MySQLDatabaseAccess",
    "PostgreSQLDatabaseAccess",
    "DatabaseManager",
    "get_database_access",
    "DataAccessError",
    "ConnectionTargetError",
    "UnknownBackendError",
]
