"""
Database access facade: one interface, one adapter per engine.
"""

from .base import BaseDatabaseAccess, IDatabaseAccess
from .manager import DatabaseManager, get_database_access
from .mssql_driver import MSSQLDatabaseAccess
from .mysql_driver import MySQLDatabaseAccess
from .postgresql_driver import PostgreSQLDatabaseAccess

__all__ = [
    "IDatabaseAccess",
    "BaseDatabaseAccess",
    "MSSQLDatabaseAccess",
    "MySQLDatabaseAccess",
    "PostgreSQLDatabaseAccess",
    "DatabaseManager",
    "get_database_access",
]
