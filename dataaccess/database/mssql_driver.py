from typing import Dict, Sequence
from .base import BaseDatabaseAccess

class MSSQLDatabaseAccess(BaseDatabaseAccess):
    """SQL Server backend (pyodbc / aioodbc)."""

    backend = "mssql"
    sync_driver = "mssql+pyodbc"
    async_driver = "mssql+aioodbc"

    def default_query(self) -> Dict[str, str]:
        # pyodbc ignores every other query option when odbc_connect is given
        return {"driver": self.settings.MSSQL_ODBC_DRIVER}

    def frame_procedure(self, name: str, parameter_names: Sequence[str], returns_rows: bool) -> str:
        args = ", ".join(f"@{p} = :{p}" for p in parameter_names)
        return f"EXEC {name} {args}" if args else f"EXEC {name}"
