from typing import Sequence
from .base import BaseDatabaseAccess

class MySQLDatabaseAccess(BaseDatabaseAccess):
    """MySQL backend (pymysql / aiomysql)."""

    backend = "mysql"
    sync_driver = "mysql+pymysql"
    async_driver = "mysql+aiomysql"

    def frame_procedure(self, name: str, parameter_names: Sequence[str], returns_rows: bool) -> str:
        # CALL arguments are positional; payload order decides the mapping
        args = ", ".join(f":{p}" for p in parameter_names)
        return f"CALL {name}({args})"
