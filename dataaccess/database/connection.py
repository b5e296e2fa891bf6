"""
Connection target parsing.

A connection target is either a URL (``mysql://user:pw@host:3306/db``) or a
semicolon-delimited ``key=value`` connection string
(``Server=host,1433;Database=db;User Id=sa;Password=pw``). Both are turned into
a SQLAlchemy ``URL`` whose driver is chosen by the adapter, not the caller.
"""

from typing import Dict, List, Optional, Tuple
from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import ArgumentError
from dataaccess.exceptions import ConnectionTargetError

_HOST_KEYS = {"server", "host", "data source", "address", "addr"}
_PORT_KEYS = {"port"}
_DATABASE_KEYS = {"database", "initial catalog", "dbname"}
_USER_KEYS = {"user id", "uid", "user", "username"}
_PASSWORD_KEYS = {"password", "pwd"}


def parse_connection_target(
    target: str,
    drivername: str,
    default_query: Optional[Dict[str, str]] = None,
) -> URL:
    """
    Build a URL for ``drivername`` from a connection target.

    Args:
        target: URL or key=value connection string
        drivername: SQLAlchemy dialect+driver, e.g. ``mysql+pymysql``
        default_query: query options added when the target does not set them

    Returns:
        URL bound to ``drivername``

    Raises:
        ConnectionTargetError: target is empty or malformed
    """
    if not target or not target.strip():
        raise ConnectionTargetError("Connection target is required")

    target = target.strip()
    if "://" in target:
        try:
            url = make_url(target)
        except (ArgumentError, ValueError) as e:
            raise ConnectionTargetError("Could not parse connection URL", detail=str(e)) from e
        url = url.set(drivername=drivername)
    else:
        url = _from_key_value(target, drivername)

    if default_query:
        missing = {k: v for k, v in default_query.items() if k not in url.query}
        if missing:
            url = url.update_query_dict(missing)
    return url


def _from_key_value(target: str, drivername: str) -> URL:
    host = port = database = username = password = None
    query = {}

    for part in _split_segments(target):
        if not part.strip():
            continue
        if "=" not in part:
            raise ConnectionTargetError(f"Malformed connection string segment: {part.strip()!r}")
        key, value = part.split("=", 1)
        key = " ".join(key.lower().split())
        value = _unquote(value.strip())

        if key in _HOST_KEYS:
            host, embedded_port = _split_host(value)
            port = port or embedded_port
        elif key in _PORT_KEYS:
            port = _to_port(value)
        elif key in _DATABASE_KEYS:
            database = value
        elif key in _USER_KEYS:
            username = value
        elif key in _PASSWORD_KEYS:
            password = value
        else:
            query[key.replace(" ", "_")] = value

    if not host:
        raise ConnectionTargetError("Connection string does not name a server")

    return URL.create(
        drivername,
        username=username,
        password=password,
        host=host,
        port=port,
        database=database,
        query=query,
    )


def _split_host(value: str) -> Tuple[str, Optional[int]]:
    # SQL Server style "host,1433" or "host:3306"; "tcp:" prefixes are dropped
    if value.lower().startswith("tcp:"):
        value = value[4:]
    for sep in (",", ":"):
        if sep in value:
            host, port = value.rsplit(sep, 1)
            return host.strip(), _to_port(port)
    return value, None


def _to_port(value: str) -> int:
    try:
        return int(value.strip())
    except ValueError:
        raise ConnectionTargetError(f"Invalid port: {value!r}") from None


def mask_target(url: URL) -> str:
    """Render a URL for log lines with the password hidden."""
    return url.render_as_string(hide_password=True)


def _split_segments(target: str) -> List[str]:
    # Semicolons inside "quoted", 'quoted' or {braced} values do not split
    segments = []
    current = []
    closing = None
    i = 0
    while i < len(target):
        ch = target[i]
        if closing:
            current.append(ch)
            if ch == closing:
                if target[i + 1:i + 2] == closing:
                    current.append(closing)
                    i += 1
                else:
                    closing = None
        elif ch in "\"'{" and "".join(current).rstrip().endswith("="):
            closing = "}" if ch == "{" else ch
            current.append(ch)
        elif ch == ";":
            segments.append("".join(current))
            current = []
        else:
            current.append(ch)
        i += 1

    if closing:
        raise ConnectionTargetError("Unterminated quoted value in connection string")
    segments.append("".join(current))
    return segments


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == "{" and value[-1] == "}":
        return value[1:-1].replace("}}", "}")
    if len(value) >= 2 and value[0] in "\"'" and value[-1] == value[0]:
        return value[1:-1].replace(value[0] * 2, value[0])
    return value
