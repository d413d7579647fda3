from __future__ import annotations

from contextlib import contextmanager
from datetime import time, timedelta
from typing import Any, Dict, List, Optional

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def normalize_mysql_time(value: Any) -> Optional[str]:
    """Render MySQL TIME values as ``HH:MM`` across connector implementations.

    mysql-connector can return TIME as:
    - datetime.time
    - datetime.timedelta
    - string (e.g. '08:30:00')
    """

    if value is None:
        return None

    if isinstance(value, time):
        return value.strftime("%H:%M")

    if isinstance(value, timedelta):
        total_seconds = int(value.total_seconds()) % 86400
        return f"{total_seconds // 3600:02d}:{(total_seconds % 3600) // 60:02d}"

    if isinstance(value, str):
        parts = value.strip().split(":")
        if len(parts) < 2:
            return None
        return f"{int(parts[0]):02d}:{int(parts[1]):02d}"

    raise TypeError(f"Unsupported MySQL TIME value type: {type(value)!r}")
