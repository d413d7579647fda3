from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import mysql.connector

from ..common.ids import new_staff_id
from ..core.enums import PresenceStatus, Role
from .connection import DBConfig

logger = logging.getLogger(__name__)


def _iter_statements(sql: str) -> Iterable[str]:
    # schema.sql holds plain DDL only: no ';' inside literals.
    lines = [line for line in sql.splitlines() if not line.lstrip().startswith("--")]
    for stmt in "\n".join(lines).split(";"):
        stmt = stmt.strip()
        if stmt:
            yield stmt


def _connect(target: DBConfig, *, with_database: bool = True):
    kwargs = dict(host=target.host, port=target.port, user=target.user, password=target.password, use_pure=True)
    if with_database:
        kwargs["database"] = target.database
    return mysql.connector.connect(**kwargs)


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = _connect(target, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    """Create the database and tables if missing (idempotent)."""
    ensure_database_exists(db_config)
    target = DBConfig.from_dict(db_config)
    sql = Path(schema_path).read_text(encoding="utf-8")

    conn = _connect(target)
    try:
        cur = conn.cursor()
        for stmt in _iter_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("Schema applied to %s@%s/%s", target.user, target.host, target.database)


def ensure_admin_account(db_config: dict, *, username: str, password: str, name: str = "Administrator") -> bool:
    """Insert an admin staff record unless that username already exists.

    Returns True when a new account was created.
    """
    target = DBConfig.from_dict(db_config)
    conn = _connect(target)
    try:
        cur = conn.cursor()
        cur.execute("SELECT staff_id FROM staff WHERE LOWER(username)=LOWER(%s)", (username,))
        if cur.fetchone():
            return False
        cur.execute(
            """
            INSERT INTO staff(staff_id, name, position, username, password, role, current_status)
            VALUES(%s,%s,%s,%s,%s,%s,%s)
            """,
            (new_staff_id(), name, "Administrator", username, password, Role.ADMIN.value, PresenceStatus.IN_OFFICE.value),
        )
        conn.commit()
    finally:
        conn.close()
    logger.info("Created admin account %r", username)
    return True
