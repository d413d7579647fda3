from __future__ import annotations

import logging
from datetime import date
from typing import Any, Mapping, Optional, Sequence

import mysql.connector

from ..common import datetime_utils
from ..common.ids import new_movement_id, new_staff_id
from ..core.exceptions import StoreError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_time
from ..movements.model import MovementRecord
from ..staff.model import StaffMember
from .codec import build_movement, build_staff, movement_from_record, staff_from_record
from .repository import RecordStore, status_frequency

logger = logging.getLogger(__name__)


class MySQLRecordStore(RecordStore):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_staff(self) -> Sequence[StaffMember]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    SELECT staff_id AS id, name, position, username, password, role,
                           current_status AS currentStatus
                    FROM staff
                    ORDER BY name
                    """
                )
                rows = fetchall(cur)
        except mysql.connector.Error as e:
            logger.error("Error fetching staff: %s", e)
            return []
        return [staff_from_record(r) for r in rows]

    def list_movements(self) -> Sequence[MovementRecord]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    SELECT movement_id AS id, staff_id AS staffId, date_out AS dateOut,
                           date_return AS dateReturn, time_out, time_return,
                           location, state, purpose, status_frequency AS statusFrequency
                    FROM movements
                    ORDER BY created_at
                    """
                )
                rows = fetchall(cur)
        except mysql.connector.Error as e:
            logger.error("Error fetching movements: %s", e)
            return []
        out = []
        for r in rows:
            r["timeOut"] = normalize_mysql_time(r.pop("time_out", None))
            r["timeReturn"] = normalize_mysql_time(r.pop("time_return", None))
            out.append(movement_from_record(r))
        return out

    def create_staff(self, fields: Mapping[str, Any]) -> StaffMember:
        staff = build_staff(fields, staff_id=new_staff_id())
        self._write(
            "create staff",
            """
            INSERT INTO staff(staff_id, name, position, username, password, role, current_status)
            VALUES(%s,%s,%s,%s,%s,%s,%s)
            """,
            (
                staff.staff_id,
                staff.name,
                staff.position,
                staff.username,
                staff.password,
                staff.role.value,
                staff.current_status.value,
            ),
        )
        return staff

    def update_staff(self, staff: StaffMember) -> None:
        self._write(
            "update staff",
            """
            INSERT INTO staff(staff_id, name, position, username, password, role, current_status)
            VALUES(%s,%s,%s,%s,%s,%s,%s)
            ON DUPLICATE KEY UPDATE
                name=VALUES(name), position=VALUES(position), username=VALUES(username),
                password=VALUES(password), role=VALUES(role), current_status=VALUES(current_status)
            """,
            (
                staff.staff_id,
                staff.name,
                staff.position,
                staff.username,
                staff.password,
                staff.role.value,
                staff.current_status.value,
            ),
        )

    def delete_staff(self, staff_id: str) -> None:
        self._write("delete staff", "DELETE FROM staff WHERE staff_id=%s", (staff_id,))

    def create_movement(self, fields: Mapping[str, Any], *, today: Optional[date] = None) -> MovementRecord:
        today = today or datetime_utils.today()
        movement = build_movement(
            fields,
            movement_id=new_movement_id(),
            status_frequency=status_frequency(str(fields.get("date_return") or ""), today),
        )
        self._write(
            "create movement",
            """
            INSERT INTO movements(movement_id, staff_id, date_out, date_return, time_out, time_return,
                                  location, state, purpose, status_frequency)
            VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
            """,
            (
                movement.movement_id,
                movement.staff_id,
                movement.date_out,
                movement.date_return,
                movement.time_out,
                movement.time_return,
                movement.location,
                movement.state,
                movement.purpose,
                movement.status_frequency.value if movement.status_frequency else None,
            ),
        )
        return movement

    def delete_movement(self, movement_id: str) -> None:
        self._write("delete movement", "DELETE FROM movements WHERE movement_id=%s", (movement_id,))

    def _write(self, what: str, sql: str, params: tuple) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(sql, params)
        except mysql.connector.Error as e:
            raise StoreError(f"Failed to {what}: {e}") from e
