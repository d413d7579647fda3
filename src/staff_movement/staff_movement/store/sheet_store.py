from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Mapping, Optional, Sequence

import requests

from ..common import datetime_utils
from ..common.ids import new_movement_id, new_staff_id
from ..core.constants import DEFAULT_HTTP_TIMEOUT_SECONDS
from ..core.exceptions import StoreError
from ..movements.model import MovementRecord
from ..staff.model import StaffMember
from .codec import (
    build_movement,
    build_staff,
    movement_from_record,
    movement_to_record,
    staff_from_record,
    staff_to_record,
)
from .repository import RecordStore, status_frequency

logger = logging.getLogger(__name__)


class SheetApiRecordStore(RecordStore):
    """Record store behind a spreadsheet web-app endpoint.

    Reads are ``GET {url}?action=getStaff|getMovements`` returning a JSON list.
    Writes are ``POST {url}`` with a JSON body ``{"action": ..., "payload": ...}``.
    """

    def __init__(
        self,
        api_url: str,
        *,
        timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self._url = api_url
        self._timeout = timeout
        self._session = session or requests.Session()

    def _get_list(self, action: str) -> List[Mapping[str, Any]]:
        try:
            resp = self._session.get(self._url, params={"action": action}, timeout=self._timeout)
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            logger.error("Error fetching %s from record store: %s", action, e)
            return []
        if not isinstance(data, list):
            logger.warning("Record store returned %s for %s, expected a list", type(data).__name__, action)
            return []
        return [row for row in data if isinstance(row, Mapping)]

    def _post(self, action: str, payload: Dict[str, Any]) -> None:
        try:
            resp = self._session.post(
                self._url,
                json={"action": action, "payload": payload},
                timeout=self._timeout,
            )
            resp.raise_for_status()
        except requests.RequestException as e:
            raise StoreError(f"Record store rejected {action}: {e}") from e

    def list_staff(self) -> Sequence[StaffMember]:
        return [staff_from_record(r) for r in self._get_list("getStaff")]

    def list_movements(self) -> Sequence[MovementRecord]:
        return [movement_from_record(r) for r in self._get_list("getMovements")]

    def create_staff(self, fields: Mapping[str, Any]) -> StaffMember:
        staff = build_staff(fields, staff_id=new_staff_id())
        self._post("addStaff", staff_to_record(staff))
        return staff

    def update_staff(self, staff: StaffMember) -> None:
        self._post("updateStaff", staff_to_record(staff))

    def delete_staff(self, staff_id: str) -> None:
        self._post("deleteStaff", {"id": staff_id})

    def create_movement(self, fields: Mapping[str, Any], *, today: Optional[date] = None) -> MovementRecord:
        today = today or datetime_utils.today()
        movement = build_movement(
            fields,
            movement_id=new_movement_id(),
            status_frequency=status_frequency(str(fields.get("date_return") or ""), today),
        )
        self._post("addMovement", movement_to_record(movement))
        return movement

    def delete_movement(self, movement_id: str) -> None:
        self._post("deleteMovement", {"id": movement_id})
