from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.serializers import movement_to_dict, staff_to_dict
from ..common.web import json_errors, login_required
from ..container import Container
from .service import PresenceReport


def _report_to_dict(report: PresenceReport) -> dict:
    return {
        "date": report.query_date.isoformat(),
        "in_count": report.in_count,
        "out_count": report.out_count,
        "staff": [
            {
                **staff_to_dict(r.staff),
                "status": r.status.value,
                "movement": movement_to_dict(r.matched_movement) if r.matched_movement else None,
            }
            for r in report.rows
        ],
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", endpoint="dashboard")
    @login_required
    @json_errors
    def dashboard():
        snap = container.presence_board.snapshot()
        if snap.is_empty:
            snap = container.presence_board.refresh()
        staff = [staff_to_dict(s) for s in snap.staff]
        out = sum(1 for s in staff if s["current_status"] == "OUT_OF_OFFICE")
        return jsonify(
            {
                "as_of": snap.as_of.isoformat() if snap.as_of else None,
                "refreshed_at": snap.refreshed_at.isoformat(timespec="seconds") if snap.refreshed_at else None,
                "staff": staff,
                "out_count": out,
                "in_count": len(staff) - out,
            }
        )

    @app.route("/api/refresh", methods=["POST"], endpoint="refresh")
    @login_required
    @json_errors
    def refresh():
        snap = container.presence_board.refresh()
        return jsonify({"success": True, "staff_count": len(snap.staff), "movement_count": len(snap.movements)})

    @app.route("/api/presence", endpoint="presence")
    @login_required
    @json_errors
    def presence():
        report = container.presence_service.status_on(request.args.get("date"), search_term=request.args.get("q", ""))
        return jsonify(_report_to_dict(report))
