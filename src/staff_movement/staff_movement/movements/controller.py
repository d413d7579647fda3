from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.serializers import history_row_to_dict, movement_list_row_to_dict, movement_to_dict
from ..common.web import admin_required, current_role, json_errors, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/movements/me", methods=["GET"], endpoint="my_movements")
    @login_required
    @json_errors
    def my_movements():
        rows = container.movement_service.history_for(session["staff_id"])
        return jsonify({"movements": [history_row_to_dict(r) for r in rows]})

    @app.route("/api/movements", methods=["POST"], endpoint="record_movement")
    @login_required
    @json_errors
    def record_movement():
        data = request.get_json(silent=True) or {}
        movement = container.movement_service.record_movement(
            actor_id=session["staff_id"],
            actor_role=current_role(),
            staff_id=data.get("staff_id"),
            date_out=data.get("date_out", ""),
            date_return=data.get("date_return", ""),
            time_out=data.get("time_out"),
            time_return=data.get("time_return"),
            location=data.get("location", ""),
            state=data.get("state", ""),
            purpose=data.get("purpose", ""),
        )
        # Show the new movement on the dashboard without waiting for the next tick.
        container.presence_board.refresh()
        return jsonify({"success": True, "movement": movement_to_dict(movement)}), 201

    @app.route("/api/admin/movements", methods=["GET"], endpoint="admin_list_movements")
    @admin_required
    @json_errors
    def admin_list_movements():
        rows = container.movement_service.list_all(current_role=current_role())
        return jsonify({"movements": [movement_list_row_to_dict(r) for r in rows]})

    @app.route("/api/admin/movements/<movement_id>", methods=["DELETE"], endpoint="admin_delete_movement")
    @admin_required
    @json_errors
    def admin_delete_movement(movement_id: str):
        container.movement_service.delete_movement(current_role=current_role(), movement_id=movement_id)
        container.presence_board.refresh()
        return jsonify({"success": True})
