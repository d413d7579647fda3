from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.serializers import history_row_to_dict, staff_to_dict
from ..common.web import admin_required, current_role, json_errors, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    @json_errors
    def login():
        data = request.get_json(silent=True) or {}
        s_user = container.auth_service.authenticate(data.get("username", ""), data.get("password", ""))

        session.clear()
        session.permanent = bool(data.get("remember_me"))
        session["staff_id"] = s_user.staff_id
        session["name"] = s_user.name
        session["role"] = s_user.role.value

        return jsonify({"success": True, "user": {"id": s_user.staff_id, "name": s_user.name, "role": s_user.role.value}})

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"success": True})

    @app.route("/api/me", endpoint="me")
    @login_required
    def me():
        return jsonify({"id": session["staff_id"], "name": session.get("name"), "role": session.get("role")})

    @app.route("/api/admin/staff", methods=["GET"], endpoint="admin_list_staff")
    @admin_required
    @json_errors
    def admin_list_staff():
        staff = container.staff_service.list_staff()
        return jsonify({"staff": [staff_to_dict(s, include_username=True) for s in staff]})

    @app.route("/api/admin/staff", methods=["POST"], endpoint="admin_create_staff")
    @admin_required
    @json_errors
    def admin_create_staff():
        data = request.get_json(silent=True) or {}
        staff = container.staff_service.create_staff(
            current_role=current_role(),
            name=data.get("name", ""),
            position=data.get("position", ""),
            username=data.get("username", ""),
            password=data.get("password", ""),
            role=data.get("role") or "staff",
        )
        container.presence_board.refresh()
        return jsonify({"success": True, "staff": staff_to_dict(staff, include_username=True)}), 201

    @app.route("/api/admin/staff/<staff_id>", methods=["PUT"], endpoint="admin_update_staff")
    @admin_required
    @json_errors
    def admin_update_staff(staff_id: str):
        data = request.get_json(silent=True) or {}
        staff = container.staff_service.update_staff(
            current_role=current_role(),
            staff_id=staff_id,
            name=data.get("name"),
            position=data.get("position"),
            username=data.get("username"),
            password=data.get("password") or None,
            role=data.get("role"),
            current_status=data.get("current_status"),
        )
        container.presence_board.refresh()
        return jsonify({"success": True, "staff": staff_to_dict(staff, include_username=True)})

    @app.route("/api/admin/staff/<staff_id>", methods=["DELETE"], endpoint="admin_delete_staff")
    @admin_required
    @json_errors
    def admin_delete_staff(staff_id: str):
        container.staff_service.delete_staff(current_role=current_role(), staff_id=staff_id)
        container.presence_board.refresh()
        return jsonify({"success": True})

    @app.route("/api/admin/staff/<staff_id>/movements", methods=["GET"], endpoint="admin_staff_movements")
    @admin_required
    @json_errors
    def admin_staff_movements(staff_id: str):
        rows = container.movement_service.history_for(staff_id)
        return jsonify({"movements": [history_row_to_dict(r) for r in rows]})
