from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.responses import json_errors
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/staff", methods=["GET"], endpoint="api_staff_list")
    @json_errors
    def staff_list():
        items = container.staff_service.list_staff(role=request.args.get("role") or None)
        return jsonify({"success": True, "staff": [s.to_dict() for s in items]})

    @app.route("/api/staff/<staff_id>", methods=["GET"], endpoint="api_staff_detail")
    @json_errors
    def staff_detail(staff_id: str):
        staff = container.staff_service.get_staff(staff_id)
        return jsonify({"success": True, "staff": staff.to_dict()})

    @app.route("/api/staff", methods=["POST"], endpoint="api_staff_create")
    @json_errors
    def staff_create():
        container.staff_service.create_staff(**_staff_fields(request.get_json(silent=True) or {}))
        return jsonify({"success": True, "message": "Staff created"}), 201

    @app.route("/api/staff/<staff_id>", methods=["PUT"], endpoint="api_staff_update")
    @json_errors
    def staff_update(staff_id: str):
        container.staff_service.update_staff(staff_id, **_staff_fields(request.get_json(silent=True) or {}))
        return jsonify({"success": True, "message": "Staff updated"})

    @app.route("/api/staff/<staff_id>", methods=["DELETE"], endpoint="api_staff_delete")
    @json_errors
    def staff_delete(staff_id: str):
        container.staff_service.delete_staff(staff_id)
        return jsonify({"success": True, "message": "Staff deleted"})


def _staff_fields(data) -> dict:
    return {
        "name": data.get("name", ""),
        "role": data.get("role"),
        "phone": data.get("phone"),
        "address": data.get("address"),
        "bank_account": data.get("bankAccount"),
        "image_url": data.get("imageUrl"),
    }
