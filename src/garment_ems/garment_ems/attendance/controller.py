from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.responses import json_errors
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["GET"], endpoint="api_attendance_sheet")
    @json_errors
    def attendance_sheet():
        sheet = container.attendance_sheet_service.load_sheet(
            day=request.args.get("date"),
            shift=request.args.get("shift"),
        )
        return jsonify({"success": True, **sheet.to_dict()})

    @app.route("/api/attendance", methods=["POST"], endpoint="api_attendance_submit")
    @json_errors
    def attendance_submit():
        data = request.get_json(silent=True) or {}
        marks = {}
        for row in data.get("records") or []:
            if not isinstance(row, dict) or not row.get("staffId"):
                raise ValidationError("Each record needs a staffId")
            marks[str(row["staffId"])] = row.get("status")
        sheet = container.attendance_sheet_service.submit_sheet(
            day=data.get("date"),
            shift=data.get("shift"),
            marks=marks,
        )
        return jsonify({"success": True, "message": "Attendance saved", **sheet.to_dict()})
