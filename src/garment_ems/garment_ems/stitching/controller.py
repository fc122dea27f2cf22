from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.responses import json_errors
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/stitching/tailors", methods=["GET"], endpoint="api_stitching_tailors")
    @json_errors
    def stitching_tailors():
        tailors = container.stitching_log_service.load_tailors(
            day=request.args.get("date"),
            shift=request.args.get("shift"),
        )
        return jsonify({"success": True, "tailors": [t.to_dict() for t in tailors]})

    @app.route("/api/stitching", methods=["POST"], endpoint="api_stitching_save")
    @json_errors
    def stitching_save():
        data = request.get_json(silent=True) or {}
        is_update = bool(data.get("isUpdate", False))
        container.stitching_log_service.save_count(
            day=data.get("date"),
            shift=data.get("shift"),
            tailor_id=data.get("tailorId", ""),
            stitched_count=data.get("stitchedCount", 0),
            is_update=is_update,
        )
        return jsonify({"success": True, "message": "Stitched count updated" if is_update else "Stitched count saved"})

    @app.route("/api/stitching/bulk", methods=["POST"], endpoint="api_stitching_bulk")
    @json_errors
    def stitching_bulk():
        data = request.get_json(silent=True) or {}
        counts = {}
        for row in data.get("records") or []:
            if not isinstance(row, dict) or not row.get("tailorId"):
                raise ValidationError("Each record needs a tailorId")
            counts[str(row["tailorId"])] = row.get("stitchedCount", 0)
        total = container.stitching_log_service.bulk_save(
            day=data.get("date"),
            shift=data.get("shift"),
            counts=counts,
        )
        return jsonify({"success": True, "message": "All counts saved", "totalPieces": total})
