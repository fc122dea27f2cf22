from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.responses import json_errors, require_period_args, view_filter_from_args
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/analytics/attendance", methods=["GET"], endpoint="api_attendance_analytics")
    @json_errors
    def attendance_analytics():
        view = view_filter_from_args(request.args, container.default_granularity)
        buckets = container.attendance_service.attendance_buckets(view)
        summary = container.attendance_service.summarize_buckets(buckets)
        return jsonify(
            {
                "success": True,
                "granularity": view.granularity.value,
                "buckets": [b.to_dict() for b in buckets],
                "summary": summary.to_dict(),
            }
        )

    @app.route("/api/analytics/stitching", methods=["GET"], endpoint="api_stitching_analytics")
    @json_errors
    def stitching_analytics():
        view = view_filter_from_args(request.args, container.default_granularity)
        buckets = container.stitching_service.stitching_buckets(view)
        stats = container.stitching_service.summarize_buckets(buckets)
        return jsonify(
            {
                "success": True,
                "granularity": view.granularity.value,
                "buckets": [b.to_dict() for b in buckets],
                "summary": stats.to_dict(),
            }
        )

    @app.route("/api/analytics/comparison", methods=["GET"], endpoint="api_staff_comparison")
    @json_errors
    def staff_comparison():
        year, month = require_period_args(request.args)
        return jsonify(
            {
                "success": True,
                "attendance": container.attendance_service.attendance_comparison(year=year, month=month),
                "stitching": container.stitching_service.stitching_comparison(year=year, month=month),
            }
        )
