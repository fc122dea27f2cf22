from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.responses import json_errors, require_period_args
from ..common.validators import parse_granularity, require_year
from ..core.enums import Granularity
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _summary_from(args):
        year, month = require_period_args(args)
        rates = container.salary_service.make_rates(args.get("ratePerPiece"), args.get("ratePerShift"))
        return container.salary_service.build_summary(year=year, month=month, rates=rates)

    @app.route("/api/salary/summary", methods=["GET"], endpoint="api_salary_summary")
    @json_errors
    def salary_summary():
        summary = _summary_from(request.args)
        return jsonify({"success": True, **summary.to_dict()})

    @app.route("/api/salary/finalize", methods=["POST"], endpoint="api_salary_finalize")
    @json_errors
    def salary_finalize():
        data = request.get_json(silent=True) or {}
        summary = _summary_from(data)
        container.salary_service.finalize(summary)
        return jsonify({"success": True, "message": "Salaries finalized and saved!", "month": summary.month})

    @app.route("/api/salary/trend/<staff_id>", methods=["GET"], endpoint="api_salary_trend")
    @json_errors
    def salary_trend(staff_id: str):
        year = require_year(request.args.get("year"))
        granularity = parse_granularity(request.args.get("granularity"), Granularity.MONTHLY)
        buckets = container.salary_service.salary_trend(staff_id=staff_id, year=year, granularity=granularity)
        return jsonify({"success": True, "granularity": granularity.value, "buckets": [b.to_dict() for b in buckets]})
