from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.responses import json_errors, view_filter_from_args
from ..common.validators import parse_flag
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/pieces", methods=["GET"], endpoint="api_pieces")
    @json_errors
    def pieces():
        trunks = container.piece_service.list_trunks(
            is_dispatched=parse_flag(request.args.get("isDispatched")),
            payment_status=request.args.get("paymentStatus"),
        )
        return jsonify({"success": True, "trunks": [t.to_dict() for t in trunks]})

    @app.route("/api/pieces/receive", methods=["POST"], endpoint="api_pieces_receive")
    @json_errors
    def receive():
        data = request.get_json(silent=True) or {}
        container.piece_service.receive_trunk(
            trunk_number=data.get("trunkNumber", ""),
            quantity=data.get("quantity"),
            expected_payment=data.get("expectedPayment", 0),
        )
        return jsonify({"success": True, "message": "Trunk received"}), 201

    @app.route("/api/pieces/dispatch/<trunk_id>", methods=["POST"], endpoint="api_pieces_dispatch")
    @json_errors
    def dispatch(trunk_id: str):
        container.piece_service.dispatch_trunk(trunk_id)
        return jsonify({"success": True, "message": "Trunk dispatched"})

    @app.route("/api/pieces/payment/<trunk_id>", methods=["PUT"], endpoint="api_pieces_payment")
    @json_errors
    def payment(trunk_id: str):
        data = request.get_json(silent=True) or {}
        container.piece_service.record_payment(trunk_id, data.get("paymentAmount"))
        return jsonify({"success": True, "message": "Payment recorded"})

    @app.route("/api/pieces/payments", methods=["GET"], endpoint="api_pieces_payments")
    @json_errors
    def payments():
        view = view_filter_from_args(request.args, container.default_granularity)
        buckets = container.piece_service.payment_buckets(view)
        return jsonify(
            {
                "success": True,
                "granularity": view.granularity.value,
                "buckets": [b.to_dict() for b in buckets],
                "outstanding": container.piece_service.outstanding_total(),
            }
        )
