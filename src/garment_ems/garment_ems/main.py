from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .container import Container, build_container
from .analytics.controller import register as register_analytics
from .attendance.controller import register as register_attendance
from .pieces.controller import register as register_pieces
from .salary.controller import register as register_salary
from .staff.controller import register as register_staff
from .stitching.controller import register as register_stitching

logger = logging.getLogger(__name__)


def create_app(*, settings_module: Optional[str] = None, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    backend_config = getattr(settings, "BACKEND_CONFIG")

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info("settings=%s backend=%s", settings_module, backend_config.get("base_url"))

    if container is None:
        container = build_container(
            backend_config=backend_config,
            label_order=bool(getattr(settings, "LEGACY_LABEL_ORDER", False)),
            default_granularity=getattr(settings, "DEFAULT_GRANULARITY", "Daily"),
        )

    @app.route("/api/health", methods=["GET"], endpoint="api_health")
    def health():
        return jsonify({"success": True, "status": "ok"})

    register_staff(app, container)
    register_attendance(app, container)
    register_stitching(app, container)
    register_analytics(app, container)
    register_salary(app, container)
    register_pieces(app, container)

    return app
