from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, request

from ..analytics.model import ViewFilter
from ..core.enums import Granularity
from ..core.exceptions import BackendError, NotFoundError, ValidationError
from .validators import parse_granularity, parse_optional_int, require_month, require_year

logger = logging.getLogger(__name__)


def json_errors(view):
    """Translate domain errors raised by services into JSON error responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except BackendError as e:
            return jsonify({"success": False, "message": f"Backend error: {e.detail}"}), 502
        except Exception:
            logger.exception("unhandled error in %s", request.path)
            return jsonify({"success": False, "message": "Internal server error"}), 500

    return wrapper


def view_filter_from_args(args, default_granularity: Granularity = Granularity.DAILY) -> ViewFilter:
    """Build the analytics filter from query-string parameters."""
    year = parse_optional_int(args.get("year"), "year")
    month = parse_optional_int(args.get("month"), "month")
    return ViewFilter(
        year=require_year(year) if year is not None else None,
        month=require_month(month) if month is not None else None,
        granularity=parse_granularity(args.get("granularity"), default_granularity),
        staff_id=(args.get("staffId") or None),
    )


def require_period_args(args) -> tuple[int, int]:
    return require_year(args.get("year")), require_month(args.get("month"))
