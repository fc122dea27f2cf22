from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Mapping, Optional

from ..common.datetime_utils import coerce_date
from ..core.exceptions import BackendError, MalformedRecordError


def expect_list(payload: Any, what: str) -> List[Dict[str, Any]]:
    """Backend list endpoints return a JSON array; some wrap it as {"data": [...]}."""
    if isinstance(payload, Mapping) and isinstance(payload.get("data"), list):
        payload = payload["data"]
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise BackendError(None, f"Expected a list of {what}, got {type(payload).__name__}")
    return list(payload)


def expect_object(payload: Any, what: str) -> Dict[str, Any]:
    if not isinstance(payload, Mapping):
        raise BackendError(None, f"Expected a {what} object, got {type(payload).__name__}")
    return dict(payload)


def doc_id(row: Mapping[str, Any]) -> str:
    """Backend documents carry ``_id``; nested references may be embedded documents."""
    value = row.get("_id", row.get("id"))
    if isinstance(value, Mapping):
        value = value.get("_id", value.get("id"))
    if value is None:
        raise MalformedRecordError("Record has no id", record=row)
    return str(value)


def ref_id(value: Any) -> str:
    """Resolve a reference that is either an id string or an embedded document."""
    if isinstance(value, Mapping):
        return doc_id(value)
    if value is None:
        raise MalformedRecordError("Missing reference")
    return str(value)


def ref_name(value: Any, default: str = "") -> str:
    if isinstance(value, Mapping):
        return str(value.get("name") or default)
    return default


def row_date(row: Mapping[str, Any], field_name: str) -> date:
    raw = row.get(field_name)
    if raw is None or raw == "":
        raise MalformedRecordError(f"Missing {field_name!r}", record=row)
    try:
        return coerce_date(raw)
    except (TypeError, ValueError):
        raise MalformedRecordError(f"Invalid {field_name!r}", record=row)


def optional_row_date(row: Mapping[str, Any], field_name: str) -> Optional[date]:
    if row.get(field_name) in (None, ""):
        return None
    return row_date(row, field_name)


def row_number(row: Mapping[str, Any], field_name: str, default: float = 0) -> float:
    value = row.get(field_name, default)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedRecordError(f"Field {field_name!r} is not numeric", record=row)
    return value
