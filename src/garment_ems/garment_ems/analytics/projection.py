from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from ..core.exceptions import MalformedRecordError
from .model import DatedRecord


@dataclass(frozen=True)
class MetricMapping:
    """Which backend field holds the date and how API fields map to metric keys.

    Example: ``MetricMapping("receivedDate", {"expectedPayment": "expectedPayment"})``.
    A ``YYYY-MM`` value in the date field (monthly salary rows) is read as the
    first day of that month.
    """

    date_field: str
    fields: Mapping[str, str]


def project_row(row: Mapping[str, Any], mapping: MetricMapping) -> DatedRecord:
    raw_date = row.get(mapping.date_field)
    if raw_date is None or raw_date == "":
        raise MalformedRecordError(f"Missing {mapping.date_field!r}", record=row)
    if isinstance(raw_date, str) and len(raw_date.strip()) == 7:
        raw_date = f"{raw_date.strip()}-01"

    metrics: dict[str, float] = {}
    for api_field, metric_key in mapping.fields.items():
        value = row.get(api_field)
        if value is None:
            value = 0
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise MalformedRecordError(f"Field {api_field!r} is not numeric", record=row)
        metrics[metric_key] = value
    return DatedRecord(date=raw_date, metrics=metrics)


def project_rows(rows: Iterable[Mapping[str, Any]], mapping: MetricMapping) -> list[DatedRecord]:
    return [project_row(r, mapping) for r in rows]
