from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional, Sequence, Union

from ..common.datetime_utils import coerce_date
from ..common.validators import parse_granularity, require_month, require_year
from ..core.enums import Granularity
from ..core.exceptions import EmptyMetricKeysError, MalformedRecordError, ValidationError
from .factory import BucketStrategyFactory
from .model import Bucket, BucketKey, DatedRecord, MetricSummary, SummaryStats, ViewFilter

logger = logging.getLogger(__name__)


class TimeSeriesAggregator:
    """Group dated records into day/week/month buckets and derive summary stats.

    Stateless: every call works only on its arguments, so one instance can be
    shared by all services and threads.

    ``label_order=True`` reproduces the legacy dashboard ordering, where buckets
    were keyed and sorted by their text label ("Week 10" before "Week 2",
    months alphabetically). The default orders buckets chronologically.
    """

    def __init__(self, *, strategy_factory: Optional[BucketStrategyFactory] = None, label_order: bool = False):
        self._factory = strategy_factory or BucketStrategyFactory()
        self._label_order = bool(label_order)

    def aggregate(
        self,
        records: Iterable[DatedRecord],
        granularity: Union[Granularity, str],
        metric_keys: Sequence[str],
    ) -> list[Bucket]:
        keys = _require_metric_keys(metric_keys)
        strategy = self._factory.for_granularity(parse_granularity(granularity))

        # Validate everything first: a bad record must not yield a partial result.
        keyed: list[tuple[BucketKey, DatedRecord]] = []
        for record in records:
            day = _record_date(record)
            _check_metrics(record, keys)
            keyed.append((strategy.key_for(day), record))

        groups: dict[object, tuple[BucketKey, dict[str, float]]] = {}
        for key, record in keyed:
            group_id = key.label if self._label_order else key
            entry = groups.get(group_id)
            if entry is None:
                entry = (key, {k: 0 for k in keys})
            elif entry[0].year != key.year:
                # Same label from different years: the merged bucket has no single year.
                entry = (BucketKey(year=None, index=key.index, label=key.label), entry[1])
            groups[group_id] = entry
            sums = entry[1]
            for k in keys:
                sums[k] += record.value(k)

        if self._label_order:
            ordered = sorted(groups.values(), key=lambda e: e[0].label)
        else:
            ordered = sorted(groups.values(), key=lambda e: e[0])

        return [Bucket(key=key, values=sums) for key, sums in ordered]

    def summarize(
        self,
        buckets: Sequence[Bucket],
        metric_keys: Sequence[str],
        *,
        primary_metric: Optional[str] = None,
    ) -> SummaryStats:
        keys = _require_metric_keys(metric_keys)
        if primary_metric is not None and primary_metric not in keys:
            raise ValidationError(f"Primary metric {primary_metric!r} is not among the requested metrics")

        count = len(buckets)
        metrics: dict[str, MetricSummary] = {}
        for k in keys:
            values = [b.values.get(k, 0) for b in buckets]
            total = sum(values)
            peak = max(values) if values else 0
            average = total / count if count else 0
            metrics[k] = MetricSummary(total=total, peak=peak, average=average)

        ratio = None
        if primary_metric is not None:
            primary = metrics[primary_metric]
            ratio = primary.average / primary.peak if primary.peak else 0

        return SummaryStats(bucket_count=count, metrics=metrics, primary_metric=primary_metric, consistency_ratio=ratio)

    def filter_by_period(self, records: Iterable[DatedRecord], year: int, month: int) -> list[DatedRecord]:
        month = require_month(month)
        year = require_year(year)
        out = []
        for record in records:
            day = _record_date(record)
            if day.year == year and day.month == month:
                out.append(record)
        return out

    def filter_by_year(self, records: Iterable[DatedRecord], year: int) -> list[DatedRecord]:
        year = require_year(year)
        return [r for r in records if _record_date(r).year == year]

    def aggregate_view(self, records: Iterable[DatedRecord], view: ViewFilter, metric_keys: Sequence[str]) -> list[Bucket]:
        """Scope records to the view's period, then bucket at its granularity."""
        if view.year is not None and view.month is not None:
            records = self.filter_by_period(records, view.year, view.month)
        elif view.year is not None:
            records = self.filter_by_year(records, view.year)
        buckets = self.aggregate(records, view.granularity, metric_keys)
        logger.debug("aggregated %d buckets at %s for %s", len(buckets), view.granularity.value, view)
        return buckets


def _require_metric_keys(metric_keys: Sequence[str]) -> list[str]:
    if isinstance(metric_keys, str):
        metric_keys = [metric_keys]
    keys = list(dict.fromkeys(metric_keys or []))
    if not keys:
        raise EmptyMetricKeysError("At least one metric key is required")
    return keys


def _record_date(record: DatedRecord) -> date:
    raw = getattr(record, "date", None)
    if raw is None:
        raise MalformedRecordError("Record has no date", record=record)
    try:
        return coerce_date(raw)
    except (TypeError, ValueError):
        raise MalformedRecordError(f"Invalid date {raw!r}", record=record)


def _check_metrics(record: DatedRecord, keys: Sequence[str]) -> None:
    for k in keys:
        value = record.value(k)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise MalformedRecordError(f"Metric {k!r} is not numeric", record=record)
