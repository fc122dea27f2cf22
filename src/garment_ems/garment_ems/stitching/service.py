from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..analytics.aggregator import TimeSeriesAggregator
from ..analytics.model import Bucket, DatedRecord, SummaryStats, ViewFilter
from ..common.datetime_utils import today
from ..core.constants import METRIC_STITCHED_COUNT
from ..core.enums import Granularity
from ..staff.repository import StaffRepository
from .model import StitchingEntry
from .repository import StitchingRepository

STITCHING_METRICS = (METRIC_STITCHED_COUNT,)


def to_dated_records(entries: Iterable[StitchingEntry]) -> list[DatedRecord]:
    return [DatedRecord(date=e.work_date, metrics={METRIC_STITCHED_COUNT: e.stitched_count}) for e in entries]


class StitchingAnalyticsService:
    def __init__(
        self,
        stitching: StitchingRepository,
        staff: StaffRepository,
        aggregator: Optional[TimeSeriesAggregator] = None,
    ):
        self._stitching = stitching
        self._staff = staff
        self._aggregator = aggregator or TimeSeriesAggregator()

    def stitching_buckets(self, view: ViewFilter, *, tailor_id: Optional[str] = None) -> list[Bucket]:
        year = view.year or today().year
        entries = self._stitching.list_records(year=year, month=view.month, tailor_id=tailor_id or view.staff_id)
        return self._aggregator.aggregate_view(to_dated_records(entries), view, STITCHING_METRICS)

    def stitching_performance(self, view: ViewFilter, *, tailor_id: Optional[str] = None) -> SummaryStats:
        """Totals, peak and consistency (average / peak) of stitched pieces."""
        return self.summarize_buckets(self.stitching_buckets(view, tailor_id=tailor_id))

    def summarize_buckets(self, buckets: Sequence[Bucket]) -> SummaryStats:
        return self._aggregator.summarize(buckets, STITCHING_METRICS, primary_metric=METRIC_STITCHED_COUNT)

    def stitching_comparison(self, *, year: int, month: int) -> list[dict]:
        """Per-tailor stitched totals for the month; non-tailor rows are ignored."""
        tailors = {s.staff_id: s for s in self._staff.list_all() if s.is_tailor}
        if not tailors:
            return []

        entries = self._stitching.list_records(year=year, month=month)
        by_tailor: dict[str, list[StitchingEntry]] = {}
        for e in entries:
            if e.tailor_id in tailors:
                by_tailor.setdefault(e.tailor_id, []).append(e)

        out = []
        for tailor_id, items in by_tailor.items():
            records = self._aggregator.filter_by_period(to_dated_records(items), year, month)
            stats = self._aggregator.summarize(
                self._aggregator.aggregate(records, Granularity.DAILY, STITCHING_METRICS),
                STITCHING_METRICS,
                primary_metric=METRIC_STITCHED_COUNT,
            )
            out.append(
                {
                    "staffId": tailor_id,
                    "name": tailors[tailor_id].name,
                    METRIC_STITCHED_COUNT: stats.total(METRIC_STITCHED_COUNT),
                    "consistencyRatio": stats.consistency_ratio,
                }
            )

        out.sort(key=lambda x: x["name"].lower())
        return out
