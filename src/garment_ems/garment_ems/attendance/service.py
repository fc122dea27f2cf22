from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..analytics.aggregator import TimeSeriesAggregator
from ..analytics.model import Bucket, DatedRecord, ViewFilter
from ..common.datetime_utils import today
from ..core.constants import METRIC_ABSENT_SHIFTS, METRIC_PRESENT_SHIFTS
from ..core.enums import Granularity
from .model import AttendanceEntry, AttendanceSummary
from .repository import AttendanceRepository

ATTENDANCE_METRICS = (METRIC_PRESENT_SHIFTS, METRIC_ABSENT_SHIFTS)


def to_dated_records(entries: Iterable[AttendanceEntry]) -> list[DatedRecord]:
    """One record per shift: present counts 1/0, absent counts 0/1."""
    return [
        DatedRecord(
            date=e.work_date,
            metrics={
                METRIC_PRESENT_SHIFTS: 1 if e.is_present else 0,
                METRIC_ABSENT_SHIFTS: 0 if e.is_present else 1,
            },
        )
        for e in entries
    ]


class AttendanceAnalyticsService:
    def __init__(self, attendance: AttendanceRepository, aggregator: Optional[TimeSeriesAggregator] = None):
        self._attendance = attendance
        self._aggregator = aggregator or TimeSeriesAggregator()

    def _load(self, view: ViewFilter, staff_id: Optional[str]) -> list[DatedRecord]:
        year = view.year or today().year
        entries = self._attendance.list_records(year=year, month=view.month, staff_id=staff_id or view.staff_id)
        return to_dated_records(entries)

    def attendance_buckets(self, view: ViewFilter, *, staff_id: Optional[str] = None) -> list[Bucket]:
        records = self._load(view, staff_id)
        return self._aggregator.aggregate_view(records, view, ATTENDANCE_METRICS)

    def attendance_summary(self, view: ViewFilter, *, staff_id: Optional[str] = None) -> AttendanceSummary:
        return self.summarize_buckets(self.attendance_buckets(view, staff_id=staff_id))

    def summarize_buckets(self, buckets: Sequence[Bucket]) -> AttendanceSummary:
        stats = self._aggregator.summarize(buckets, ATTENDANCE_METRICS, primary_metric=METRIC_PRESENT_SHIFTS)
        present = stats.total(METRIC_PRESENT_SHIFTS)
        absent = stats.total(METRIC_ABSENT_SHIFTS)
        rate = present / (present + absent) if (present + absent) else 0
        return AttendanceSummary(stats=stats, attendance_rate=rate)

    def attendance_comparison(self, *, year: int, month: int) -> list[dict]:
        """Per-staff present/absent shift totals for the month, sorted by name."""
        entries = self._attendance.list_records(year=year, month=month)

        by_staff: dict[str, list[AttendanceEntry]] = {}
        names: dict[str, str] = {}
        for e in entries:
            by_staff.setdefault(e.staff_id, []).append(e)
            names[e.staff_id] = e.staff_name

        out = []
        for staff_id, items in by_staff.items():
            records = self._aggregator.filter_by_period(to_dated_records(items), year, month)
            buckets = self._aggregator.aggregate(records, Granularity.MONTHLY, ATTENDANCE_METRICS)
            stats = self._aggregator.summarize(buckets, ATTENDANCE_METRICS)
            out.append(
                {
                    "staffId": staff_id,
                    "name": names[staff_id],
                    METRIC_PRESENT_SHIFTS: stats.total(METRIC_PRESENT_SHIFTS),
                    METRIC_ABSENT_SHIFTS: stats.total(METRIC_ABSENT_SHIFTS),
                }
            )

        out.sort(key=lambda x: x["name"].lower())
        return out
