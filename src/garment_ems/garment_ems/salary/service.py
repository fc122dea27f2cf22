from __future__ import annotations

import logging
from typing import Optional, Union

from ..analytics.aggregator import TimeSeriesAggregator
from ..analytics.model import Bucket, ViewFilter
from ..analytics.projection import MetricMapping, project_rows
from ..attendance.repository import AttendanceRepository
from ..attendance.service import ATTENDANCE_METRICS
from ..attendance.service import to_dated_records as attendance_records
from ..common.datetime_utils import month_bounds
from ..common.validators import parse_granularity, require_month, require_non_negative, require_year
from ..core.constants import METRIC_PRESENT_SHIFTS, METRIC_SALARY, METRIC_STITCHED_COUNT
from ..core.enums import Granularity
from ..staff.model import Staff
from ..staff.repository import StaffRepository
from ..stitching.repository import StitchingRepository
from ..stitching.service import STITCHING_METRICS
from ..stitching.service import to_dated_records as stitching_records
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import SalaryLine, SalaryRates, SalarySummary, SalaryTotals
from .repository import SalaryRepository

logger = logging.getLogger(__name__)

SALARY_HISTORY_MAPPING = MetricMapping(date_field="month", fields={"salary": METRIC_SALARY})


class SalaryService:
    def __init__(
        self,
        staff: StaffRepository,
        attendance: AttendanceRepository,
        stitching: StitchingRepository,
        salaries: SalaryRepository,
        *,
        aggregator: Optional[TimeSeriesAggregator] = None,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._staff = staff
        self._attendance = attendance
        self._stitching = stitching
        self._salaries = salaries
        self._aggregator = aggregator or TimeSeriesAggregator()
        self._calculator = calculator or StandardPayrollCalculator()

    @staticmethod
    def make_rates(rate_per_piece=None, rate_per_shift=None) -> SalaryRates:
        return SalaryRates(
            rate_per_piece=require_non_negative(rate_per_piece or 0, "Rate per piece"),
            rate_per_shift=require_non_negative(rate_per_shift or 0, "Rate per shift"),
        )

    def build_summary(self, *, year: int, month: int, rates: SalaryRates) -> SalarySummary:
        year = require_year(year)
        month = require_month(month)
        require_non_negative(rates.rate_per_piece, "Rate per piece")
        require_non_negative(rates.rate_per_shift, "Rate per shift")

        start, end = month_bounds(year, month)
        staff = [s for s in self._staff.list_all() if s.is_tailor or s.is_helper]

        pieces_by_staff: dict[str, list] = {}
        for e in self._stitching.list_records(year=year, month=month):
            pieces_by_staff.setdefault(e.tailor_id, []).append(e)
        shifts_by_staff: dict[str, list] = {}
        for e in self._attendance.list_records(year=year, month=month):
            shifts_by_staff.setdefault(e.staff_id, []).append(e)

        tailors: list[SalaryLine] = []
        helpers: list[SalaryLine] = []
        for s in sorted(staff, key=lambda x: x.name.lower()):
            pieces = self._month_total(
                stitching_records(pieces_by_staff.get(s.staff_id, [])),
                year,
                month,
                STITCHING_METRICS,
                METRIC_STITCHED_COUNT,
            )
            shifts = self._month_total(
                attendance_records(shifts_by_staff.get(s.staff_id, [])),
                year,
                month,
                ATTENDANCE_METRICS,
                METRIC_PRESENT_SHIFTS,
            )
            line = self._line(s, pieces=pieces, shifts=shifts, rates=rates)
            (tailors if s.is_tailor else helpers).append(line)

        lines = tailors + helpers
        totals = SalaryTotals(
            pieces=sum(t.pieces for t in tailors),
            shifts=sum(h.shifts for h in helpers),
            payout=round(sum(x.payout for x in lines), 2),
        )
        return SalarySummary(
            month=f"{year:04d}-{month:02d}",
            period_start=start,
            period_end=end,
            rates=rates,
            tailors=tailors,
            helpers=helpers,
            totals=totals,
        )

    def finalize(self, summary: SalarySummary):
        logger.info("finalizing salaries for %s (payout=%s)", summary.month, summary.totals.payout)
        return self._salaries.finalize(summary.to_dict())

    def salary_trend(
        self,
        *,
        staff_id: str,
        year: int,
        granularity: Union[Granularity, str] = Granularity.MONTHLY,
    ) -> list[Bucket]:
        year = require_year(year)
        rows = self._salaries.list_history(staff_id=str(staff_id), year=year)
        records = project_rows(rows, SALARY_HISTORY_MAPPING)
        view = ViewFilter(year=year, granularity=parse_granularity(granularity, Granularity.MONTHLY))
        return self._aggregator.aggregate_view(records, view, (METRIC_SALARY,))

    def _month_total(self, records, year: int, month: int, metric_keys, metric: str) -> float:
        scoped = self._aggregator.filter_by_period(records, year, month)
        buckets = self._aggregator.aggregate(scoped, Granularity.MONTHLY, metric_keys)
        return self._aggregator.summarize(buckets, metric_keys).total(metric)

    def _line(self, staff: Staff, *, pieces: float, shifts: float, rates: SalaryRates) -> SalaryLine:
        return SalaryLine(
            staff_id=staff.staff_id,
            name=staff.name,
            role=staff.role,
            pieces=pieces,
            shifts=shifts,
            payout=self._calculator.payout(staff, pieces=pieces, shifts=shifts, rates=rates),
            image_url=staff.image_url,
        )
