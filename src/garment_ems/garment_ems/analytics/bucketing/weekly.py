from __future__ import annotations

from datetime import date

from ...common.datetime_utils import week_label
from ..model import BucketKey
from .base import BucketStrategy


class WeeklyStrategy(BucketStrategy):
    """ISO-8601 weeks.

    The year is the ISO year, so 2024-12-30 lands in week 1 of 2025.
    """

    def key_for(self, day: date) -> BucketKey:
        iso_year, iso_week, _ = day.isocalendar()
        return BucketKey(year=iso_year, index=iso_week, label=week_label(iso_week))
