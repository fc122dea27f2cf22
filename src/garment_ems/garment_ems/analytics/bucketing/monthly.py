from __future__ import annotations

from datetime import date

from ...common.datetime_utils import month_name
from ..model import BucketKey
from .base import BucketStrategy


class MonthlyStrategy(BucketStrategy):
    """Calendar months, labelled with the English month name."""

    def key_for(self, day: date) -> BucketKey:
        return BucketKey(year=day.year, index=day.month, label=month_name(day.month))
