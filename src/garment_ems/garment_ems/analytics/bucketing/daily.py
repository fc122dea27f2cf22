from __future__ import annotations

from datetime import date

from ..model import BucketKey
from .base import BucketStrategy


class DailyStrategy(BucketStrategy):
    """One bucket per calendar day, labelled YYYY-MM-DD."""

    def key_for(self, day: date) -> BucketKey:
        return BucketKey(year=day.year, index=day.timetuple().tm_yday, label=day.isoformat())
