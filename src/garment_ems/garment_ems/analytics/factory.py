from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Granularity
from .bucketing.base import BucketStrategy
from .bucketing.daily import DailyStrategy
from .bucketing.monthly import MonthlyStrategy
from .bucketing.weekly import WeeklyStrategy


@dataclass
class BucketStrategyFactory:
    """Factory Pattern: choose the bucketing strategy for a granularity."""

    def for_granularity(self, granularity: Granularity) -> BucketStrategy:
        if granularity == Granularity.WEEKLY:
            return WeeklyStrategy()
        if granularity == Granularity.MONTHLY:
            return MonthlyStrategy()
        return DailyStrategy()
