from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping, Optional, Union

from ..core.enums import Granularity


@dataclass(frozen=True)
class DatedRecord:
    """One calendar day plus named numeric metrics.

    ``date`` is kept as received (a ``date`` or an ISO string); the aggregator
    validates it so a bad record is reported with its original value.
    """

    date: Union[date, str]
    metrics: Mapping[str, float] = field(default_factory=dict)

    def value(self, key: str) -> float:
        return self.metrics.get(key, 0)


@dataclass(frozen=True, order=True)
class BucketKey:
    """Comparable bucket identifier; ordering is chronological.

    ``year`` is None only for legacy label-ordered buckets that merged the
    same label from several years.
    """

    year: Optional[int]
    index: int
    label: str = field(compare=False)


@dataclass(frozen=True)
class Bucket:
    key: BucketKey
    values: Mapping[str, float]

    @property
    def label(self) -> str:
        return self.key.label

    def to_dict(self) -> dict[str, Any]:
        if self.key.year is None:
            return {"label": self.key.label, **self.values}
        return {"label": self.key.label, "year": self.key.year, **self.values}


@dataclass(frozen=True)
class MetricSummary:
    total: float
    peak: float
    average: float


@dataclass(frozen=True)
class SummaryStats:
    bucket_count: int
    metrics: Mapping[str, MetricSummary]
    primary_metric: Optional[str] = None
    consistency_ratio: Optional[float] = None

    def total(self, key: str) -> float:
        return self.metrics[key].total

    def peak(self, key: str) -> float:
        return self.metrics[key].peak

    def average(self, key: str) -> float:
        return self.metrics[key].average

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "bucketCount": self.bucket_count,
            "metrics": {
                k: {"total": m.total, "peak": m.peak, "average": m.average}
                for k, m in self.metrics.items()
            },
        }
        if self.primary_metric is not None:
            out["primaryMetric"] = self.primary_metric
            out["consistencyRatio"] = self.consistency_ratio
        return out


@dataclass(frozen=True)
class ViewFilter:
    """Caller-owned filter state of an analytics view.

    ``month`` without ``year`` is meaningless and ignored by the aggregator.
    """

    year: Optional[int] = None
    month: Optional[int] = None
    granularity: Granularity = Granularity.DAILY
    staff_id: Optional[str] = None
