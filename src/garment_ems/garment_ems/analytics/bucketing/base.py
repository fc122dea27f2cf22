from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from ..model import BucketKey


class BucketStrategy(ABC):
    """Strategy Pattern: map a calendar day onto the bucket it belongs to."""

    @abstractmethod
    def key_for(self, day: date) -> BucketKey:
        raise NotImplementedError
