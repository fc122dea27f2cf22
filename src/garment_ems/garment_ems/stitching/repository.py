from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional, Protocol, Sequence

from ..core.enums import ShiftName
from .model import ShiftTailor, StitchingEntry


class StitchingRepository(Protocol):
    def list_records(
        self,
        *,
        year: int,
        month: Optional[int] = None,
        tailor_id: Optional[str] = None,
    ) -> Sequence[StitchingEntry]:
        raise NotImplementedError

    def list_shift_tailors(self, *, day: date, shift: ShiftName) -> Sequence[ShiftTailor]:
        raise NotImplementedError

    def save_count(self, payload: Mapping[str, Any]) -> Any:
        raise NotImplementedError

    def save_bulk(self, payload: Mapping[str, Any]) -> Any:
        raise NotImplementedError
