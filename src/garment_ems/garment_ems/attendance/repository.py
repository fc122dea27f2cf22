from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional, Protocol, Sequence

from ..core.enums import ShiftName
from .model import AttendanceEntry, AttendanceSheet


class AttendanceRepository(Protocol):
    def list_records(
        self,
        *,
        year: int,
        month: Optional[int] = None,
        staff_id: Optional[str] = None,
    ) -> Sequence[AttendanceEntry]:
        """Attendance of a year, or of one month when ``month`` is given."""

        raise NotImplementedError

    def load_sheet(self, *, day: date, shift: ShiftName) -> AttendanceSheet:
        raise NotImplementedError

    def save_sheet(self, rows: Sequence[Mapping[str, Any]]) -> Any:
        raise NotImplementedError
