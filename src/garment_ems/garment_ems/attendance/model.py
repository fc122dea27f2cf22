from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..analytics.model import SummaryStats
from ..core.enums import AttendanceMark, ShiftName


@dataclass(frozen=True)
class AttendanceEntry:
    """Domain entity: attendance of one staff member for one shift."""

    staff_id: str
    staff_name: str
    work_date: date
    shift: ShiftName
    status: AttendanceMark

    @property
    def is_present(self) -> bool:
        return self.status == AttendanceMark.PRESENT


@dataclass(frozen=True)
class AttendanceSummary:
    stats: SummaryStats
    attendance_rate: float

    def to_dict(self) -> dict:
        return {**self.stats.to_dict(), "attendanceRate": self.attendance_rate}


@dataclass(frozen=True)
class SheetLine:
    staff_id: str
    name: str
    status: AttendanceMark
    image_url: Optional[str] = None

    def to_dict(self) -> dict:
        return {"staffId": self.staff_id, "name": self.name, "status": self.status.value, "imageUrl": self.image_url}


@dataclass(frozen=True)
class AttendanceSheet:
    """Marks of one day and shift.

    ``saved`` is False when nothing was recorded yet; every line is then Absent.
    """

    day: date
    shift: ShiftName
    saved: bool
    lines: list[SheetLine] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "date": self.day.isoformat(),
            "shift": self.shift.value,
            "saved": self.saved,
            "lines": [line.to_dict() for line in self.lines],
        }
