from __future__ import annotations

import logging
from typing import Any, Mapping

from ..common.validators import require_date, require_mark, require_shift
from ..core.enums import AttendanceMark
from ..core.exceptions import ValidationError
from .model import AttendanceSheet, SheetLine
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceSheetService:
    """Daily marking: load the roster of a day and shift, then save it whole."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def load_sheet(self, *, day: Any, shift: Any) -> AttendanceSheet:
        return self._attendance.load_sheet(day=require_date(day), shift=require_shift(shift))

    def submit_sheet(self, *, day: Any, shift: Any, marks: Mapping[str, Any]) -> AttendanceSheet:
        """Save a mark for every staff member on the sheet; unmarked staff are Absent."""
        sheet = self.load_sheet(day=day, shift=shift)
        if not sheet.lines:
            raise ValidationError("No staff to mark for this shift")

        known = {line.staff_id for line in sheet.lines}
        unknown = sorted(str(k) for k in marks if str(k) not in known)
        if unknown:
            raise ValidationError(f"Unknown staff on sheet: {', '.join(unknown)}")

        lines = [
            SheetLine(
                staff_id=line.staff_id,
                name=line.name,
                status=require_mark(marks.get(line.staff_id, AttendanceMark.ABSENT)),
                image_url=line.image_url,
            )
            for line in sheet.lines
        ]
        rows = [
            {
                "staffId": line.staff_id,
                "date": sheet.day.isoformat(),
                "shift": sheet.shift.value,
                "status": line.status.value,
            }
            for line in lines
        ]
        self._attendance.save_sheet(rows)
        present = sum(1 for line in lines if line.status == AttendanceMark.PRESENT)
        logger.info("saved attendance %s %s: %d/%d present", sheet.day, sheet.shift.value, present, len(lines))
        return AttendanceSheet(day=sheet.day, shift=sheet.shift, saved=True, lines=lines)
