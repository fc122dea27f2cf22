from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..backend.client import BackendClient
from ..backend.payloads import doc_id, expect_list, ref_id, ref_name, row_date
from ..core.enums import AttendanceMark, ShiftName
from ..core.exceptions import BackendError, MalformedRecordError
from .model import AttendanceEntry, AttendanceSheet, SheetLine
from .repository import AttendanceRepository


class HttpAttendanceRepository(AttendanceRepository):
    def __init__(self, client: BackendClient):
        self._client = client

    def list_records(
        self,
        *,
        year: int,
        month: Optional[int] = None,
        staff_id: Optional[str] = None,
    ) -> Sequence[AttendanceEntry]:
        params = {
            "year": int(year),
            "month": f"{int(month):02d}" if month else None,
            "staffId": staff_id,
        }
        rows = expect_list(self._client.get("/attendance/records", params=params), "attendance records")
        return [_to_entry(r) for r in rows]

    def load_sheet(self, *, day: date, shift: ShiftName) -> AttendanceSheet:
        # {"type": "attendance", "data": [...marks]} once saved, else {"type": "staff", "data": [...staff]}
        payload = self._client.get("/attendance", params={"date": day.isoformat(), "shift": shift.value})
        kind = payload.get("type") if isinstance(payload, Mapping) else None
        rows = expect_list(payload, "attendance sheet")
        if kind == "attendance":
            return AttendanceSheet(day=day, shift=shift, saved=True, lines=[_to_sheet_line(r) for r in rows])
        if kind == "staff":
            lines = [
                SheetLine(
                    staff_id=doc_id(s),
                    name=str(s.get("name") or ""),
                    status=AttendanceMark.ABSENT,
                    image_url=s.get("imageUrl"),
                )
                for s in rows
            ]
            return AttendanceSheet(day=day, shift=shift, saved=False, lines=lines)
        raise BackendError(None, f"Unexpected attendance sheet type {kind!r}")

    def save_sheet(self, rows: Sequence[Mapping[str, Any]]) -> Any:
        return self._client.post("/attendance", [dict(r) for r in rows])


def _to_entry(r: Mapping[str, Any]) -> AttendanceEntry:
    staff_ref = r.get("staffId")
    try:
        shift = ShiftName(r.get("shift"))
        status = AttendanceMark(r.get("status"))
    except ValueError:
        raise MalformedRecordError("Unknown shift or status", record=r)
    return AttendanceEntry(
        staff_id=ref_id(staff_ref),
        staff_name=str(r.get("name") or ref_name(staff_ref)),
        work_date=row_date(r, "date"),
        shift=shift,
        status=status,
    )


def _to_sheet_line(r: Mapping[str, Any]) -> SheetLine:
    staff_ref = r.get("staffId")
    try:
        status = AttendanceMark(r.get("status"))
    except ValueError:
        raise MalformedRecordError("Unknown status", record=r)
    return SheetLine(
        staff_id=ref_id(staff_ref),
        name=ref_name(staff_ref),
        status=status,
        image_url=staff_ref.get("imageUrl") if isinstance(staff_ref, Mapping) else None,
    )
