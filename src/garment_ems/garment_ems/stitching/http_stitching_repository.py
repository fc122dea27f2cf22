from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..backend.client import BackendClient
from ..backend.payloads import doc_id, expect_list, ref_id, ref_name, row_date, row_number
from ..core.enums import ShiftName
from ..core.exceptions import MalformedRecordError
from .model import ShiftTailor, StitchingEntry
from .repository import StitchingRepository


class HttpStitchingRepository(StitchingRepository):
    def __init__(self, client: BackendClient):
        self._client = client

    def list_records(
        self,
        *,
        year: int,
        month: Optional[int] = None,
        tailor_id: Optional[str] = None,
    ) -> Sequence[StitchingEntry]:
        params = {
            "year": int(year),
            "month": f"{int(month):02d}" if month else None,
            "tailorId": tailor_id,
        }
        rows = expect_list(self._client.get("/stitching/records", params=params), "stitching records")
        return [_to_entry(r) for r in rows]

    def list_shift_tailors(self, *, day: date, shift: ShiftName) -> Sequence[ShiftTailor]:
        params = {"date": day.isoformat(), "shift": shift.value}
        rows = expect_list(self._client.get("/stitching/tailors", params=params), "tailors")
        return [_to_shift_tailor(r) for r in rows]

    def save_count(self, payload: Mapping[str, Any]) -> Any:
        return self._client.post("/stitching", dict(payload))

    def save_bulk(self, payload: Mapping[str, Any]) -> Any:
        return self._client.post("/stitching/bulk", dict(payload))


def _to_entry(r: Mapping[str, Any]) -> StitchingEntry:
    tailor_ref = r.get("tailorId")
    try:
        shift = ShiftName(r.get("shift"))
    except ValueError:
        raise MalformedRecordError("Unknown shift", record=r)
    return StitchingEntry(
        tailor_id=ref_id(tailor_ref),
        tailor_name=str(r.get("name") or ref_name(tailor_ref)),
        work_date=row_date(r, "date"),
        shift=shift,
        stitched_count=int(row_number(r, "stitchedCount")),
    )


def _to_shift_tailor(r: Mapping[str, Any]) -> ShiftTailor:
    count = r.get("stitchedCount")
    return ShiftTailor(
        tailor_id=doc_id(r),
        name=str(r.get("name") or ""),
        stitched_count=int(row_number(r, "stitchedCount")) if count is not None else None,
        image_url=r.get("imageUrl"),
    )
