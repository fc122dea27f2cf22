from __future__ import annotations

import logging
from typing import Any, Mapping

from ..common.validators import require_date, require_non_empty, require_shift, require_whole
from ..core.exceptions import ValidationError
from .model import ShiftTailor
from .repository import StitchingRepository

logger = logging.getLogger(__name__)


class StitchingLogService:
    """Per-shift entry of stitched counts for the tailors present on that shift."""

    def __init__(self, stitching: StitchingRepository):
        self._stitching = stitching

    def load_tailors(self, *, day: Any, shift: Any) -> list[ShiftTailor]:
        tailors = self._stitching.list_shift_tailors(day=require_date(day), shift=require_shift(shift))
        return sorted(tailors, key=lambda t: t.name.lower())

    def save_count(self, *, day: Any, shift: Any, tailor_id: str, stitched_count: Any, is_update: bool = False) -> None:
        payload = {
            "date": require_date(day).isoformat(),
            "shift": require_shift(shift).value,
            "tailorId": require_non_empty(tailor_id, "Tailor"),
            "stitchedCount": require_whole(stitched_count, "Stitched count"),
            "isUpdate": bool(is_update),
        }
        self._stitching.save_count(payload)
        action = "updated" if is_update else "saved"
        logger.info("%s stitched count %s for %s", action, payload["stitchedCount"], payload["tailorId"])

    def bulk_save(self, *, day: Any, shift: Any, counts: Mapping[str, Any]) -> int:
        """Save one count per tailor on the shift; tailors left out count 0."""
        day = require_date(day)
        shift = require_shift(shift)
        tailors = self.load_tailors(day=day, shift=shift)
        if not tailors:
            raise ValidationError("No tailors present for this shift")

        known = {t.tailor_id for t in tailors}
        unknown = sorted(str(k) for k in counts if str(k) not in known)
        if unknown:
            raise ValidationError(f"Not on this shift: {', '.join(unknown)}")

        records = [
            {"tailorId": t.tailor_id, "stitchedCount": require_whole(counts.get(t.tailor_id, 0), "Stitched count")}
            for t in tailors
        ]
        self._stitching.save_bulk({"date": day.isoformat(), "shift": shift.value, "records": records})
        total = sum(r["stitchedCount"] for r in records)
        logger.info("bulk saved %d stitching counts for %s %s (%d pieces)", len(records), day, shift.value, total)
        return total
