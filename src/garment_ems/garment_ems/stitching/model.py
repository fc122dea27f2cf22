from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import ShiftName


@dataclass(frozen=True)
class StitchingEntry:
    """Domain entity: pieces stitched by one tailor in one shift."""

    tailor_id: str
    tailor_name: str
    work_date: date
    shift: ShiftName
    stitched_count: int


@dataclass(frozen=True)
class ShiftTailor:
    """A tailor present for a day and shift, with the count saved so far if any."""

    tailor_id: str
    name: str
    stitched_count: Optional[int] = None
    image_url: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "tailorId": self.tailor_id,
            "name": self.name,
            "stitchedCount": self.stitched_count,
            "imageUrl": self.image_url,
        }
