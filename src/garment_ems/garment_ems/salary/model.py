from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class SalaryRates:
    rate_per_piece: float = 0
    rate_per_shift: float = 0

    def to_dict(self) -> dict:
        return {"ratePerPiece": self.rate_per_piece, "ratePerShift": self.rate_per_shift}


@dataclass(frozen=True)
class SalaryLine:
    """Computed pay of one staff member for the period."""

    staff_id: str
    name: str
    role: str
    pieces: float
    shifts: float
    payout: float
    image_url: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "_id": self.staff_id,
            "name": self.name,
            "role": self.role,
            "imageUrl": self.image_url,
            "totalPieces": self.pieces,
            "totalShifts": self.shifts,
            "payout": self.payout,
        }


@dataclass(frozen=True)
class SalaryTotals:
    pieces: float = 0
    shifts: float = 0
    payout: float = 0

    def to_dict(self) -> dict:
        return {"pieces": self.pieces, "shifts": self.shifts, "payout": self.payout}


@dataclass(frozen=True)
class SalarySummary:
    month: str
    period_start: date
    period_end: date
    rates: SalaryRates
    tailors: list[SalaryLine] = field(default_factory=list)
    helpers: list[SalaryLine] = field(default_factory=list)
    totals: SalaryTotals = field(default_factory=SalaryTotals)

    def to_dict(self) -> dict:
        return {
            "month": self.month,
            "period": {"start": self.period_start.isoformat(), "end": self.period_end.isoformat()},
            "rates": self.rates.to_dict(),
            "tailors": [t.to_dict() for t in self.tailors],
            "helpers": [h.to_dict() for h in self.helpers],
            "totals": self.totals.to_dict(),
        }
