from __future__ import annotations

from ...staff.model import Staff
from ..model import SalaryRates
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: tailors are paid per piece, everyone else per present shift."""

    def payout(self, staff: Staff, *, pieces: float, shifts: float, rates: SalaryRates) -> float:
        if staff.is_tailor:
            amount = pieces * rates.rate_per_piece
        else:
            amount = shifts * rates.rate_per_shift
        return round(max(amount, 0), 2)
