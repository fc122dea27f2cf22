from __future__ import annotations

from abc import ABC, abstractmethod

from ...staff.model import Staff
from ..model import SalaryRates


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def payout(self, staff: Staff, *, pieces: float, shifts: float, rates: SalaryRates) -> float:
        raise NotImplementedError
