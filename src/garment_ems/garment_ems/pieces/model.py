from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.constants import DEFAULT_TRUNK_ITEM_TYPE
from ..core.enums import PaymentStatus


@dataclass(frozen=True)
class Trunk:
    """Domain entity: a received trunk of pieces, later dispatched and paid for."""

    trunk_id: str
    trunk_number: str
    quantity: int
    expected_payment: float
    total_paid: float = 0
    is_dispatched: bool = False
    received_date: Optional[date] = None
    dispatched_date: Optional[date] = None
    item_type: str = DEFAULT_TRUNK_ITEM_TYPE

    @property
    def payment_status(self) -> PaymentStatus:
        if self.expected_payment > 0 and self.total_paid >= self.expected_payment:
            return PaymentStatus.PAID
        if self.total_paid > 0:
            return PaymentStatus.PARTIAL
        return PaymentStatus.PENDING

    @property
    def outstanding(self) -> float:
        return max(self.expected_payment - self.total_paid, 0)

    def to_dict(self) -> dict:
        return {
            "_id": self.trunk_id,
            "trunkNumber": self.trunk_number,
            "itemType": self.item_type,
            "quantity": self.quantity,
            "expectedPayment": self.expected_payment,
            "totalPaid": self.total_paid,
            "isDispatched": self.is_dispatched,
            "receivedDate": self.received_date.isoformat() if self.received_date else None,
            "dispatchedDate": self.dispatched_date.isoformat() if self.dispatched_date else None,
            "paymentStatus": self.payment_status.value,
            "outstanding": self.outstanding,
        }
