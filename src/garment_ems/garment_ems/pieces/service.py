from __future__ import annotations

import logging
from typing import Optional, Union

from ..analytics.aggregator import TimeSeriesAggregator
from ..analytics.model import Bucket, DatedRecord, ViewFilter
from ..common.validators import require_non_empty, require_non_negative, require_positive
from ..core.constants import DEFAULT_TRUNK_ITEM_TYPE, METRIC_EXPECTED_PAYMENT, METRIC_TOTAL_PAID
from ..core.enums import PaymentStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import Trunk
from .repository import TrunkRepository

logger = logging.getLogger(__name__)

PAYMENT_METRICS = (METRIC_EXPECTED_PAYMENT, METRIC_TOTAL_PAID)


class PieceTrackingService:
    def __init__(self, trunks: TrunkRepository, aggregator: Optional[TimeSeriesAggregator] = None):
        self._trunks = trunks
        self._aggregator = aggregator or TimeSeriesAggregator()

    def list_trunks(
        self,
        *,
        is_dispatched: Optional[bool] = None,
        payment_status: Union[PaymentStatus, str, None] = None,
    ) -> list[Trunk]:
        status = _parse_payment_status(payment_status)
        items = list(self._trunks.list_all())
        if is_dispatched is not None:
            items = [t for t in items if t.is_dispatched == is_dispatched]
        if status is not None:
            items = [t for t in items if t.payment_status == status]
        return items

    def receive_trunk(self, *, trunk_number: str, quantity, expected_payment) -> None:
        trunk_number = require_non_empty(trunk_number, "Trunk number")
        quantity = require_positive(quantity, "Quantity")
        if int(quantity) != quantity:
            raise ValidationError("Quantity must be a whole number")
        expected = require_non_negative(expected_payment, "Expected payment")
        self._trunks.receive(
            trunk_number=trunk_number,
            item_type=DEFAULT_TRUNK_ITEM_TYPE,
            quantity=int(quantity),
            expected_payment=expected,
        )
        logger.info("received trunk %s (%d pieces)", trunk_number, int(quantity))

    def dispatch_trunk(self, trunk_id: str) -> None:
        trunk = self._require(trunk_id)
        if trunk.is_dispatched:
            raise ValidationError(f"Trunk {trunk.trunk_number} is already dispatched")
        self._trunks.dispatch(trunk.trunk_id)

    def record_payment(self, trunk_id: str, amount) -> None:
        amount = require_positive(amount, "Payment amount")
        trunk = self._require(trunk_id)
        self._trunks.record_payment(trunk.trunk_id, amount)

    def payment_buckets(self, view: ViewFilter) -> list[Bucket]:
        """Expected vs paid amounts bucketed by the date each trunk was received."""
        records = [
            DatedRecord(
                date=t.received_date,
                metrics={METRIC_EXPECTED_PAYMENT: t.expected_payment, METRIC_TOTAL_PAID: t.total_paid},
            )
            for t in self._trunks.list_all()
            if t.received_date is not None
        ]
        return self._aggregator.aggregate_view(records, view, PAYMENT_METRICS)

    def outstanding_total(self) -> float:
        return sum(t.outstanding for t in self._trunks.list_all())

    def _require(self, trunk_id: str) -> Trunk:
        trunk = self._trunks.get_by_id(str(trunk_id))
        if not trunk:
            raise NotFoundError(f"Trunk {trunk_id} not found")
        return trunk


def _parse_payment_status(value: Union[PaymentStatus, str, None]) -> Optional[PaymentStatus]:
    if value is None or value == "" or (isinstance(value, str) and value.strip().lower() == "all"):
        return None
    if isinstance(value, PaymentStatus):
        return value
    try:
        return PaymentStatus(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(s.value for s in PaymentStatus)
        raise ValidationError(f"Payment status must be one of {allowed}")
