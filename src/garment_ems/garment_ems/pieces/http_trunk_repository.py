from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..backend.client import BackendClient
from ..backend.payloads import doc_id, expect_list, optional_row_date, row_number
from ..core.constants import DEFAULT_TRUNK_ITEM_TYPE
from .model import Trunk
from .repository import TrunkRepository


class HttpTrunkRepository(TrunkRepository):
    def __init__(self, client: BackendClient):
        self._client = client

    def list_all(self) -> Sequence[Trunk]:
        rows = expect_list(self._client.get("/pieces"), "trunks")
        return [_to_trunk(r) for r in rows]

    def get_by_id(self, trunk_id: str) -> Optional[Trunk]:
        # The backend has no single-trunk endpoint.
        for t in self.list_all():
            if t.trunk_id == str(trunk_id):
                return t
        return None

    def receive(self, *, trunk_number: str, item_type: str, quantity: int, expected_payment: float) -> Any:
        return self._client.post(
            "/pieces/receive",
            {
                "trunkNumber": trunk_number,
                "itemType": item_type,
                "quantity": quantity,
                "expectedPayment": expected_payment,
            },
        )

    def dispatch(self, trunk_id: str) -> Any:
        return self._client.post(f"/pieces/dispatch/{trunk_id}")

    def record_payment(self, trunk_id: str, amount: float) -> Any:
        return self._client.put(f"/pieces/payment/{trunk_id}", {"paymentAmount": amount})


def _to_trunk(r: Mapping[str, Any]) -> Trunk:
    return Trunk(
        trunk_id=doc_id(r),
        trunk_number=str(r.get("trunkNumber") or ""),
        item_type=str(r.get("itemType") or DEFAULT_TRUNK_ITEM_TYPE),
        quantity=int(row_number(r, "quantity")),
        expected_payment=row_number(r, "expectedPayment"),
        total_paid=row_number(r, "totalPaid"),
        is_dispatched=bool(r.get("isDispatched", False)),
        received_date=optional_row_date(r, "receivedDate"),
        dispatched_date=optional_row_date(r, "dispatchedDate"),
    )
