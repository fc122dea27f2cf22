from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..backend.client import BackendClient
from ..backend.payloads import doc_id, expect_list, expect_object
from ..core.exceptions import BackendError
from .model import Staff
from .repository import StaffRepository


class HttpStaffRepository(StaffRepository):
    def __init__(self, client: BackendClient):
        self._client = client

    def list_all(self) -> Sequence[Staff]:
        rows = expect_list(self._client.get("/staff"), "staff")
        return [_to_staff(r) for r in rows]

    def get_by_id(self, staff_id: str) -> Optional[Staff]:
        try:
            payload = self._client.get(f"/staff/{staff_id}")
        except BackendError as exc:
            if exc.status_code == 404:
                return None
            raise
        if not payload:
            return None
        return _to_staff(expect_object(payload, "staff"))

    def create(self, payload: Mapping[str, Any]) -> Any:
        return self._client.post("/staff", dict(payload))

    def update(self, staff_id: str, payload: Mapping[str, Any]) -> Any:
        return self._client.put(f"/staff/{staff_id}", dict(payload))

    def delete(self, staff_id: str) -> Any:
        return self._client.delete(f"/staff/{staff_id}")


def _to_staff(r: Mapping[str, Any]) -> Staff:
    return Staff(
        staff_id=doc_id(r),
        name=str(r.get("name") or ""),
        role=str(r.get("role") or ""),
        phone=r.get("phone"),
        address=r.get("address"),
        bank_account=r.get("bankAccount"),
        image_url=r.get("imageUrl"),
    )
