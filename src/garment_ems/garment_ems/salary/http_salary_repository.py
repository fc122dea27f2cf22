from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..backend.client import BackendClient
from ..backend.payloads import expect_list
from .repository import SalaryRepository


class HttpSalaryRepository(SalaryRepository):
    def __init__(self, client: BackendClient):
        self._client = client

    def list_history(self, *, staff_id: str, year: int) -> Sequence[Mapping[str, Any]]:
        payload = self._client.get("/salary/history", params={"staffId": staff_id, "year": int(year)})
        return expect_list(payload, "salary history")

    def finalize(self, payload: Mapping[str, Any]) -> Any:
        return self._client.post("/salary/finalize", dict(payload))
