from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence


class SalaryRepository(Protocol):
    def list_history(self, *, staff_id: str, year: int) -> Sequence[Mapping[str, Any]]:
        """Finalized monthly salary rows: ``{"month": "YYYY-MM", "salary": n}``."""

        raise NotImplementedError

    def finalize(self, payload: Mapping[str, Any]) -> Any:
        raise NotImplementedError
