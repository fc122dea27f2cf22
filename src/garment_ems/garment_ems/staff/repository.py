from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import Staff


class StaffRepository(Protocol):
    def list_all(self) -> Sequence[Staff]:
        raise NotImplementedError

    def get_by_id(self, staff_id: str) -> Optional[Staff]:
        raise NotImplementedError

    def create(self, payload: Mapping[str, Any]) -> Any:
        raise NotImplementedError

    def update(self, staff_id: str, payload: Mapping[str, Any]) -> Any:
        raise NotImplementedError

    def delete(self, staff_id: str) -> Any:
        raise NotImplementedError
