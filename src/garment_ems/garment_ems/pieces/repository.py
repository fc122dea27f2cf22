from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import Trunk


class TrunkRepository(Protocol):
    def list_all(self) -> Sequence[Trunk]:
        raise NotImplementedError

    def get_by_id(self, trunk_id: str) -> Optional[Trunk]:
        raise NotImplementedError

    def receive(self, *, trunk_number: str, item_type: str, quantity: int, expected_payment: float) -> Any:
        raise NotImplementedError

    def dispatch(self, trunk_id: str) -> Any:
        raise NotImplementedError

    def record_payment(self, trunk_id: str, amount: float) -> Any:
        raise NotImplementedError
