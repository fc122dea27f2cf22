from __future__ import annotations

import logging
from typing import Any, Optional

from ..common.validators import require_non_empty
from ..core.enums import StaffRole
from ..core.exceptions import NotFoundError, ValidationError
from .model import Staff
from .repository import StaffRepository

logger = logging.getLogger(__name__)


class StaffService:
    def __init__(self, staff: StaffRepository):
        self._staff = staff

    def list_staff(self, *, role: Optional[str] = None) -> list[Staff]:
        items = list(self._staff.list_all())
        if role:
            items = [s for s in items if s.role.lower() == role.strip().lower()]
        items.sort(key=lambda s: s.name.lower())
        return items

    def get_staff(self, staff_id: str) -> Staff:
        staff = self._staff.get_by_id(str(staff_id))
        if not staff:
            raise NotFoundError(f"Staff {staff_id} not found")
        return staff

    def create_staff(
        self,
        *,
        name: str,
        role: Any = StaffRole.TAILOR.value,
        phone: Optional[str] = None,
        address: Optional[str] = None,
        bank_account: Optional[str] = None,
        image_url: Optional[str] = None,
    ) -> None:
        payload = _staff_payload(name, role or StaffRole.TAILOR, phone, address, bank_account, image_url)
        self._staff.create(payload)
        logger.info("created %s %s", payload["role"], payload["name"])

    def update_staff(
        self,
        staff_id: str,
        *,
        name: str,
        role: Any,
        phone: Optional[str] = None,
        address: Optional[str] = None,
        bank_account: Optional[str] = None,
        image_url: Optional[str] = None,
    ) -> None:
        current = self.get_staff(staff_id)
        payload = _staff_payload(name, role, phone, address, bank_account, image_url)
        self._staff.update(current.staff_id, payload)

    def delete_staff(self, staff_id: str) -> None:
        current = self.get_staff(staff_id)
        self._staff.delete(current.staff_id)
        logger.info("deleted staff %s (%s)", current.staff_id, current.name)


def _parse_role(value: Any) -> StaffRole:
    if isinstance(value, StaffRole):
        return value
    try:
        return StaffRole(str(value or "").strip().capitalize())
    except ValueError:
        allowed = ", ".join(r.value for r in StaffRole)
        raise ValidationError(f"Role must be one of {allowed}")


def _staff_payload(name, role, phone, address, bank_account, image_url) -> dict:
    return {
        "name": require_non_empty(name, "Name"),
        "role": _parse_role(role).value,
        "phone": (phone or "").strip(),
        "address": (address or "").strip(),
        "bankAccount": (bank_account or "").strip(),
        "imageUrl": (image_url or "").strip(),
    }
