from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import StaffRole


@dataclass(frozen=True)
class Staff:
    """Domain entity: a staff member as stored by the backend."""

    staff_id: str
    name: str
    role: str
    phone: Optional[str] = None
    address: Optional[str] = None
    bank_account: Optional[str] = None
    image_url: Optional[str] = None

    @property
    def is_tailor(self) -> bool:
        return self.role == StaffRole.TAILOR.value

    @property
    def is_helper(self) -> bool:
        return self.role == StaffRole.HELPER.value

    def to_dict(self) -> dict:
        return {
            "id": self.staff_id,
            "name": self.name,
            "role": self.role,
            "phone": self.phone,
            "address": self.address,
            "bankAccount": self.bank_account,
            "imageUrl": self.image_url,
        }
