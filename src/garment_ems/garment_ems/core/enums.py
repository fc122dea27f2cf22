from __future__ import annotations

from enum import Enum


class Granularity(str, Enum):
    """Calendar bucket size used by the aggregator."""

    DAILY = "Daily"
    WEEKLY = "Weekly"
    MONTHLY = "Monthly"


class StaffRole(str, Enum):
    """Roles that the salary run pays differently."""

    TAILOR = "Tailor"
    HELPER = "Helper"


class ShiftName(str, Enum):
    DAY = "Day"
    NIGHT = "Night"


class AttendanceMark(str, Enum):
    """Attendance value stored by the backend for one staff member and shift."""

    PRESENT = "Present"
    ABSENT = "Absent"


class PaymentStatus(str, Enum):
    """Payment state of a received trunk, derived from paid vs expected."""

    PENDING = "pending"
    PARTIAL = "partial"
    PAID = "paid"
