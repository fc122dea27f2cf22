from __future__ import annotations

import math
from datetime import date
from typing import Any, Optional

from ..core.enums import AttendanceMark, Granularity, ShiftName
from ..core.exceptions import InvalidPeriodError, ValidationError
from .datetime_utils import coerce_date


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_month(month: Any) -> int:
    value = _whole_number(month)
    if value is None:
        raise InvalidPeriodError(f"Month must be a whole number, got {month!r}")
    if not 1 <= value <= 12:
        raise InvalidPeriodError(f"Month must be within 1..12, got {value}")
    return value


def require_year(year: Any) -> int:
    value = _whole_number(year)
    if value is None:
        raise InvalidPeriodError(f"Year must be a whole number, got {year!r}")
    if not 1 <= value <= 9999:
        raise InvalidPeriodError(f"Year out of range: {value}")
    return value


def _whole_number(value: Any) -> Optional[int]:
    """int for ints, integral floats and digit strings; None for anything else."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


def require_non_negative(value: Any, field_name: str) -> float:
    number = to_number(value, field_name)
    if number < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    return number


def require_positive(value: Any, field_name: str) -> float:
    number = to_number(value, field_name)
    if number <= 0:
        raise ValidationError(f"{field_name} must be greater than 0")
    return number


def require_whole(value: Any, field_name: str) -> int:
    number = require_non_negative(value, field_name)
    if int(number) != number:
        raise ValidationError(f"{field_name} must be a whole number")
    return int(number)


def to_number(value: Any, field_name: str) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    if isinstance(value, (int, float)):
        number = value
    else:
        try:
            number = float(str(value).strip())
        except (TypeError, ValueError):
            raise ValidationError(f"{field_name} must be a number")
    # "nan" and "inf" parse as floats but are not amounts.
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} must be a finite number")
    return number


def require_date(value: Any, field_name: str = "Date") -> date:
    if value is None or value == "":
        raise ValidationError(f"{field_name} is required")
    try:
        return coerce_date(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date, got {value!r}")


def require_shift(value: Any) -> ShiftName:
    if isinstance(value, ShiftName):
        return value
    try:
        return ShiftName(str(value or "").strip().capitalize())
    except ValueError:
        allowed = ", ".join(s.value for s in ShiftName)
        raise ValidationError(f"Shift must be one of {allowed}, got {value!r}")


def require_mark(value: Any) -> AttendanceMark:
    if isinstance(value, AttendanceMark):
        return value
    try:
        return AttendanceMark(str(value or "").strip().capitalize())
    except ValueError:
        allowed = ", ".join(m.value for m in AttendanceMark)
        raise ValidationError(f"Attendance status must be one of {allowed}, got {value!r}")


def parse_granularity(value: Any, default: Granularity = Granularity.DAILY) -> Granularity:
    if value is None or value == "":
        return default
    if isinstance(value, Granularity):
        return value
    text = str(value).strip().capitalize()
    try:
        return Granularity(text)
    except ValueError:
        allowed = ", ".join(g.value for g in Granularity)
        raise ValidationError(f"Granularity must be one of {allowed}, got {value!r}")


def parse_optional_int(value: Any, field_name: str) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")


def parse_flag(value: Any) -> Optional[bool]:
    """Parse query-string booleans ("true"/"false"/"1"/"0"); empty means unset."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in {"1", "true", "yes"}:
        return True
    if text in {"0", "false", "no"}:
        return False
    raise ValidationError(f"Expected a boolean flag, got {value!r}")
