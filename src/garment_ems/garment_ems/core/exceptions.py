from __future__ import annotations

from typing import Any, Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class MalformedRecordError(ValidationError):
    """Raised when a record has a missing/unparseable date or a bad metric value."""

    def __init__(self, message: str, *, record: Any = None):
        self.record = record
        super().__init__(f"{message}: {record!r}" if record is not None else message)


class EmptyMetricKeysError(ValidationError):
    """Raised when an aggregation is requested without any metric keys."""


class InvalidPeriodError(ValidationError):
    """Raised when a year/month period is out of range."""


class NotFoundError(DomainError):
    """Raised when a staff member or trunk does not exist."""


class BackendError(DomainError):
    """Raised when the EMS backend is unreachable or answers with an error status."""

    def __init__(self, status_code: Optional[int], detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"[{status_code}] {detail}" if status_code is not None else detail)
