from __future__ import annotations

from datetime import date

import pytest

from src.garment_ems.garment_ems.analytics.aggregator import TimeSeriesAggregator
from src.garment_ems.garment_ems.analytics.model import DatedRecord


@pytest.fixture
def aggregator():
    return TimeSeriesAggregator()


@pytest.fixture
def legacy_aggregator():
    return TimeSeriesAggregator(label_order=True)


@pytest.fixture
def attendance_records():
    return [
        DatedRecord(date="2024-01-01", metrics={"presentShifts": 1, "absentShifts": 0}),
        DatedRecord(date="2024-01-02", metrics={"presentShifts": 0, "absentShifts": 1}),
        DatedRecord(date="2024-01-08", metrics={"presentShifts": 1, "absentShifts": 0}),
    ]


@pytest.fixture
def fixed_today(monkeypatch):
    """Pin today() used by services that default the year."""
    from src.garment_ems.garment_ems.common import datetime_utils
    from src.garment_ems.garment_ems.attendance import service as attendance_service
    from src.garment_ems.garment_ems.stitching import service as stitching_service

    value = date(2024, 3, 15)
    monkeypatch.setattr(datetime_utils, "today", lambda: value)
    monkeypatch.setattr(attendance_service, "today", lambda: value)
    monkeypatch.setattr(stitching_service, "today", lambda: value)
    return value
