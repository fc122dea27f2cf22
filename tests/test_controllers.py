from __future__ import annotations

from datetime import date
from typing import Optional

import pytest

from src.garment_ems.garment_ems.analytics.aggregator import TimeSeriesAggregator
from src.garment_ems.garment_ems.attendance.model import AttendanceEntry, AttendanceSheet, SheetLine
from src.garment_ems.garment_ems.attendance.service import AttendanceAnalyticsService
from src.garment_ems.garment_ems.attendance.sheet_service import AttendanceSheetService
from src.garment_ems.garment_ems.container import Container
from src.garment_ems.garment_ems.core.enums import AttendanceMark, Granularity, ShiftName
from src.garment_ems.garment_ems.core.exceptions import BackendError
from src.garment_ems.garment_ems.main import create_app
from src.garment_ems.garment_ems.pieces.model import Trunk
from src.garment_ems.garment_ems.pieces.service import PieceTrackingService
from src.garment_ems.garment_ems.salary.service import SalaryService
from src.garment_ems.garment_ems.staff.model import Staff
from src.garment_ems.garment_ems.staff.service import StaffService
from src.garment_ems.garment_ems.stitching.log_service import StitchingLogService
from src.garment_ems.garment_ems.stitching.model import ShiftTailor, StitchingEntry
from src.garment_ems.garment_ems.stitching.service import StitchingAnalyticsService


class InMemoryStaff:
    def __init__(self, staff):
        self._staff = {s.staff_id: s for s in staff}
        self.writes = []

    def list_all(self):
        return list(self._staff.values())

    def get_by_id(self, staff_id):
        return self._staff.get(staff_id)

    def create(self, payload):
        self.writes.append(("create", None, payload))

    def update(self, staff_id, payload):
        self.writes.append(("update", staff_id, payload))

    def delete(self, staff_id):
        self.writes.append(("delete", staff_id, None))


class InMemoryAttendance:
    def __init__(self, entries):
        self._entries = entries
        self.list_calls = 0
        self.saved = None

    def load_sheet(self, *, day, shift):
        lines = [SheetLine("t1", "Suresh", AttendanceMark.ABSENT), SheetLine("h1", "Arun", AttendanceMark.ABSENT)]
        return AttendanceSheet(day=day, shift=shift, saved=False, lines=lines)

    def save_sheet(self, rows):
        self.saved = rows

    def list_records(self, *, year: int, month: Optional[int] = None, staff_id: Optional[str] = None):
        self.list_calls += 1
        return [
            e
            for e in self._entries
            if e.work_date.year == year
            and (month is None or e.work_date.month == month)
            and (staff_id is None or e.staff_id == staff_id)
        ]


class InMemoryStitching:
    def __init__(self, entries):
        self._entries = entries
        self.list_calls = 0
        self.saved = []

    def list_shift_tailors(self, *, day, shift):
        return [ShiftTailor("t1", "Suresh", stitched_count=12)]

    def save_count(self, payload):
        self.saved.append(("one", payload))

    def save_bulk(self, payload):
        self.saved.append(("bulk", payload))

    def list_records(self, *, year: int, month: Optional[int] = None, tailor_id: Optional[str] = None):
        self.list_calls += 1
        return [
            e
            for e in self._entries
            if e.work_date.year == year
            and (month is None or e.work_date.month == month)
            and (tailor_id is None or e.tailor_id == tailor_id)
        ]


class InMemorySalaries:
    def __init__(self):
        self.finalized = None

    def list_history(self, *, staff_id: str, year: int):
        return [{"month": f"{year}-01", "salary": 8000}, {"month": f"{year}-02", "salary": 9000}]

    def finalize(self, payload):
        self.finalized = payload


class InMemoryTrunks:
    def __init__(self, trunks):
        self._trunks = {t.trunk_id: t for t in trunks}
        self.received = []

    def list_all(self):
        return list(self._trunks.values())

    def get_by_id(self, trunk_id):
        return self._trunks.get(trunk_id)

    def receive(self, **kwargs):
        self.received.append(kwargs)

    def dispatch(self, trunk_id):
        raise BackendError(500, "database down")

    def record_payment(self, trunk_id, amount):
        pass


@pytest.fixture
def salaries():
    return InMemorySalaries()


@pytest.fixture
def trunks():
    return InMemoryTrunks([Trunk("a", "T-1", 10, 500, 100, False, date(2024, 1, 3))])


@pytest.fixture
def staff():
    return InMemoryStaff([Staff("t1", "Suresh", "Tailor"), Staff("h1", "Arun", "Helper")])


@pytest.fixture
def attendance():
    return InMemoryAttendance(
        [
            AttendanceEntry("t1", "Suresh", date(2024, 1, 1), ShiftName.DAY, AttendanceMark.PRESENT),
            AttendanceEntry("h1", "Arun", date(2024, 1, 1), ShiftName.DAY, AttendanceMark.PRESENT),
            AttendanceEntry("h1", "Arun", date(2024, 1, 8), ShiftName.DAY, AttendanceMark.ABSENT),
        ]
    )


@pytest.fixture
def stitching():
    return InMemoryStitching([StitchingEntry("t1", "Suresh", date(2024, 1, 1), ShiftName.DAY, 42)])


@pytest.fixture
def client(salaries, trunks, staff, attendance, stitching):
    aggregator = TimeSeriesAggregator()
    container = Container(
        aggregator=aggregator,
        default_granularity=Granularity.DAILY,
        staff_service=StaffService(staff),
        attendance_service=AttendanceAnalyticsService(attendance, aggregator),
        attendance_sheet_service=AttendanceSheetService(attendance),
        stitching_service=StitchingAnalyticsService(stitching, staff, aggregator),
        stitching_log_service=StitchingLogService(stitching),
        salary_service=SalaryService(staff, attendance, stitching, salaries, aggregator=aggregator),
        piece_service=PieceTrackingService(trunks, aggregator),
    )
    app = create_app(settings_module="config.testing", container=container)
    return app.test_client()


def test_health(client):
    assert client.get("/api/health").get_json() == {"success": True, "status": "ok"}


def test_attendance_analytics_weekly(client):
    resp = client.get("/api/analytics/attendance?year=2024&month=1&granularity=Weekly")

    body = resp.get_json()
    assert resp.status_code == 200
    assert body["granularity"] == "Weekly"
    assert [b["label"] for b in body["buckets"]] == ["Week 1", "Week 2"]
    assert body["summary"]["metrics"]["presentShifts"]["total"] == 2
    assert body["summary"]["attendanceRate"] == pytest.approx(2 / 3)


def test_analytics_fetch_records_once(client, attendance, stitching):
    client.get("/api/analytics/attendance?year=2024&month=1")
    client.get("/api/analytics/stitching?year=2024&month=1")

    assert attendance.list_calls == 1
    assert stitching.list_calls == 1


def test_stitching_analytics_for_staff(client):
    body = client.get("/api/analytics/stitching?year=2024&month=1&staffId=t1").get_json()

    assert body["buckets"] == [{"label": "2024-01-01", "year": 2024, "stitchedCount": 42}]
    assert body["summary"]["consistencyRatio"] == 1


def test_bad_month_is_400(client):
    resp = client.get("/api/analytics/attendance?year=2024&month=13")

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_bad_granularity_is_400(client):
    assert client.get("/api/analytics/stitching?year=2024&granularity=Hourly").status_code == 400


def test_comparison_requires_period(client):
    assert client.get("/api/analytics/comparison?year=2024").status_code == 400

    body = client.get("/api/analytics/comparison?year=2024&month=1").get_json()
    assert [r["name"] for r in body["attendance"]] == ["Arun", "Suresh"]
    assert body["stitching"][0]["stitchedCount"] == 42


def test_salary_summary_and_finalize(client, salaries):
    body = client.get("/api/salary/summary?year=2024&month=1&ratePerPiece=10&ratePerShift=300").get_json()

    assert body["totals"] == {"pieces": 42, "shifts": 1, "payout": 720}

    resp = client.post("/api/salary/finalize", json={"year": 2024, "month": 1, "ratePerPiece": 10, "ratePerShift": 300})
    assert resp.status_code == 200
    assert salaries.finalized["totals"]["payout"] == 720


def test_salary_negative_rate_is_400(client):
    assert client.get("/api/salary/summary?year=2024&month=1&ratePerPiece=-5").status_code == 400


def test_salary_trend(client):
    body = client.get("/api/salary/trend/t1?year=2024").get_json()
    assert [b["label"] for b in body["buckets"]] == ["January", "February"]


def test_staff_endpoints(client):
    assert [s["name"] for s in client.get("/api/staff?role=tailor").get_json()["staff"]] == ["Suresh"]
    assert client.get("/api/staff/nobody").status_code == 404


def test_pieces_endpoints(client, trunks):
    listed = client.get("/api/pieces?paymentStatus=partial").get_json()
    assert [t["trunkNumber"] for t in listed["trunks"]] == ["T-1"]

    resp = client.post("/api/pieces/receive", json={"trunkNumber": "T-2", "quantity": 5, "expectedPayment": 250})
    assert resp.status_code == 201
    assert trunks.received[0]["item_type"] == "Trunk Pieces"

    assert client.put("/api/pieces/payment/a", json={"paymentAmount": 0}).status_code == 400
    assert client.put("/api/pieces/payment/a", json={"paymentAmount": 50}).status_code == 200

    payments = client.get("/api/pieces/payments?year=2024&granularity=Monthly").get_json()
    assert payments["buckets"][0]["label"] == "January"
    assert payments["outstanding"] == 400


def test_backend_failure_is_502(client):
    resp = client.post("/api/pieces/dispatch/a")

    assert resp.status_code == 502
    assert "database down" in resp.get_json()["message"]


@pytest.mark.parametrize("rate", ["nan", "inf", "-inf"])
def test_salary_non_finite_rate_is_400(client, rate):
    resp = client.get(f"/api/salary/summary?year=2024&month=3&ratePerPiece={rate}&ratePerShift=1")

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_receive_infinite_quantity_is_400(client, trunks):
    resp = client.post("/api/pieces/receive", json={"trunkNumber": "T-9", "quantity": "inf", "expectedPayment": 0})

    assert resp.status_code == 400
    assert trunks.received == []


def test_staff_create_update_delete(client, staff):
    created = client.post("/api/staff", json={"name": " Meena ", "phone": "99", "bankAccount": "AC1"})
    assert created.status_code == 201

    assert client.put("/api/staff/h1", json={"name": "Arun K", "role": "helper"}).status_code == 200
    assert client.delete("/api/staff/t1").status_code == 200

    assert staff.writes[0] == (
        "create",
        None,
        {"name": "Meena", "role": "Tailor", "phone": "99", "address": "", "bankAccount": "AC1", "imageUrl": ""},
    )
    assert staff.writes[1][:2] == ("update", "h1")
    assert staff.writes[1][2]["role"] == "Helper"
    assert staff.writes[2] == ("delete", "t1", None)


def test_staff_write_validation(client, staff):
    assert client.post("/api/staff", json={"name": "", "role": "Tailor"}).status_code == 400
    assert client.post("/api/staff", json={"name": "X", "role": "Cutter"}).status_code == 400
    assert client.delete("/api/staff/nobody").status_code == 404
    assert staff.writes == []


def test_attendance_sheet_defaults_to_absent(client, attendance):
    body = client.get("/api/attendance?date=2024-03-05&shift=Night").get_json()

    assert body["saved"] is False
    assert {line["status"] for line in body["lines"]} == {"Absent"}

    resp = client.post(
        "/api/attendance",
        json={"date": "2024-03-05", "shift": "Night", "records": [{"staffId": "t1", "status": "Present"}]},
    )

    assert resp.status_code == 200
    assert attendance.saved == [
        {"staffId": "t1", "date": "2024-03-05", "shift": "Night", "status": "Present"},
        {"staffId": "h1", "date": "2024-03-05", "shift": "Night", "status": "Absent"},
    ]


def test_attendance_sheet_validation(client, attendance):
    assert client.get("/api/attendance?date=2024-03-05&shift=Evening").status_code == 400
    assert client.get("/api/attendance?shift=Day").status_code == 400

    resp = client.post(
        "/api/attendance",
        json={"date": "2024-03-05", "shift": "Day", "records": [{"staffId": "zz", "status": "Present"}]},
    )
    assert resp.status_code == 400
    assert attendance.saved is None


def test_stitching_entry_endpoints(client, stitching):
    tailors = client.get("/api/stitching/tailors?date=2024-03-05&shift=Day").get_json()["tailors"]
    assert tailors == [{"tailorId": "t1", "name": "Suresh", "stitchedCount": 12, "imageUrl": None}]

    one = client.post(
        "/api/stitching",
        json={"date": "2024-03-05", "shift": "Day", "tailorId": "t1", "stitchedCount": 30, "isUpdate": True},
    )
    assert one.get_json()["message"] == "Stitched count updated"

    bulk = client.post(
        "/api/stitching/bulk",
        json={"date": "2024-03-05", "shift": "Day", "records": [{"tailorId": "t1", "stitchedCount": 31}]},
    )
    assert bulk.get_json()["totalPieces"] == 31

    assert stitching.saved == [
        ("one", {"date": "2024-03-05", "shift": "Day", "tailorId": "t1", "stitchedCount": 30, "isUpdate": True}),
        ("bulk", {"date": "2024-03-05", "shift": "Day", "records": [{"tailorId": "t1", "stitchedCount": 31}]}),
    ]


def test_stitching_count_must_be_whole(client, stitching):
    resp = client.post(
        "/api/stitching",
        json={"date": "2024-03-05", "shift": "Day", "tailorId": "t1", "stitchedCount": 2.5},
    )

    assert resp.status_code == 400
    assert stitching.saved == []
