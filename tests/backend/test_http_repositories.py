from __future__ import annotations

from datetime import date

import pytest

from src.garment_ems.garment_ems.attendance.http_attendance_repository import HttpAttendanceRepository
from src.garment_ems.garment_ems.core.enums import AttendanceMark, ShiftName
from src.garment_ems.garment_ems.core.exceptions import BackendError, MalformedRecordError
from src.garment_ems.garment_ems.pieces.http_trunk_repository import HttpTrunkRepository
from src.garment_ems.garment_ems.staff.http_staff_repository import HttpStaffRepository
from src.garment_ems.garment_ems.stitching.http_stitching_repository import HttpStitchingRepository


class FakeClient:
    def __init__(self, responses):
        self._responses = responses
        self.calls = []

    def get(self, path, params=None):
        self.calls.append(("GET", path, params))
        value = self._responses[path]
        if isinstance(value, Exception):
            raise value
        return value

    def post(self, path, payload=None):
        self.calls.append(("POST", path, payload))

    def put(self, path, payload=None):
        self.calls.append(("PUT", path, payload))

    def delete(self, path):
        self.calls.append(("DELETE", path, None))


def test_staff_repository_maps_documents():
    client = FakeClient(
        {
            "/staff": [{"_id": "s1", "name": "Ravi", "role": "Tailor", "bankAccount": "123"}],
            "/staff/missing": BackendError(404, "Staff not found"),
        }
    )
    repo = HttpStaffRepository(client)

    staff = repo.list_all()

    assert staff[0].staff_id == "s1"
    assert staff[0].bank_account == "123"
    assert staff[0].is_tailor
    assert repo.get_by_id("missing") is None


def test_attendance_repository_reads_embedded_staff():
    client = FakeClient(
        {
            "/attendance/records": {
                "data": [
                    {
                        "staffId": {"_id": "s1", "name": "Ravi"},
                        "date": "2024-01-02T00:00:00.000Z",
                        "shift": "Night",
                        "status": "Absent",
                    }
                ]
            }
        }
    )

    entries = HttpAttendanceRepository(client).list_records(year=2024, month=1)

    assert client.calls[0] == ("GET", "/attendance/records", {"year": 2024, "month": "01", "staffId": None})
    e = entries[0]
    assert (e.staff_id, e.staff_name, e.work_date) == ("s1", "Ravi", date(2024, 1, 2))
    assert (e.shift, e.status) == (ShiftName.NIGHT, AttendanceMark.ABSENT)


def test_attendance_repository_rejects_unknown_status():
    client = FakeClient({"/attendance/records": [{"staffId": "s1", "date": "2024-01-02", "shift": "Day", "status": "Late"}]})
    with pytest.raises(MalformedRecordError):
        HttpAttendanceRepository(client).list_records(year=2024)


def test_stitching_repository_reports_bad_dates():
    client = FakeClient(
        {"/stitching/records": [{"tailorId": "t1", "date": "not-a-date", "shift": "Day", "stitchedCount": 4}]}
    )
    with pytest.raises(MalformedRecordError):
        HttpStitchingRepository(client).list_records(year=2024, month=3)


def test_trunk_repository_round_trips_commands():
    client = FakeClient(
        {
            "/pieces": [
                {
                    "_id": "a",
                    "trunkNumber": "T-1",
                    "quantity": 10,
                    "expectedPayment": 500,
                    "totalPaid": 200,
                    "isDispatched": True,
                    "receivedDate": "2024-01-03T10:00:00.000Z",
                }
            ]
        }
    )
    repo = HttpTrunkRepository(client)

    trunk = repo.get_by_id("a")
    repo.dispatch("a")
    repo.record_payment("a", 300)

    assert trunk.item_type == "Trunk Pieces"
    assert trunk.received_date == date(2024, 1, 3)
    assert trunk.dispatched_date is None
    assert client.calls[-2:] == [
        ("POST", "/pieces/dispatch/a", None),
        ("PUT", "/pieces/payment/a", {"paymentAmount": 300}),
    ]


def test_staff_repository_writes():
    client = FakeClient({})
    repo = HttpStaffRepository(client)

    repo.create({"name": "Ravi", "role": "Tailor"})
    repo.update("s1", {"name": "Ravi K", "role": "Tailor"})
    repo.delete("s1")

    assert client.calls == [
        ("POST", "/staff", {"name": "Ravi", "role": "Tailor"}),
        ("PUT", "/staff/s1", {"name": "Ravi K", "role": "Tailor"}),
        ("DELETE", "/staff/s1", None),
    ]


def test_attendance_sheet_before_and_after_saving():
    unsaved = FakeClient({"/attendance": {"type": "staff", "data": [{"_id": "s1", "name": "Ravi"}]}})
    saved = FakeClient(
        {
            "/attendance": {
                "type": "attendance",
                "data": [{"staffId": {"_id": "s1", "name": "Ravi", "imageUrl": "r.png"}, "status": "Present"}],
            }
        }
    )

    before = HttpAttendanceRepository(unsaved).load_sheet(day=date(2024, 3, 5), shift=ShiftName.NIGHT)
    after = HttpAttendanceRepository(saved).load_sheet(day=date(2024, 3, 5), shift=ShiftName.NIGHT)

    assert unsaved.calls[0] == ("GET", "/attendance", {"date": "2024-03-05", "shift": "Night"})
    assert (before.saved, before.lines[0].status) == (False, AttendanceMark.ABSENT)
    assert (after.saved, after.lines[0].status, after.lines[0].image_url) == (True, AttendanceMark.PRESENT, "r.png")


def test_attendance_sheet_rejects_unknown_type():
    client = FakeClient({"/attendance": {"type": "holiday", "data": []}})
    with pytest.raises(BackendError):
        HttpAttendanceRepository(client).load_sheet(day=date(2024, 3, 5), shift=ShiftName.DAY)


def test_attendance_sheet_is_posted_as_list():
    client = FakeClient({})
    rows = [{"staffId": "s1", "date": "2024-03-05", "shift": "Day", "status": "Absent"}]

    HttpAttendanceRepository(client).save_sheet(rows)

    assert client.calls == [("POST", "/attendance", rows)]


def test_stitching_shift_tailors_and_saves():
    client = FakeClient(
        {"/stitching/tailors": [{"_id": "t1", "name": "Ravi", "stitchedCount": 14}, {"_id": "t2", "name": "Mani"}]}
    )
    repo = HttpStitchingRepository(client)

    tailors = repo.list_shift_tailors(day=date(2024, 3, 5), shift=ShiftName.DAY)
    repo.save_count({"tailorId": "t1", "stitchedCount": 15})
    repo.save_bulk({"records": []})

    assert [(t.tailor_id, t.stitched_count) for t in tailors] == [("t1", 14), ("t2", None)]
    assert client.calls[1:] == [
        ("POST", "/stitching", {"tailorId": "t1", "stitchedCount": 15}),
        ("POST", "/stitching/bulk", {"records": []}),
    ]
