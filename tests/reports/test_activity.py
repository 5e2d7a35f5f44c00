from datetime import date

from src.attendance_reports.attendance_reports.attendance.model import AttendanceWithName
from src.attendance_reports.attendance_reports.core.enums import AttendanceStatus
from src.attendance_reports.attendance_reports.reports.activity import (
    build_employee_name_map,
    join_activity,
    status_label,
)


def _row(att_id, status, *, employee_id=None, name=None):
    return AttendanceWithName(
        attendance_id=att_id,
        date=date(2024, 3, 1),
        status=status,
        employee_id=employee_id,
        employee_name=name,
    )


def test_status_labels():
    assert status_label(AttendanceStatus.PRESENT) == "Present"
    assert status_label(AttendanceStatus.ABSENT) == "Absent"
    assert status_label("P") == "Present"
    assert status_label("X") == "Absent"


def test_join_keeps_order_and_passes_fields_through():
    rows = [
        _row("3", AttendanceStatus.ABSENT, name="Bob"),
        _row("1", AttendanceStatus.PRESENT, name="Alice"),
    ]

    out = join_activity(rows)

    assert [a.id for a in out] == ["3", "1"]
    assert [a.status for a in out] == ["Absent", "Present"]
    assert [a.employee_name for a in out] == ["Bob", "Alice"]
    assert out[0].date == date(2024, 3, 1)


def test_name_falls_back_to_map_then_unknown():
    rows = [
        _row("1", AttendanceStatus.PRESENT, employee_id="E1"),
        _row("2", AttendanceStatus.PRESENT, employee_id="E9"),
        _row("3", AttendanceStatus.PRESENT),
    ]

    out = join_activity(rows, {"E1": "Alice"})

    assert [a.employee_name for a in out] == ["Alice", "Unknown", "Unknown"]


def test_build_employee_name_map(employees):
    assert build_employee_name_map(employees) == {"E1": "Alice", "E2": "Bob", "E3": "Cid"}


def test_unrecognised_status_from_row_reads_absent():
    row = AttendanceWithName.from_row(
        {"attendance_id": "a9", "date": "2024-03-05", "status": "L", "employee_id": "E1", "full_name": "Alice"}
    )

    [record] = join_activity([row])

    assert record.status == "Absent"
    assert record.employee_name == "Alice"
