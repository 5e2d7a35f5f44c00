from __future__ import annotations

import pytest

from src.attendance_reports.attendance_reports.container import Container
from src.attendance_reports.attendance_reports.main import create_app
from src.attendance_reports.attendance_reports.reports.service import ReportsService
from src.attendance_reports.attendance_reports.supervisors.service import SupervisorProfileService


@pytest.fixture
def make_client(monkeypatch, supervisors_repo):
    monkeypatch.setenv("APP_ENV", "testing")

    def _make(employees_repo, attendance_repo, *, user_id="O1", role="OWNER", company_id="C1"):
        container = Container(
            reports_service=ReportsService(employees_repo, attendance_repo),
            supervisor_service=SupervisorProfileService(supervisors_repo, employees_repo, attendance_repo),
        )
        app = create_app(container)
        client = app.test_client()
        if user_id:
            with client.session_transaction() as sess:
                sess["user_id"] = user_id
                sess["role"] = role
                sess["company_id"] = company_id
                sess["email"] = f"{user_id.lower()}@example.com"
        return client

    return _make


def test_reports_requires_login(make_client, employees_repo, attendance_repo):
    client = make_client(employees_repo, attendance_repo, user_id=None)

    resp = client.get("/reports")

    assert resp.status_code == 401


def test_reports_forbidden_for_supervisor(make_client, employees_repo, attendance_repo):
    client = make_client(employees_repo, attendance_repo, user_id="S1", role="SUPERVISOR")

    resp = client.get("/reports")

    assert resp.status_code == 403
    assert resp.get_json()["message"] == "You don't have permission to view this page"


def test_reports_index_lists_cards(make_client, employees_repo, attendance_repo):
    client = make_client(employees_repo, attendance_repo)

    data = client.get("/reports").get_json()

    assert [r["title"] for r in data["reports"]] == [
        "Monthly Attendance Report",
        "Wage Summary Report",
        "Employee History",
        "Export All Data",
    ]


def test_wage_summary_download(make_client, employees_repo, attendance_repo):
    client = make_client(employees_repo, attendance_repo)

    resp = client.get("/reports/wage-summary")

    assert resp.status_code == 200
    assert resp.mimetype == "application/pdf"
    assert "attachment" in resp.headers["Content-Disposition"]
    assert "wage-summary-" in resp.headers["Content-Disposition"]


def test_wage_summary_rejects_unknown_format(make_client, employees_repo, attendance_repo):
    client = make_client(employees_repo, attendance_repo)

    assert client.get("/reports/wage-summary?format=docx").status_code == 400


def test_fetch_failure_is_retryable_502(make_client, fakes, attendance_repo):
    client = make_client(fakes.Employees([], fail=True), attendance_repo)

    resp = client.get("/reports/wage-summary")

    assert resp.status_code == 502
    body = resp.get_json()
    assert body["success"] is False
    assert body["retry"] is True


def test_monthly_report_validates_month(make_client, employees_repo, attendance_repo):
    client = make_client(employees_repo, attendance_repo)

    assert client.get("/reports/monthly?month=03-2024").status_code == 400
    resp = client.get("/reports/monthly?month=2024-03")
    assert resp.status_code == 200
    assert "monthly-attendance-2024-03.pdf" in resp.headers["Content-Disposition"]


def test_all_data_csv(make_client, employees_repo, attendance_repo):
    client = make_client(employees_repo, attendance_repo)

    resp = client.get("/reports/all-data.csv")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert resp.data.decode("utf-8-sig").startswith("Employee Name,Employee ID,Mobile")


def test_history_navigation(make_client, employees_repo, attendance_repo):
    client = make_client(employees_repo, attendance_repo)

    resp = client.get("/reports/history")
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/attendance-history")

    data = client.get("/attendance-history?employee_id=E2").get_json()
    assert data["records"] == [{"id": "a4", "date": "2024-03-03", "employee_name": "Bob", "status": "Present"}]


def test_supervisor_profile(make_client, employees_repo, attendance_repo):
    client = make_client(employees_repo, attendance_repo, user_id="S1", role="SUPERVISOR")

    data = client.get("/supervisor/profile").get_json()

    assert data["profile"] == {"name": "Sam Supervisor", "email": "s1@example.com"}
    assert data["stats"] == {"total_assigned": 2, "active_employees": 1, "recent_attendance": 5}
    assert [e["employee_id"] for e in data["employees"]] == ["E1", "E2"]
    assert data["activities"][0]["employee_name"] == "Unknown"


def test_supervisor_exports(make_client, employees_repo, attendance_repo):
    client = make_client(employees_repo, attendance_repo, user_id="S1", role="SUPERVISOR")

    xlsx = client.get("/supervisor/profile/employees.xlsx")
    pdf = client.get("/supervisor/profile/attendance")

    assert "assigned_employees.xlsx" in xlsx.headers["Content-Disposition"]
    assert "attendance_history.pdf" in pdf.headers["Content-Disposition"]
    assert pdf.data.startswith(b"%PDF")


def test_supervisor_pages_forbidden_for_owner(make_client, employees_repo, attendance_repo):
    client = make_client(employees_repo, attendance_repo)

    assert client.get("/supervisor/profile").status_code == 403
