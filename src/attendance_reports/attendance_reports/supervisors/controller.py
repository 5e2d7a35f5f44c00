from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.auth import role_required
from ..common.http import fetch_failed, send_export
from ..container import Container
from ..core.enums import ExportFormat, Role


def register(app: Flask, container: Container) -> None:
    supervisor_required = role_required(Role.SUPERVISOR)

    def _scope() -> tuple[str, str]:
        return str(session["company_id"]), str(session["user_id"])

    @app.route("/supervisor/profile", methods=["GET"], endpoint="supervisor_profile")
    @supervisor_required
    def supervisor_profile():
        company_id, supervisor_id = _scope()
        result = container.supervisor_service.load_profile(company_id, supervisor_id, email=session.get("email"))
        if not result.ok:
            return fetch_failed(result)

        profile = result.value
        return jsonify(
            {
                "success": True,
                "profile": {"name": profile.full_name, "email": profile.email},
                "stats": {
                    "total_assigned": profile.stats.total_assigned,
                    "active_employees": profile.stats.active_employees,
                    "recent_attendance": profile.stats.recent_attendance,
                },
                "employees": [
                    {
                        "employee_id": e.employee_id,
                        "full_name": e.full_name,
                        "phone": e.phone or e.mobile,
                        "status": e.status.value,
                    }
                    for e in profile.employees
                ],
                "activities": [a.to_dict() for a in profile.activities],
            }
        )

    @app.route("/supervisor/profile/employees.xlsx", methods=["GET"], endpoint="supervisor_employees_xlsx")
    @supervisor_required
    def supervisor_employees_xlsx():
        company_id, supervisor_id = _scope()
        result = container.supervisor_service.export_employees(company_id, supervisor_id)
        if not result.ok:
            return fetch_failed(result)
        return send_export(result.value)

    @app.route("/supervisor/profile/attendance", methods=["GET"], endpoint="supervisor_attendance_export")
    @supervisor_required
    def supervisor_attendance_export():
        fmt = request.args.get("format", ExportFormat.PDF.value)
        if fmt not in {ExportFormat.PDF.value, ExportFormat.XLSX.value}:
            return jsonify({"success": False, "message": f"Unsupported format: {fmt}"}), 400

        company_id, supervisor_id = _scope()
        result = container.supervisor_service.export_activity(company_id, supervisor_id, fmt=ExportFormat(fmt))
        if not result.ok:
            return fetch_failed(result)
        return send_export(result.value)
