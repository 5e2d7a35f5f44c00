from __future__ import annotations

from flask import Flask, jsonify, redirect, request, session, url_for

from ..common.auth import role_required
from ..common.datetime_utils import parse_month, today_local
from ..common.http import fetch_failed, send_export
from ..container import Container
from ..core.enums import ExportFormat, Role


def register(app: Flask, container: Container) -> None:
    owner_required = role_required(Role.OWNER)

    def _company_id() -> str:
        return str(session["company_id"])

    @app.route("/reports", methods=["GET"], endpoint="reports")
    @owner_required
    def reports():
        return jsonify(
            {
                "title": "Reports",
                "subtitle": "Generate and download attendance and wage reports",
                "reports": [
                    {
                        "title": "Monthly Attendance Report",
                        "description": "Generate a comprehensive monthly attendance report for all employees",
                        "url": url_for("monthly_report"),
                    },
                    {
                        "title": "Wage Summary Report",
                        "description": "Download wage calculations and payment summaries",
                        "url": url_for("wage_summary_report"),
                    },
                    {
                        "title": "Employee History",
                        "description": "View complete attendance history for individual employees",
                        "url": url_for("reports_history"),
                    },
                    {
                        "title": "Export All Data",
                        "description": "Export all employee and attendance data to Excel/CSV",
                        "url": url_for("export_all_data"),
                    },
                ],
            }
        )

    @app.route("/reports/wage-summary", methods=["GET"], endpoint="wage_summary_report")
    @owner_required
    def wage_summary_report():
        fmt = request.args.get("format", ExportFormat.PDF.value)
        if fmt not in {ExportFormat.PDF.value, ExportFormat.XLSX.value}:
            return jsonify({"success": False, "message": f"Unsupported format: {fmt}"}), 400

        result = container.reports_service.wage_summary(_company_id(), today=today_local(), fmt=ExportFormat(fmt))
        if not result.ok:
            return fetch_failed(result)
        return send_export(result.value)

    @app.route("/reports/monthly", methods=["GET"], endpoint="monthly_report")
    @owner_required
    def monthly_report():
        month_s = request.args.get("month")
        try:
            month = parse_month(month_s) if month_s else today_local().replace(day=1)
        except ValueError:
            return jsonify({"success": False, "message": "month must be YYYY-MM"}), 400

        result = container.reports_service.monthly_attendance(_company_id(), month=month)
        if not result.ok:
            return fetch_failed(result)
        return send_export(result.value)

    @app.route("/reports/all-data.csv", methods=["GET"], endpoint="export_all_data")
    @owner_required
    def export_all_data():
        result = container.reports_service.export_all_data(_company_id(), today=today_local())
        if not result.ok:
            return fetch_failed(result)
        return send_export(result.value)

    @app.route("/reports/history", methods=["GET"], endpoint="reports_history")
    @owner_required
    def reports_history():
        return redirect(url_for("attendance_history"))

    @app.route("/attendance-history", methods=["GET"], endpoint="attendance_history")
    @owner_required
    def attendance_history():
        employee_id = request.args.get("employee_id")
        if not employee_id:
            return jsonify({"success": True, "employee_id": None, "records": []})

        result = container.reports_service.employee_history(_company_id(), employee_id)
        if not result.ok:
            return fetch_failed(result)
        return jsonify(
            {
                "success": True,
                "employee_id": employee_id,
                "records": [a.to_dict() for a in result.value],
            }
        )
