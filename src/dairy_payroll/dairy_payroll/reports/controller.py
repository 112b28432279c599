from __future__ import annotations

from flask import Flask, request

from ..common.http import date_arg, json_view
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/reports/summary", methods=["GET"], endpoint="summary_report")
    @json_view
    def summary_report():
        employee_id = request.args.get("employee_id") or None
        if employee_id == "all":
            employee_id = None
        return container.report_service.build_summary(
            employee_id=employee_id,
            start=date_arg(request.args.get("start"), "Start date"),
            end=date_arg(request.args.get("end"), "End date"),
        )
