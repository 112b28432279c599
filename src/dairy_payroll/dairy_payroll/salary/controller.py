from __future__ import annotations

from flask import Flask, request

from ..common.http import date_arg, json_body, json_view
from ..container import Container
from ..core.enums import AnimalType
from .service import parse_period


def register(app: Flask, container: Container) -> None:
    @app.route("/api/salary-entries", methods=["GET"], endpoint="list_salary_entries")
    @json_view
    def list_salary_entries():
        period = parse_period(request.args.get("period"))
        return container.salary_service.list_entries(period=period)

    @app.route("/api/salary-entries", methods=["POST"], endpoint="add_salary_entry")
    @json_view
    def add_salary_entry():
        data = json_body()
        entry = container.salary_service.add_entry(
            employee_id=str(data.get("employee_id", "")),
            amount=data.get("amount"),
            liters=data.get("liters"),
            animal_type=str(data.get("animal_type") or AnimalType.COW.value),
            entry_date=date_arg(data.get("date"), "Date"),
        )
        return entry, 201

    @app.route("/api/salary-entries/<entry_id>", methods=["DELETE"], endpoint="remove_salary_entry")
    @json_view
    def remove_salary_entry(entry_id: str):
        container.salary_service.remove_entry(entry_id)
        return {"deleted": entry_id}

    @app.route("/api/salary-entries/summary", methods=["GET"], endpoint="salary_summary")
    @json_view
    def salary_summary():
        period = parse_period(request.args.get("period"))
        employee_id = request.args.get("employee_id") or None
        if employee_id == "all":
            employee_id = None
        return {
            "period": period,
            "employees": container.salary_service.employee_summaries(period=period, employee_id=employee_id),
            "totals": container.salary_service.totals(period=period),
        }
