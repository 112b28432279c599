from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import today_local
from ..common.http import date_arg, json_body, json_view
from ..container import Container
from ..payroll import aggregation as agg
from .service import parse_date_range


def _all_to_none(value):
    return None if not value or value == "all" else value


def register(app: Flask, container: Container) -> None:
    def _entry_kwargs(data: dict) -> dict:
        return dict(
            employee_id=str(data.get("employee_id", "")),
            entry_date=date_arg(data.get("date"), "Date") or today_local(),
            item_name=str(data.get("item_name", "")),
            amount=data.get("amount"),
            notes=str(data.get("notes") or ""),
        )

    @app.route("/api/credit-entries", methods=["GET"], endpoint="list_credit_entries")
    @json_view
    def list_credit_entries():
        entries = container.credit_service.filter_entries(
            search=request.args.get("search", ""),
            employee_id=_all_to_none(request.args.get("employee_id")),
            item_name=_all_to_none(request.args.get("item")),
            date_range=parse_date_range(request.args.get("range")),
        )
        return {"entries": entries, "total_amount": agg.total_available_credit(entries)}

    @app.route("/api/credit-entries", methods=["POST"], endpoint="add_credit_entry")
    @json_view
    def add_credit_entry():
        return container.credit_service.add_entry(**_entry_kwargs(json_body())), 201

    @app.route("/api/credit-entries/<entry_id>", methods=["PUT"], endpoint="update_credit_entry")
    @json_view
    def update_credit_entry(entry_id: str):
        return container.credit_service.update_entry(entry_id, **_entry_kwargs(json_body()))

    @app.route("/api/credit-entries/<entry_id>", methods=["DELETE"], endpoint="remove_credit_entry")
    @json_view
    def remove_credit_entry(entry_id: str):
        container.credit_service.remove_entry(entry_id)
        return {"deleted": entry_id}

    @app.route("/api/credit-entries/summary", methods=["GET"], endpoint="credit_summary")
    @json_view
    def credit_summary():
        return {
            "employees": container.credit_service.employee_summaries(),
            "top_items": [{"item_name": name, "amount": amount} for name, amount in container.credit_service.top_items()],
        }
