from __future__ import annotations

from flask import Flask, request

from ..common.http import json_body, json_view
from ..container import Container

_CREDIT_PREFIX = "credit."


def register(app: Flask, container: Container) -> None:
    @app.route("/api/settlements", methods=["GET"], endpoint="settlement_overview")
    @json_view
    def settlement_overview():
        # ?credit.<employee_id>=<amount> carries the operator's manual deductions
        manual = {k[len(_CREDIT_PREFIX):]: v for k, v in request.args.items() if k.startswith(_CREDIT_PREFIX)}
        summaries = container.settlement_service.payment_summaries(manual)
        return {
            "summaries": summaries,
            "statistics": container.settlement_service.statistics(summaries),
        }

    @app.route("/api/settlements/<employee_id>/preview", methods=["GET"], endpoint="preview_settlement")
    @json_view
    def preview_settlement(employee_id: str):
        plan = container.settlement_service.preview(employee_id, request.args.get("manual_credit"))
        return {
            "payment": plan.payment,
            "salary_entries_cleared": len(plan.salary_entry_ids),
            "credit_entries_removed": len(plan.removed_credit_ids),
            "credit_entries_reduced": plan.reduced_credit_entries,
            "available_credit_before": plan.available_credit_before,
            "available_credit_after": plan.available_credit_after,
        }

    @app.route("/api/settlements/<employee_id>", methods=["POST"], endpoint="settle_salary")
    @json_view
    def settle_salary(employee_id: str):
        data = json_body()
        return container.settlement_service.settle(employee_id, data.get("manual_credit")), 201

    @app.route("/api/payments", methods=["GET"], endpoint="list_payments")
    @json_view
    def list_payments():
        employee_id = request.args.get("employee_id") or None
        return container.settlement_service.list_payments(employee_id=employee_id)
