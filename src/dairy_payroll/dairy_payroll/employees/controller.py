from __future__ import annotations

from flask import Flask

from ..common.http import json_body, json_view
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @json_view
    def list_employees():
        return container.employee_service.list_employees()

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    @json_view
    def create_employee():
        data = json_body()
        employee = container.employee_service.create_employee(
            name=str(data.get("name", "")),
            mobile=str(data.get("mobile", "")),
        )
        return employee, 201

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="update_employee")
    @json_view
    def update_employee(employee_id: str):
        data = json_body()
        return container.employee_service.update_employee(
            employee_id,
            name=str(data.get("name", "")),
            mobile=str(data.get("mobile", "")),
        )

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @json_view
    def delete_employee(employee_id: str):
        container.employee_service.delete_employee(employee_id)
        return {"deleted": employee_id}
