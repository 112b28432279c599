from __future__ import annotations

import logging
from typing import Sequence

from ..common.validators import require_mobile, require_non_empty
from ..core.exceptions import NotFoundError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage the employee register."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_employees()

    def get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def create_employee(self, *, name: str, mobile: str) -> Employee:
        name = require_non_empty(name, "Name")
        mobile = require_mobile(mobile)

        employee = self._employees.create_employee(name=name, mobile=mobile)
        logger.info("created employee %s (%s)", employee.id, employee.name)
        return employee

    def update_employee(self, employee_id: str, *, name: str, mobile: str) -> Employee:
        name = require_non_empty(name, "Name")
        mobile = require_mobile(mobile)

        if not self._employees.update_employee(employee_id, name=name, mobile=mobile):
            raise NotFoundError("Employee not found")
        return self.get_employee(employee_id)

    def delete_employee(self, employee_id: str) -> None:
        if not self._employees.delete_by_id(employee_id):
            raise NotFoundError("Employee not found")
        logger.info("deleted employee %s", employee_id)
