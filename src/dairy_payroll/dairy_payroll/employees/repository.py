from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): services depend on this interface, never on a concrete DB.
    """

    def list_employees(self) -> Sequence[Employee]:
        """All employees, newest first."""

        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def create_employee(self, *, name: str, mobile: str) -> Employee:
        raise NotImplementedError

    def update_employee(self, employee_id: str, *, name: str, mobile: str) -> bool:
        raise NotImplementedError

    def delete_by_id(self, employee_id: str) -> bool:
        raise NotImplementedError
