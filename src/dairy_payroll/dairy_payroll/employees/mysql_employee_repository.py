from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, new_id
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "id, name, mobile, version, created_at"


def _to_employee(r: dict) -> Employee:
    return Employee(
        id=str(r["id"]),
        name=r["name"],
        mobile=r["mobile"],
        created_at=r["created_at"],
        version=int(r.get("version") or 0),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_employees(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY created_at DESC")
            return [_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE id=%s", (employee_id,))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def create_employee(self, *, name: str, mobile: str) -> Employee:
        employee_id = new_id()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO employees(id, name, mobile) VALUES(%s,%s,%s)",
                (employee_id, name, mobile),
            )
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE id=%s", (employee_id,))
            return _to_employee(fetchone(cur))

    def update_employee(self, employee_id: str, *, name: str, mobile: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE employees SET name=%s, mobile=%s WHERE id=%s",
                (name, mobile, employee_id),
            )
            if cur.rowcount > 0:
                return True
            # MySQL reports 0 affected rows when nothing changed
            cur.execute("SELECT id FROM employees WHERE id=%s", (employee_id,))
            return fetchone(cur) is not None

    def delete_by_id(self, employee_id: str) -> bool:
        # salary/credit/payment rows go with it (ON DELETE CASCADE)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE id=%s", (employee_id,))
            return cur.rowcount > 0
