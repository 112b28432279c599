from __future__ import annotations

from typing import Sequence

from ..core.enums import AnimalType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, as_decimal, db_cursor, fetchall, fetchone, new_id
from .model import NewSalaryEntry, SalaryEntry
from .repository import SalaryRepository

_COLUMNS = "id, employee_id, date, amount, liters, animal_type, created_at"


def to_salary_entry(r: dict) -> SalaryEntry:
    return SalaryEntry(
        id=str(r["id"]),
        employee_id=str(r["employee_id"]),
        date=as_date(r["date"]),
        amount=as_decimal(r["amount"]),
        liters=as_decimal(r["liters"]),
        animal_type=AnimalType(r["animal_type"]),
        created_at=r["created_at"],
    )


class MySQLSalaryRepository(SalaryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_salary_entries(self) -> Sequence[SalaryEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM salary_entries ORDER BY date DESC, created_at DESC")
            return [to_salary_entry(r) for r in fetchall(cur)]

    def insert_salary_entry(self, entry: NewSalaryEntry) -> SalaryEntry:
        entry_id = new_id()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO salary_entries(id, employee_id, date, amount, liters, animal_type)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (entry_id, entry.employee_id, entry.date, entry.amount, entry.liters, entry.animal_type.value),
            )
            cur.execute(f"SELECT {_COLUMNS} FROM salary_entries WHERE id=%s", (entry_id,))
            return to_salary_entry(fetchone(cur))

    def delete_salary_entry(self, entry_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM salary_entries WHERE id=%s", (entry_id,))
            return cur.rowcount > 0
