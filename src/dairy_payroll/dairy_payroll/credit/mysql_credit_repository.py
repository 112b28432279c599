from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, as_decimal, db_cursor, fetchall, fetchone, new_id
from .model import CreditEntry, CreditEntryInput
from .repository import CreditRepository

_COLUMNS = "id, employee_id, date, item_name, amount, created_at"


def to_credit_entry(r: dict) -> CreditEntry:
    return CreditEntry(
        id=str(r["id"]),
        employee_id=str(r["employee_id"]),
        date=as_date(r["date"]),
        item_name=r["item_name"],
        amount=as_decimal(r["amount"]),
        created_at=r["created_at"],
    )


def insert_credit_rows(cur, entries: Sequence[CreditEntry]) -> None:
    """Reinsert entries keeping their id and created_at."""
    if not entries:
        return
    cur.executemany(
        """
        INSERT INTO credit_entries(id, employee_id, date, item_name, amount, created_at)
        VALUES(%s,%s,%s,%s,%s,%s)
        """,
        [(e.id, e.employee_id, e.date, e.item_name, e.amount, e.created_at) for e in entries],
    )


class MySQLCreditRepository(CreditRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_credit_entries(self) -> Sequence[CreditEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM credit_entries ORDER BY date DESC, created_at DESC")
            return [to_credit_entry(r) for r in fetchall(cur)]

    def insert_credit_entry(self, entry: CreditEntryInput) -> CreditEntry:
        entry_id = new_id()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO credit_entries(id, employee_id, date, item_name, amount)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (entry_id, entry.employee_id, entry.date, entry.item_name, entry.amount),
            )
            cur.execute(f"SELECT {_COLUMNS} FROM credit_entries WHERE id=%s", (entry_id,))
            return to_credit_entry(fetchone(cur))

    def update_credit_entry(self, entry_id: str, entry: CreditEntryInput) -> Optional[CreditEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE credit_entries
                SET employee_id=%s, date=%s, item_name=%s, amount=%s
                WHERE id=%s
                """,
                (entry.employee_id, entry.date, entry.item_name, entry.amount, entry_id),
            )
            cur.execute(f"SELECT {_COLUMNS} FROM credit_entries WHERE id=%s", (entry_id,))
            r = fetchone(cur)
            return to_credit_entry(r) if r else None

    def delete_credit_entry(self, entry_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM credit_entries WHERE id=%s", (entry_id,))
            return cur.rowcount > 0

    def replace_all_credit_entries(self, entries: Sequence[CreditEntry]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM credit_entries")
            insert_credit_rows(cur, entries)
