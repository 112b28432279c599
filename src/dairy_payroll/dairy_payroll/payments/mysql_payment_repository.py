from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, as_decimal, db_cursor, fetchall, fetchone, new_id
from .model import NewPaymentRecord, PaymentRecord
from .repository import PaymentRepository

_COLUMNS = "id, employee_id, salary_amount, credit_deducted, net_paid, payment_date, created_at"


def to_payment_record(r: dict) -> PaymentRecord:
    return PaymentRecord(
        id=str(r["id"]),
        employee_id=str(r["employee_id"]),
        salary_amount=as_decimal(r["salary_amount"]),
        credit_deducted=as_decimal(r["credit_deducted"]),
        net_paid=as_decimal(r["net_paid"]),
        payment_date=as_date(r["payment_date"]),
        created_at=r["created_at"],
    )


def insert_payment_row(cur, record: NewPaymentRecord) -> PaymentRecord:
    record_id = new_id()
    cur.execute(
        """
        INSERT INTO payment_records(id, employee_id, salary_amount, credit_deducted, net_paid, payment_date)
        VALUES(%s,%s,%s,%s,%s,%s)
        """,
        (
            record_id,
            record.employee_id,
            record.salary_amount,
            record.credit_deducted,
            record.net_paid,
            record.payment_date,
        ),
    )
    cur.execute(f"SELECT {_COLUMNS} FROM payment_records WHERE id=%s", (record_id,))
    return to_payment_record(fetchone(cur))


class MySQLPaymentRepository(PaymentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def insert_payment_record(self, record: NewPaymentRecord) -> PaymentRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            return insert_payment_row(cur, record)

    def list_payment_records(self) -> Sequence[PaymentRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM payment_records ORDER BY payment_date DESC, created_at DESC")
            return [to_payment_record(r) for r in fetchall(cur)]
