from __future__ import annotations

import logging

from ..core.exceptions import ConcurrentSettlementError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor
from ..payments.model import PaymentRecord
from ..payments.mysql_payment_repository import insert_payment_row
from .model import SettlementPlan
from .repository import SettlementRepository

logger = logging.getLogger(__name__)


def _placeholders(values) -> str:
    return ",".join(["%s"] * len(values))


class MySQLSettlementRepository(SettlementRepository):
    """Applies a SettlementPlan in a single transaction (see db_cursor)."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def apply_settlement(self, plan: SettlementPlan) -> PaymentRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE employees SET version = version + 1 WHERE id=%s AND version=%s",
                (plan.employee_id, plan.expected_version),
            )
            if cur.rowcount != 1:
                raise ConcurrentSettlementError("Employee was changed by another settlement, reload and retry")

            record = insert_payment_row(cur, plan.payment)

            # each consumed credit row must still hold the amount the plan read
            read = dict(plan.credit_amounts_read)
            for credit_id in plan.removed_credit_ids:
                cur.execute(
                    "DELETE FROM credit_entries WHERE id=%s AND employee_id=%s AND amount=%s",
                    (credit_id, plan.employee_id, read[credit_id]),
                )
                if cur.rowcount != 1:
                    raise ConcurrentSettlementError("Credit entries changed during settlement")

            for entry in plan.reduced_credit_entries:
                cur.execute(
                    "UPDATE credit_entries SET amount=%s WHERE id=%s AND employee_id=%s AND amount=%s",
                    (entry.amount, entry.id, plan.employee_id, read[entry.id]),
                )
                if cur.rowcount != 1:
                    raise ConcurrentSettlementError("Credit entries changed during settlement")

            if plan.salary_entry_ids:
                cur.execute(
                    f"DELETE FROM salary_entries WHERE employee_id=%s AND id IN ({_placeholders(plan.salary_entry_ids)})",
                    (plan.employee_id, *plan.salary_entry_ids),
                )
                if cur.rowcount != len(plan.salary_entry_ids):
                    raise ConcurrentSettlementError("Salary entries changed during settlement")

            logger.debug(
                "settlement %s applied: removed %d credit, reduced %d credit, cleared %d salary",
                record.id,
                len(plan.removed_credit_ids),
                len(plan.reduced_credit_entries),
                len(plan.salary_entry_ids),
            )
            return record
