from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

from ..core.constants import HISTORICAL_CREDIT_ITEM, HISTORICAL_MATCH_TOLERANCE, UNKNOWN_EMPLOYEE
from ..core.exceptions import ValidationError
from ..credit.repository import CreditRepository
from ..employees.repository import EmployeeRepository
from ..payments.repository import PaymentRepository
from ..payroll import aggregation as agg
from ..salary.repository import SalaryRepository
from .model import CreditReportRow, EmployeeBalance, ReportStats, SalaryReportRow, SummaryReport


class ReportService:
    """Summary report over every collection, with settled history folded back in.

    Settlement deletes salary entries and consumes credit, so each payment
    record is turned back into a synthetic salary row (unless a live entry of
    the same employee already carries that amount) and a synthetic credit row
    for the deducted part.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        salaries: SalaryRepository,
        credits: CreditRepository,
        payments: PaymentRepository,
    ):
        self._employees = employees
        self._salaries = salaries
        self._credits = credits
        self._payments = payments

    def build_summary(
        self,
        *,
        employee_id: Optional[str] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> SummaryReport:
        if start and end and start > end:
            raise ValidationError("Start date must not be after end date")

        employees = list(self._employees.list_employees())
        labels = {e.id: e.label for e in employees}

        def label(eid: str) -> str:
            return labels.get(eid, UNKNOWN_EMPLOYEE)

        def keep(eid: str, day: date) -> bool:
            if employee_id and eid != employee_id:
                return False
            if start and day < start:
                return False
            if end and day > end:
                return False
            return True

        salary_entries = list(self._salaries.list_salary_entries())
        payments = list(self._payments.list_payment_records())

        salary_rows = [
            SalaryReportRow(
                id=e.id,
                employee_id=e.employee_id,
                employee_label=label(e.employee_id),
                date=e.date,
                amount=e.amount,
                liters=e.liters,
                animal_type=e.animal_type.value,
            )
            for e in salary_entries
        ]
        credit_rows = [
            CreditReportRow(
                id=e.id,
                employee_id=e.employee_id,
                employee_label=label(e.employee_id),
                date=e.date,
                item_name=e.item_name,
                amount=e.amount,
            )
            for e in self._credits.list_credit_entries()
        ]

        for p in payments:
            if p.salary_amount > 0 and not any(
                e.employee_id == p.employee_id and abs(e.amount - p.salary_amount) < HISTORICAL_MATCH_TOLERANCE
                for e in salary_entries
            ):
                salary_rows.append(
                    SalaryReportRow(
                        id=f"historical-salary-{p.id}",
                        employee_id=p.employee_id,
                        employee_label=label(p.employee_id),
                        date=p.payment_date,
                        amount=p.salary_amount,
                        liters=Decimal("0"),
                        animal_type=None,
                        historical=True,
                    )
                )
            if p.credit_deducted > 0:
                credit_rows.append(
                    CreditReportRow(
                        id=f"historical-credit-{p.id}",
                        employee_id=p.employee_id,
                        employee_label=label(p.employee_id),
                        date=p.payment_date,
                        item_name=HISTORICAL_CREDIT_ITEM,
                        amount=p.credit_deducted,
                        historical=True,
                    )
                )

        salary_rows = sorted((r for r in salary_rows if keep(r.employee_id, r.date)), key=lambda r: r.date, reverse=True)
        credit_rows = sorted((r for r in credit_rows if keep(r.employee_id, r.date)), key=lambda r: r.date, reverse=True)
        payment_rows = sorted(
            (p for p in payments if keep(p.employee_id, p.payment_date)), key=lambda p: p.payment_date, reverse=True
        )
        shown = [e for e in employees if not employee_id or e.id == employee_id]

        balances = []
        for e in shown:
            earned = agg.total_salary(agg.for_employee(salary_rows, e.id))
            credit = agg.total_available_credit(agg.for_employee(credit_rows, e.id))
            paid = agg.total_paid(agg.for_employee(payment_rows, e.id))
            balances.append(
                EmployeeBalance(
                    employee_id=e.id,
                    employee_label=e.label,
                    earned=earned,
                    liters=agg.total_liters(agg.for_employee(salary_rows, e.id)),
                    credit=credit,
                    paid=paid,
                    balance=earned - credit - paid,
                )
            )

        stats = ReportStats(
            total_employees=len(shown),
            total_salary=agg.round_currency(agg.total_salary(salary_rows)),
            total_credit=agg.round_currency(agg.total_available_credit(credit_rows)),
            total_payments=agg.round_currency(agg.total_paid(payment_rows)),
        )
        return SummaryReport(
            salary_rows=salary_rows,
            credit_rows=credit_rows,
            payment_records=payment_rows,
            balances=balances,
            stats=stats,
        )
