from __future__ import annotations

import logging
from datetime import date, timedelta
from decimal import Decimal
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import today_local
from ..common.validators import parse_amount
from ..core.constants import RECENT_ACTIVITY_DAYS
from ..core.exceptions import NotFoundError, SettlementError, ValidationError
from ..credit.repository import CreditRepository
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..payments.model import PaymentRecord
from ..payments.repository import PaymentRepository
from ..salary.repository import SalaryRepository
from . import aggregation as agg
from .allocation.base import CreditAllocationStrategy
from .allocation.oldest_first import OldestFirstAllocation
from .model import PaymentSummary, SettlementPlan, SettlementStatistics
from .repository import SettlementRepository
from .settlement import plan_settlement

logger = logging.getLogger(__name__)


def parse_manual_credit(value: Any) -> Decimal:
    """Blank means no deduction; anything else must be a finite amount in cents."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return Decimal("0")
    try:
        return parse_amount(value, "Manual credit")
    except ValidationError as e:
        raise SettlementError(str(e)) from e


class SettlementService:
    """Use case: pay an employee out, net of the credit the operator deducts."""

    def __init__(
        self,
        employees: EmployeeRepository,
        salaries: SalaryRepository,
        credits: CreditRepository,
        payments: PaymentRepository,
        settlements: SettlementRepository,
        *,
        strategy: Optional[CreditAllocationStrategy] = None,
        recent_days: int = RECENT_ACTIVITY_DAYS,
    ):
        self._employees = employees
        self._salaries = salaries
        self._credits = credits
        self._payments = payments
        self._settlements = settlements
        self._strategy = strategy or OldestFirstAllocation()
        self._recent_days = int(recent_days)

    def _get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def _summarise(self, employee: Employee, salary, credit, payments, manual_credit: Decimal, today: date) -> PaymentSummary:
        own_salary = agg.for_employee(salary, employee.id)
        own_credit = agg.for_employee(credit, employee.id)
        last_paid = agg.last_payment_date(agg.for_employee(payments, employee.id))
        total = agg.total_salary(own_salary)
        week_ago = today - timedelta(days=self._recent_days)

        return PaymentSummary(
            employee_id=employee.id,
            employee_name=employee.name,
            total_salary=total,
            total_available_credit=agg.total_available_credit(own_credit),
            credit_since_last_payment=agg.credit_since(own_credit, last_paid),
            manual_credit=manual_credit,
            net_payable=agg.net_payable(total, manual_credit),
            salary_entry_count=len(own_salary),
            avg_salary_per_entry=agg.average_per_entry(own_salary),
            has_recent_activity=any(e.date >= week_ago for e in own_salary),
            last_payment_date=last_paid,
        )

    def payment_summaries(
        self,
        manual_credits: Optional[Mapping[str, Any]] = None,
        *,
        today: Optional[date] = None,
    ) -> list[PaymentSummary]:
        today = today or today_local()
        manual_credits = manual_credits or {}
        salary = self._salaries.list_salary_entries()
        credit = self._credits.list_credit_entries()
        payments = self._payments.list_payment_records()

        return [
            self._summarise(e, salary, credit, payments, parse_manual_credit(manual_credits.get(e.id)), today)
            for e in self._employees.list_employees()
        ]

    @staticmethod
    def statistics(summaries: Sequence[PaymentSummary]) -> SettlementStatistics:
        total_payable = sum((max(Decimal("0"), s.net_payable) for s in summaries), Decimal("0"))
        return SettlementStatistics(
            total_employees=len(summaries),
            employees_with_salary=sum(1 for s in summaries if s.total_salary > 0),
            employees_with_credit=sum(1 for s in summaries if s.total_available_credit > 0),
            employees_with_recent_activity=sum(1 for s in summaries if s.has_recent_activity),
            total_payable_amount=total_payable,
            average_net_payable=agg.safe_divide(total_payable, len(summaries)),
        )

    def preview(self, employee_id: str, manual_credit: Any = None, *, today: Optional[date] = None) -> SettlementPlan:
        """Validate and compute a settlement without writing anything."""
        deduction = parse_manual_credit(manual_credit)
        employee = self._get_employee(employee_id)
        return plan_settlement(
            employee,
            self._salaries.list_salary_entries(),
            self._credits.list_credit_entries(),
            deduction,
            today=today or today_local(),
            strategy=self._strategy,
        )

    def settle(self, employee_id: str, manual_credit: Any = None, *, today: Optional[date] = None) -> PaymentRecord:
        """One-shot: a second call for the same employee fails, no salary is left."""
        plan = self.preview(employee_id, manual_credit, today=today)
        record = self._settlements.apply_settlement(plan)

        logger.info(
            "settled employee %s: salary=%s credit_deducted=%s net_paid=%s (credit %s -> %s)",
            employee_id,
            record.salary_amount,
            record.credit_deducted,
            record.net_paid,
            plan.available_credit_before,
            plan.available_credit_after,
        )
        return record

    def list_payments(self, *, employee_id: Optional[str] = None) -> list[PaymentRecord]:
        records = list(self._payments.list_payment_records())
        if employee_id:
            records = agg.for_employee(records, employee_id)
        records.sort(key=lambda r: r.payment_date, reverse=True)
        return records
