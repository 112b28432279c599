from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional

from ..common.datetime_utils import month_end, today_local
from ..common.validators import parse_amount, require_non_empty, require_positive
from ..core.constants import RECENT_SALARY_ENTRIES
from ..core.enums import AnimalType, SalaryPeriod
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from ..payroll import aggregation as agg
from .model import EmployeeSalarySummary, NewSalaryEntry, SalaryEntry, SalaryTotals
from .repository import SalaryRepository

logger = logging.getLogger(__name__)


def period_bounds(period: SalaryPeriod, *, today: date) -> Optional[tuple[date, date]]:
    """Inclusive date window of `period` within today's month; None for ALL."""
    if period == SalaryPeriod.FIRST:
        return today.replace(day=1), today.replace(day=10)
    if period == SalaryPeriod.SECOND:
        return today.replace(day=11), today.replace(day=20)
    if period == SalaryPeriod.THIRD:
        return today.replace(day=21), month_end(today)
    return None


def parse_period(value: Optional[str]) -> SalaryPeriod:
    try:
        return SalaryPeriod((value or SalaryPeriod.ALL.value).strip())
    except ValueError:
        raise ValidationError("Unknown salary period")


class SalaryService:
    """Use case: record milk deliveries and summarise what each employee earned."""

    def __init__(self, salaries: SalaryRepository, employees: EmployeeRepository):
        self._salaries = salaries
        self._employees = employees

    def add_entry(
        self,
        *,
        employee_id: str,
        amount: Any,
        liters: Any,
        animal_type: str = AnimalType.COW.value,
        entry_date: Optional[date] = None,
    ) -> SalaryEntry:
        employee_id = require_non_empty(employee_id, "Employee")
        amount_d = require_positive(parse_amount(amount, "Amount"), "Amount")
        liters_d = require_positive(parse_amount(liters, "Liters"), "Liters")
        try:
            animal = AnimalType((animal_type or "").strip().lower())
        except ValueError:
            raise ValidationError("Animal type must be cow or buffalo")

        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")

        entry = self._salaries.insert_salary_entry(
            NewSalaryEntry(
                employee_id=employee_id,
                date=entry_date or today_local(),
                amount=amount_d,
                liters=liters_d,
                animal_type=animal,
            )
        )
        logger.info("salary entry %s: employee=%s amount=%s liters=%s", entry.id, employee_id, amount_d, liters_d)
        return entry

    def remove_entry(self, entry_id: str) -> None:
        if not self._salaries.delete_salary_entry(entry_id):
            raise NotFoundError("Salary entry not found")

    def list_entries(
        self,
        *,
        period: SalaryPeriod = SalaryPeriod.ALL,
        today: Optional[date] = None,
    ) -> list[SalaryEntry]:
        entries = list(self._salaries.list_salary_entries())
        bounds = period_bounds(period, today=today or today_local())
        if bounds:
            start, end = bounds
            entries = [e for e in entries if start <= e.date <= end]
        entries.sort(key=lambda e: e.date, reverse=True)
        return entries

    def employee_summaries(
        self,
        *,
        period: SalaryPeriod = SalaryPeriod.ALL,
        employee_id: Optional[str] = None,
        today: Optional[date] = None,
    ) -> list[EmployeeSalarySummary]:
        entries = self.list_entries(period=period, today=today)

        summaries = []
        for employee in self._employees.list_employees():
            if employee_id and employee.id != employee_id:
                continue
            own = agg.for_employee(entries, employee.id)
            summaries.append(
                EmployeeSalarySummary(
                    employee_id=employee.id,
                    employee_name=employee.name,
                    mobile=employee.mobile,
                    total_salary=agg.total_salary(own),
                    total_liters=agg.total_liters(own),
                    entry_count=len(own),
                    avg_per_entry=agg.average_per_entry(own),
                    recent_entries=own[:RECENT_SALARY_ENTRIES],
                )
            )
        return summaries

    def totals(self, *, period: SalaryPeriod = SalaryPeriod.ALL, today: Optional[date] = None) -> SalaryTotals:
        entries = self.list_entries(period=period, today=today)
        return SalaryTotals(
            total_amount=agg.total_salary(entries),
            total_liters=agg.total_liters(entries),
            total_entries=len(entries),
            avg_per_entry=agg.average_per_entry(entries),
        )
