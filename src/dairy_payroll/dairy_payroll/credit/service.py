from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date, timedelta
from decimal import Decimal
from typing import Any, Optional

from ..common.datetime_utils import today_local
from ..common.validators import parse_amount, require_non_empty, require_positive
from ..core.constants import OTHER_ITEM, RECENT_CREDIT_DAYS, RECENT_CREDIT_ENTRIES, TOP_ITEMS_LIMIT, UNKNOWN_EMPLOYEE
from ..core.enums import CreditDateRange
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from ..payroll import aggregation as agg
from .model import CreditEntry, CreditEntryInput, EmployeeCreditSummary
from .repository import CreditRepository

logger = logging.getLogger(__name__)


def is_recent(entry_date: date, *, today: date, days: int = RECENT_CREDIT_DAYS) -> bool:
    """Strictly newer than `days` ago."""
    return entry_date > today - timedelta(days=days)


def in_date_range(entry_date: date, date_range: CreditDateRange, *, today: date) -> bool:
    if date_range == CreditDateRange.TODAY:
        return entry_date == today
    if date_range == CreditDateRange.WEEK:
        return entry_date >= today - timedelta(days=7)
    if date_range == CreditDateRange.MONTH:
        return entry_date >= today - timedelta(days=30)
    if date_range == CreditDateRange.TEN_DAYS:
        return is_recent(entry_date, today=today)
    return True


def parse_date_range(value: Optional[str]) -> CreditDateRange:
    try:
        return CreditDateRange((value or CreditDateRange.ALL.value).strip())
    except ValueError:
        raise ValidationError("Unknown date range")


class CreditService:
    """Use case: credit purchases (advances) taken by employees."""

    def __init__(self, credits: CreditRepository, employees: EmployeeRepository, *, recent_days: int = RECENT_CREDIT_DAYS):
        self._credits = credits
        self._employees = employees
        self._recent_days = int(recent_days)

    def _build_input(
        self,
        *,
        employee_id: str,
        entry_date: Optional[date],
        item_name: str,
        amount: Any,
        notes: str,
        today: date,
    ) -> CreditEntryInput:
        employee_id = require_non_empty(employee_id, "Employee")
        item_name = require_non_empty(item_name, "Item")
        if entry_date is None:
            raise ValidationError("Date is required")
        amount_d = require_positive(parse_amount(amount, "Amount"), "Amount")

        if entry_date > today:
            raise ValidationError("Date cannot be in the future")

        if item_name == OTHER_ITEM:
            item_name = require_non_empty(notes, "Item description")

        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")

        return CreditEntryInput(employee_id=employee_id, date=entry_date, item_name=item_name, amount=amount_d)

    def add_entry(
        self,
        *,
        employee_id: str,
        entry_date: Optional[date],
        item_name: str,
        amount: Any,
        notes: str = "",
        today: Optional[date] = None,
    ) -> CreditEntry:
        data = self._build_input(
            employee_id=employee_id,
            entry_date=entry_date,
            item_name=item_name,
            amount=amount,
            notes=notes,
            today=today or today_local(),
        )
        entry = self._credits.insert_credit_entry(data)
        logger.info("credit entry %s: employee=%s item=%s amount=%s", entry.id, entry.employee_id, entry.item_name, entry.amount)
        return entry

    def update_entry(
        self,
        entry_id: str,
        *,
        employee_id: str,
        entry_date: Optional[date],
        item_name: str,
        amount: Any,
        notes: str = "",
        today: Optional[date] = None,
    ) -> CreditEntry:
        data = self._build_input(
            employee_id=employee_id,
            entry_date=entry_date,
            item_name=item_name,
            amount=amount,
            notes=notes,
            today=today or today_local(),
        )
        updated = self._credits.update_credit_entry(entry_id, data)
        if not updated:
            raise NotFoundError("Credit entry not found")
        return updated

    def remove_entry(self, entry_id: str) -> None:
        if not self._credits.delete_credit_entry(entry_id):
            raise NotFoundError("Credit entry not found")

    def list_entries(self) -> list[CreditEntry]:
        entries = list(self._credits.list_credit_entries())
        entries.sort(key=lambda e: e.date, reverse=True)
        return entries

    def filter_entries(
        self,
        *,
        search: str = "",
        employee_id: Optional[str] = None,
        item_name: Optional[str] = None,
        date_range: CreditDateRange = CreditDateRange.ALL,
        today: Optional[date] = None,
    ) -> list[CreditEntry]:
        today = today or today_local()
        names = {e.id: e.name for e in self._employees.list_employees()}
        term = (search or "").strip().lower()

        def matches(entry: CreditEntry) -> bool:
            if term:
                employee_name = names.get(entry.employee_id, UNKNOWN_EMPLOYEE).lower()
                if term not in employee_name and term not in entry.item_name.lower():
                    return False
            if employee_id and entry.employee_id != employee_id:
                return False
            if item_name and entry.item_name != item_name:
                return False
            return in_date_range(entry.date, date_range, today=today)

        return [e for e in self.list_entries() if matches(e)]

    def employee_summaries(self, *, today: Optional[date] = None) -> list[EmployeeCreditSummary]:
        today = today or today_local()
        entries = self.list_entries()

        summaries = []
        for employee in self._employees.list_employees():
            own = agg.for_employee(entries, employee.id)
            summaries.append(
                EmployeeCreditSummary(
                    employee_id=employee.id,
                    employee_name=employee.name,
                    total_credit=agg.total_available_credit(own),
                    recent_credit=agg.sum_field((e for e in own if is_recent(e.date, today=today, days=self._recent_days)), "amount"),
                    recent_entries=own[:RECENT_CREDIT_ENTRIES],
                )
            )
        return summaries

    def top_items(self, *, limit: int = TOP_ITEMS_LIMIT) -> list[tuple[str, Decimal]]:
        totals: dict[str, Decimal] = defaultdict(Decimal)
        for entry in self._credits.list_credit_entries():
            totals[entry.item_name] += agg.to_decimal(entry.amount)
        return sorted(totals.items(), key=lambda kv: kv[1], reverse=True)[:limit]
