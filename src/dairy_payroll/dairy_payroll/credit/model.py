from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from decimal import Decimal

from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class CreditEntry:
    """Domain entity: an advance or purchase the employee owes against salary."""

    id: str
    employee_id: str
    date: date
    item_name: str
    amount: Decimal
    created_at: datetime

    def __post_init__(self):
        if not self.item_name or not self.item_name.strip():
            raise ValidationError("Item name is required")
        if self.amount <= 0:
            raise ValidationError("Credit amount must be greater than 0")

    def with_amount(self, amount: Decimal) -> "CreditEntry":
        return replace(self, amount=amount)


@dataclass(frozen=True)
class CreditEntryInput:
    employee_id: str
    date: date
    item_name: str
    amount: Decimal


@dataclass(frozen=True)
class EmployeeCreditSummary:
    employee_id: str
    employee_name: str
    total_credit: Decimal
    recent_credit: Decimal
    recent_entries: list[CreditEntry]
