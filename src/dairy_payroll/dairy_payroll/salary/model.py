from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from ..core.enums import AnimalType
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class SalaryEntry:
    """Domain entity: one milk delivery and the pay it earns."""

    id: str
    employee_id: str
    date: date
    amount: Decimal
    liters: Decimal
    animal_type: AnimalType
    created_at: datetime

    def __post_init__(self):
        if self.amount <= 0:
            raise ValidationError("Salary amount must be greater than 0")
        if self.liters <= 0:
            raise ValidationError("Liters must be greater than 0")


@dataclass(frozen=True)
class NewSalaryEntry:
    employee_id: str
    date: date
    amount: Decimal
    liters: Decimal
    animal_type: AnimalType


@dataclass(frozen=True)
class EmployeeSalarySummary:
    """Read-model for the per-employee salary table."""

    employee_id: str
    employee_name: str
    mobile: str
    total_salary: Decimal
    total_liters: Decimal
    entry_count: int
    avg_per_entry: Decimal
    recent_entries: list[SalaryEntry]


@dataclass(frozen=True)
class SalaryTotals:
    total_amount: Decimal
    total_liters: Decimal
    total_entries: int
    avg_per_entry: Decimal
