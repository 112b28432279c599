from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..payments.model import PaymentRecord


@dataclass(frozen=True)
class SalaryReportRow:
    """Read-model for the report tables; `historical` rows are rebuilt from payments."""

    id: str
    employee_id: str
    employee_label: str
    date: date
    amount: Decimal
    liters: Decimal
    animal_type: Optional[str]
    historical: bool = False


@dataclass(frozen=True)
class CreditReportRow:
    id: str
    employee_id: str
    employee_label: str
    date: date
    item_name: str
    amount: Decimal
    historical: bool = False


@dataclass(frozen=True)
class EmployeeBalance:
    employee_id: str
    employee_label: str
    earned: Decimal
    liters: Decimal
    credit: Decimal
    paid: Decimal
    balance: Decimal


@dataclass(frozen=True)
class ReportStats:
    total_employees: int
    total_salary: Decimal
    total_credit: Decimal
    total_payments: Decimal


@dataclass(frozen=True)
class SummaryReport:
    salary_rows: list[SalaryReportRow]
    credit_rows: list[CreditReportRow]
    payment_records: list[PaymentRecord]
    balances: list[EmployeeBalance]
    stats: ReportStats
