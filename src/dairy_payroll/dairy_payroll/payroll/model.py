from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..credit.model import CreditEntry
from ..payments.model import NewPaymentRecord


@dataclass(frozen=True)
class PaymentSummary:
    """Read-model recomputed on every request; never persisted."""

    employee_id: str
    employee_name: str
    total_salary: Decimal
    total_available_credit: Decimal
    credit_since_last_payment: Decimal
    manual_credit: Decimal
    net_payable: Decimal
    salary_entry_count: int
    avg_salary_per_entry: Decimal
    has_recent_activity: bool
    last_payment_date: Optional[date]


@dataclass(frozen=True)
class SettlementStatistics:
    total_employees: int
    employees_with_salary: int
    employees_with_credit: int
    employees_with_recent_activity: int
    total_payable_amount: Decimal
    average_net_payable: Decimal


@dataclass(frozen=True)
class SettlementPlan:
    """Everything a settlement will write, computed before any write happens."""

    employee_id: str
    expected_version: int
    payment: NewPaymentRecord
    salary_entry_ids: tuple[str, ...]
    credit_entries: tuple[CreditEntry, ...]
    removed_credit_ids: tuple[str, ...]
    reduced_credit_entries: tuple[CreditEntry, ...]
    # (credit id, amount as read) for every removed or reduced entry
    credit_amounts_read: tuple[tuple[str, Decimal], ...]
    available_credit_before: Decimal
    available_credit_after: Decimal
