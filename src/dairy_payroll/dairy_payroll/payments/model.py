from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class NewPaymentRecord:
    employee_id: str
    salary_amount: Decimal
    credit_deducted: Decimal
    net_paid: Decimal
    payment_date: date

    def __post_init__(self):
        if self.credit_deducted < 0:
            raise ValidationError("Credit deducted cannot be negative")
        if self.net_paid != self.salary_amount - self.credit_deducted:
            raise ValidationError("Net paid must equal salary minus credit deducted")


@dataclass(frozen=True)
class PaymentRecord:
    """Append-only ledger row written by a settlement."""

    id: str
    employee_id: str
    salary_amount: Decimal
    credit_deducted: Decimal
    net_paid: Decimal
    payment_date: date
    created_at: datetime
