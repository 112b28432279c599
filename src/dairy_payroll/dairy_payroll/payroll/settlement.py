"""Settlement: turn an employee's salary entries into one payment.

The whole computation is pure. `plan_settlement` validates the deduction,
works out the payment record and the reallocated credit collection, and
returns a `SettlementPlan`; writing it is the repository's job.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..core.constants import AMOUNT_DECIMALS
from ..core.exceptions import SettlementError
from ..credit.model import CreditEntry
from ..employees.model import Employee
from ..payments.model import NewPaymentRecord
from ..salary.model import SalaryEntry
from . import aggregation as agg
from .allocation.base import AllocationResult, CreditAllocationStrategy
from .allocation.oldest_first import OldestFirstAllocation
from .model import SettlementPlan


def validate_deduction(deduction: Decimal, *, available_credit: Decimal, salary: Decimal) -> None:
    if deduction < 0:
        raise SettlementError("Manual credit cannot be negative")
    if -deduction.normalize().as_tuple().exponent > AMOUNT_DECIMALS:
        raise SettlementError(f"Manual credit can have at most {AMOUNT_DECIMALS} decimal places")
    if deduction > available_credit:
        raise SettlementError("Manual credit adjustment cannot exceed total available credit")
    if salary <= 0:
        raise SettlementError("No salary entries to settle for this employee")


def reallocate_credit(
    credit_entries: Sequence[CreditEntry],
    employee_id: str,
    deduction: Decimal,
    *,
    strategy: Optional[CreditAllocationStrategy] = None,
) -> tuple[list[CreditEntry], AllocationResult]:
    """New global credit collection after deducting from one employee.

    Other employees' entries come first, unchanged and in input order.
    """
    strategy = strategy or OldestFirstAllocation()
    others = [e for e in credit_entries if e.employee_id != employee_id]
    allocation = strategy.allocate(agg.for_employee(credit_entries, employee_id), deduction)
    return others + allocation.kept, allocation


def plan_settlement(
    employee: Employee,
    salary_entries: Sequence[SalaryEntry],
    credit_entries: Sequence[CreditEntry],
    deduction: Decimal,
    *,
    today: date,
    strategy: Optional[CreditAllocationStrategy] = None,
) -> SettlementPlan:
    """`salary_entries` and `credit_entries` may hold every employee's rows."""
    own_salary = agg.for_employee(salary_entries, employee.id)
    own_credit = agg.for_employee(credit_entries, employee.id)
    salary = agg.total_salary(own_salary)
    available = agg.total_available_credit(own_credit)

    validate_deduction(deduction, available_credit=available, salary=salary)

    payment = NewPaymentRecord(
        employee_id=employee.id,
        salary_amount=salary,
        credit_deducted=deduction,
        net_paid=agg.net_payable(salary, deduction),
        payment_date=today,
    )

    collection, allocation = reallocate_credit(credit_entries, employee.id, deduction, strategy=strategy)
    read = {e.id: e.amount for e in own_credit}
    touched = [e.id for e in allocation.removed] + [e.id for e in allocation.reduced]

    return SettlementPlan(
        employee_id=employee.id,
        expected_version=employee.version,
        payment=payment,
        salary_entry_ids=tuple(e.id for e in own_salary),
        credit_entries=tuple(collection),
        removed_credit_ids=tuple(e.id for e in allocation.removed),
        reduced_credit_entries=tuple(allocation.reduced),
        credit_amounts_read=tuple((entry_id, read[entry_id]) for entry_id in touched),
        available_credit_before=available,
        available_credit_after=agg.total_available_credit(allocation.kept),
    )
