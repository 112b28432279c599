"""Pure reductions over in-memory record lists.

Nothing here raises: missing or malformed numbers count as zero so that a
summary screen keeps rendering when a row is only partially loaded.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Optional

from ..core.constants import CURRENCY_PLACES

ZERO = Decimal("0")


def to_decimal(value: Any) -> Decimal:
    if value is None or isinstance(value, bool):
        return ZERO
    try:
        d = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        return ZERO
    return d if d.is_finite() else ZERO


def sum_field(items: Iterable[Any], field: str) -> Decimal:
    total = ZERO
    for item in items or ():
        total += to_decimal(getattr(item, field, None))
    return total


def safe_divide(numerator: Any, denominator: Any) -> Decimal:
    d = to_decimal(denominator)
    if d == 0:
        return ZERO
    return to_decimal(numerator) / d


def round_currency(value: Any) -> Decimal:
    return to_decimal(value).quantize(CURRENCY_PLACES)


def total_salary(entries) -> Decimal:
    """Lifetime salary; never filtered by date on the settlement path."""
    return sum_field(entries, "amount")


def total_available_credit(entries) -> Decimal:
    """Lifetime credit, not only what was bought since the last payment."""
    return sum_field(entries, "amount")


def total_liters(entries) -> Decimal:
    return sum_field(entries, "liters")


def total_paid(records) -> Decimal:
    return sum_field(records, "net_paid")


def net_payable(salary: Any, manual_credit: Any) -> Decimal:
    # may go negative (overpayment); callers decide whether to clamp
    return to_decimal(salary) - to_decimal(manual_credit)


def average_per_entry(entries) -> Decimal:
    entries = list(entries or ())
    return safe_divide(total_salary(entries), len(entries))


def rate_per_liter(entry) -> Decimal:
    return safe_divide(getattr(entry, "amount", None), getattr(entry, "liters", None))


def credit_since(entries, since: Optional[date]) -> Decimal:
    """Credit dated strictly after `since` (everything when `since` is None)."""
    if since is None:
        return total_available_credit(entries)
    return sum_field((e for e in entries or () if e.date > since), "amount")


def last_payment_date(records) -> Optional[date]:
    dates = [r.payment_date for r in records or () if getattr(r, "payment_date", None)]
    return max(dates) if dates else None


def for_employee(items, employee_id: str) -> list:
    return [i for i in items or () if i.employee_id == employee_id]
