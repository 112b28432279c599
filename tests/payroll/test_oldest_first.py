from datetime import date, datetime
from decimal import Decimal

from src.dairy_payroll.dairy_payroll.credit.model import CreditEntry
from src.dairy_payroll.dairy_payroll.payroll.allocation.oldest_first import OldestFirstAllocation


def _credit(entry_id, amount, day):
    return CreditEntry(
        id=entry_id,
        employee_id="e1",
        date=day,
        item_name="Feed",
        amount=Decimal(amount),
        created_at=datetime(2026, 2, 1, 9, 0),
    )


def test_sorts_by_date_before_consuming():
    entries = [_credit("late", "20", date(2026, 2, 3)), _credit("early", "50", date(2026, 2, 1))]

    result = OldestFirstAllocation().allocate(entries, Decimal("50"))

    assert [e.id for e in result.removed] == ["early"]
    assert [e.id for e in result.kept] == ["late"]
    assert result.reduced == []


def test_partial_entry_is_reduced_not_removed():
    entries = [_credit("a", "50", date(2026, 2, 1)), _credit("b", "30", date(2026, 2, 2))]

    result = OldestFirstAllocation().allocate(entries, Decimal("60"))

    assert [(e.id, e.amount) for e in result.kept] == [("b", Decimal("20"))]
    assert result.reduced == result.kept


def test_same_day_entries_keep_input_order():
    entries = [_credit("first", "10", date(2026, 2, 1)), _credit("second", "10", date(2026, 2, 1))]

    result = OldestFirstAllocation().allocate(entries, Decimal("10"))

    assert [e.id for e in result.removed] == ["first"]
    assert [e.id for e in result.kept] == ["second"]


def test_zero_amount_keeps_everything():
    entries = [_credit("a", "10", date(2026, 2, 1))]

    result = OldestFirstAllocation().allocate(entries, Decimal("0"))

    assert result.kept == entries
    assert result.removed == []


def test_deduction_above_total_consumes_everything():
    entries = [_credit("a", "10", date(2026, 2, 1)), _credit("b", "5", date(2026, 2, 2))]

    result = OldestFirstAllocation().allocate(entries, Decimal("15"))

    assert result.kept == []
    assert [e.id for e in result.removed] == ["a", "b"]
