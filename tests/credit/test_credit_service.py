from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

import pytest

from src.dairy_payroll.dairy_payroll.core.enums import CreditDateRange
from src.dairy_payroll.dairy_payroll.core.exceptions import NotFoundError, ValidationError
from src.dairy_payroll.dairy_payroll.credit.service import in_date_range, is_recent, parse_date_range


def test_other_item_takes_description_from_notes(container, store, today):
    store.add_employee("e1")

    entry = container.credit_service.add_entry(
        employee_id="e1", entry_date=today, item_name="Other", amount="75", notes="Vet visit", today=today
    )

    assert entry.item_name == "Vet visit"


def test_other_item_requires_notes(container, store, today):
    store.add_employee("e1")

    with pytest.raises(ValidationError):
        container.credit_service.add_entry(employee_id="e1", entry_date=today, item_name="Other", amount="75", today=today)


def test_future_date_rejected(container, store, today):
    store.add_employee("e1")

    with pytest.raises(ValidationError, match="future"):
        container.credit_service.add_entry(
            employee_id="e1", entry_date=today + timedelta(days=1), item_name="Feed", amount="10", today=today
        )
    assert store.writes == []


@pytest.mark.parametrize("amount", ["0", "-1", "x", "", "12.345"])
def test_invalid_amount_rejected(container, store, today, amount):
    store.add_employee("e1")

    with pytest.raises(ValidationError):
        container.credit_service.add_entry(employee_id="e1", entry_date=today, item_name="Feed", amount=amount, today=today)


def test_update_and_remove(container, store, today):
    store.add_employee("e1")
    store.add_credit("e1", "10", entry_id="c1")

    updated = container.credit_service.update_entry(
        "c1", employee_id="e1", entry_date=today, item_name="Medicine", amount="12.5", today=today
    )
    assert (updated.item_name, updated.amount) == ("Medicine", Decimal("12.5"))

    container.credit_service.remove_entry("c1")
    assert store.credit == []
    with pytest.raises(NotFoundError):
        container.credit_service.remove_entry("c1")


def test_update_unknown_entry(container, store, today):
    store.add_employee("e1")

    with pytest.raises(NotFoundError):
        container.credit_service.update_entry(
            "missing", employee_id="e1", entry_date=today, item_name="Feed", amount="1", today=today
        )


def test_ten_day_window_is_strict(today):
    assert is_recent(today - timedelta(days=9), today=today)
    assert not is_recent(today - timedelta(days=10), today=today)


def test_date_ranges(today):
    assert in_date_range(today, CreditDateRange.TODAY, today=today)
    assert not in_date_range(today - timedelta(days=1), CreditDateRange.TODAY, today=today)
    assert in_date_range(today - timedelta(days=7), CreditDateRange.WEEK, today=today)
    assert not in_date_range(today - timedelta(days=31), CreditDateRange.MONTH, today=today)
    assert in_date_range(date(2000, 1, 1), CreditDateRange.ALL, today=today)
    with pytest.raises(ValidationError):
        parse_date_range("year")


def test_filter_entries(container, store, today):
    store.add_employee("e1", name="Ramesh")
    store.add_employee("e2", name="Suresh", mobile="9123456780")
    store.add_credit("e1", "10", item="Feed", day=today, entry_id="a")
    store.add_credit("e2", "20", item="Medicine", day=today - timedelta(days=20), entry_id="b")
    store.add_credit("e2", "30", item="Feed", day=today - timedelta(days=2), entry_id="c")

    def ids(**kwargs):
        return [e.id for e in container.credit_service.filter_entries(today=today, **kwargs)]

    assert ids() == ["a", "c", "b"]
    assert ids(search="sur") == ["c", "b"]
    assert ids(search="medi") == ["b"]
    assert ids(employee_id="e1") == ["a"]
    assert ids(item_name="Feed") == ["a", "c"]
    assert ids(date_range=CreditDateRange.TEN_DAYS) == ["a", "c"]


def test_summaries_and_top_items(container, store, today):
    store.add_employee("e1")
    store.add_credit("e1", "10", item="Feed", day=today)
    store.add_credit("e1", "40", item="Feed", day=today - timedelta(days=15))
    store.add_credit("e1", "25", item="Medicine", day=today)

    (summary,) = container.credit_service.employee_summaries(today=today)
    assert summary.total_credit == Decimal("75")
    assert summary.recent_credit == Decimal("35")
    assert len(summary.recent_entries) == 3

    assert container.credit_service.top_items() == [("Feed", Decimal("50")), ("Medicine", Decimal("25"))]
