from __future__ import annotations

from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest

from src.dairy_payroll.dairy_payroll.core.exceptions import (
    ConcurrentSettlementError,
    NotFoundError,
    SettlementError,
)
from src.dairy_payroll.dairy_payroll.payroll.settlement import plan_settlement, reallocate_credit


def _seed_ramesh(store):
    store.add_employee("e1")
    store.add_salary("e1", "500", day=date(2026, 2, 1), entry_id="s1")
    store.add_salary("e1", "700", day=date(2026, 2, 5), entry_id="s2")
    store.add_credit("e1", "50", day=date(2026, 2, 1), entry_id="d1")
    store.add_credit("e1", "30", day=date(2026, 2, 2), entry_id="d2")
    store.add_credit("e1", "20", day=date(2026, 2, 3), entry_id="d3")


def test_settle_consumes_oldest_credit_first(store, container, today):
    _seed_ramesh(store)

    record = container.settlement_service.settle("e1", "60", today=today)

    assert record.salary_amount == Decimal("1200")
    assert record.credit_deducted == Decimal("60")
    assert record.net_paid == Decimal("1140")
    assert record.payment_date == today
    assert [(c.id, c.amount) for c in store.credit] == [("d2", Decimal("20")), ("d3", Decimal("20"))]
    assert store.salary == []
    assert len(store.payments) == 1


def test_settle_with_zero_deduction_keeps_credit(store, container, today):
    _seed_ramesh(store)
    before = list(store.credit)

    record = container.settlement_service.settle("e1", "", today=today)

    assert record.credit_deducted == 0
    assert record.net_paid == Decimal("1200")
    assert store.credit == before
    assert store.salary == []


def test_settle_full_deduction_removes_all_employee_credit(store, container, today):
    _seed_ramesh(store)

    container.settlement_service.settle("e1", "100", today=today)

    assert store.credit == []


def test_other_employees_credit_untouched(store, container, today):
    _seed_ramesh(store)
    store.add_employee("e2", name="Suresh", mobile="9123456780")
    store.add_salary("e2", "300", entry_id="s9")
    other = store.add_credit("e2", "40", day=date(2026, 1, 1), entry_id="x1")

    container.settlement_service.settle("e1", "100", today=today)

    assert store.credit == [other]
    assert [s.id for s in store.salary] == ["s9"]


def test_deduction_above_available_credit_writes_nothing(store, container, today):
    _seed_ramesh(store)

    with pytest.raises(SettlementError, match="cannot exceed total available credit"):
        container.settlement_service.settle("e1", "100.01", today=today)

    assert store.writes == []


def test_negative_deduction_rejected(store, container, today):
    _seed_ramesh(store)

    with pytest.raises(SettlementError, match="cannot be negative"):
        container.settlement_service.settle("e1", "-5", today=today)
    assert store.writes == []


def test_non_numeric_deduction_rejected(store, container, today):
    _seed_ramesh(store)

    with pytest.raises(SettlementError):
        container.settlement_service.settle("e1", "abc", today=today)
    assert store.writes == []


def test_settle_without_salary_rejected(store, container, today):
    store.add_employee("e1")
    store.add_credit("e1", "50")

    with pytest.raises(SettlementError, match="No salary entries"):
        container.settlement_service.settle("e1", "0", today=today)
    assert store.writes == []


def test_second_settlement_fails(store, container, today):
    _seed_ramesh(store)
    container.settlement_service.settle("e1", "0", today=today)
    writes = len(store.writes)

    with pytest.raises(SettlementError):
        container.settlement_service.settle("e1", "0", today=today)
    assert len(store.writes) == writes


def test_unknown_employee(container, today):
    with pytest.raises(NotFoundError):
        container.settlement_service.settle("nope", "0", today=today)


def test_stale_plan_is_refused(store, container, today):
    _seed_ramesh(store)
    plan = container.settlement_service.preview("e1", "10", today=today)
    store.employees = [replace(e, version=e.version + 1) for e in store.employees]

    with pytest.raises(ConcurrentSettlementError):
        store.apply_settlement(plan)
    assert len(store.salary) == 2
    assert store.payments == []


def test_preview_does_not_write(store, container, today):
    _seed_ramesh(store)

    plan = container.settlement_service.preview("e1", "60", today=today)

    assert store.writes == []
    assert set(plan.salary_entry_ids) == {"s1", "s2"}
    assert plan.removed_credit_ids == ("d1",)
    assert [(c.id, c.amount) for c in plan.reduced_credit_entries] == [("d2", Decimal("20"))]
    assert plan.available_credit_before == Decimal("100")
    assert plan.available_credit_after == Decimal("40")


def test_plan_keeps_other_employees_first(store, today):
    ramesh = store.add_employee("e1")
    store.add_credit("e2", "40", entry_id="x1")
    store.add_credit("e1", "10", entry_id="d1")
    store.add_salary("e1", "100")

    plan = plan_settlement(ramesh, store.salary, store.credit, Decimal("5"), today=today)

    assert [(c.id, c.amount) for c in plan.credit_entries] == [("x1", Decimal("40")), ("d1", Decimal("5"))]


def test_reallocate_credit_matches_plan(store):
    store.add_credit("e1", "50", day=date(2026, 2, 1), entry_id="d1")
    store.add_credit("e2", "25", day=date(2026, 1, 1), entry_id="x1")
    store.add_credit("e1", "30", day=date(2026, 2, 2), entry_id="d2")

    collection, allocation = reallocate_credit(store.credit, "e1", Decimal("60"))

    assert [(c.id, c.amount) for c in collection] == [("x1", Decimal("25")), ("d2", Decimal("20"))]
    assert [c.id for c in allocation.removed] == ["d1"]


def test_payment_summaries_and_statistics(store, container, today):
    _seed_ramesh(store)
    store.add_employee("e2", name="Suresh", mobile="9123456780")

    summaries = container.settlement_service.payment_summaries({"e1": "60"}, today=today)
    by_id = {s.employee_id: s for s in summaries}

    ramesh = by_id["e1"]
    assert ramesh.total_salary == Decimal("1200")
    assert ramesh.total_available_credit == Decimal("100")
    assert ramesh.net_payable == Decimal("1140")
    assert ramesh.avg_salary_per_entry == Decimal("600")
    assert ramesh.has_recent_activity is False
    assert by_id["e2"].net_payable == 0
    assert by_id["e2"].avg_salary_per_entry == 0

    stats = container.settlement_service.statistics(summaries)
    assert stats.total_employees == 2
    assert stats.employees_with_salary == 1
    assert stats.employees_with_credit == 1
    assert stats.total_payable_amount == Decimal("1140")
    assert stats.average_net_payable == Decimal("570")


def test_credit_since_last_payment_is_informational(store, container, today):
    store.add_employee("e1")
    store.add_salary("e1", "100")
    store.add_payment("e1", "200", "20", day=date(2026, 2, 5))
    store.add_credit("e1", "15", day=date(2026, 2, 3))
    store.add_credit("e1", "25", day=date(2026, 2, 10))

    (summary,) = container.settlement_service.payment_summaries(today=today)

    assert summary.last_payment_date == date(2026, 2, 5)
    assert summary.credit_since_last_payment == Decimal("25")
    assert summary.total_available_credit == Decimal("40")


def test_list_payments_newest_first(store, container):
    store.add_employee("e1")
    store.add_payment("e1", "100", "0", day=date(2026, 1, 1), record_id="p-old")
    store.add_payment("e1", "100", "0", day=date(2026, 2, 1), record_id="p-new")
    store.add_payment("e2", "100", "0", day=date(2026, 2, 2), record_id="p-other")

    assert [p.id for p in container.settlement_service.list_payments(employee_id="e1")] == ["p-new", "p-old"]


@pytest.mark.parametrize("manual_credit", ["49.999", "0.005", "10.001"])
def test_sub_cent_deduction_rejected(store, container, today, manual_credit):
    _seed_ramesh(store)

    with pytest.raises(SettlementError, match="at most 2 decimal places"):
        container.settlement_service.preview("e1", manual_credit, today=today)
    assert store.writes == []


def test_trailing_zeros_are_not_extra_places(store, container, today):
    _seed_ramesh(store)

    plan = container.settlement_service.preview("e1", "49.500", today=today)

    assert plan.payment.credit_deducted == Decimal("49.5")
    assert [(c.id, c.amount) for c in plan.reduced_credit_entries] == [("d1", Decimal("0.5"))]


def test_plan_settlement_rejects_sub_cent_deduction(store, today):
    ramesh = store.add_employee("e1")
    store.add_salary("e1", "100")
    store.add_credit("e1", "50")

    with pytest.raises(SettlementError):
        plan_settlement(ramesh, store.salary, store.credit, Decimal("0.005"), today=today)
