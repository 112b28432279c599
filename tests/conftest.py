from __future__ import annotations

import itertools
from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

import pytest

from src.dairy_payroll.dairy_payroll.container import wire
from src.dairy_payroll.dairy_payroll.core.enums import AnimalType
from src.dairy_payroll.dairy_payroll.core.exceptions import ConcurrentSettlementError
from src.dairy_payroll.dairy_payroll.credit.model import CreditEntry
from src.dairy_payroll.dairy_payroll.employees.model import Employee
from src.dairy_payroll.dairy_payroll.payments.model import PaymentRecord
from src.dairy_payroll.dairy_payroll.salary.model import SalaryEntry

CREATED = datetime(2026, 2, 1, 9, 0, 0)


class InMemoryStore:
    """Every repository Protocol over plain lists; `writes` logs each mutating call."""

    def __init__(self):
        self.employees: list[Employee] = []
        self.salary: list[SalaryEntry] = []
        self.credit: list[CreditEntry] = []
        self.payments: list[PaymentRecord] = []
        self.writes: list[str] = []
        self._ids = itertools.count(1)

    def _next_id(self, prefix: str) -> str:
        return f"{prefix}{next(self._ids)}"

    # seeding helpers (not part of any Protocol, not logged)
    def add_employee(self, employee_id: str, name: str = "Ramesh", mobile: str = "9876543210") -> Employee:
        employee = Employee(id=employee_id, name=name, mobile=mobile, created_at=CREATED)
        self.employees.append(employee)
        return employee

    def add_salary(self, employee_id: str, amount, *, day: date = date(2026, 2, 1), liters="10", entry_id=None) -> SalaryEntry:
        entry = SalaryEntry(
            id=entry_id or self._next_id("s"),
            employee_id=employee_id,
            date=day,
            amount=Decimal(str(amount)),
            liters=Decimal(str(liters)),
            animal_type=AnimalType.COW,
            created_at=CREATED,
        )
        self.salary.append(entry)
        return entry

    def add_credit(self, employee_id: str, amount, *, day: date = date(2026, 2, 1), item="Feed", entry_id=None) -> CreditEntry:
        entry = CreditEntry(
            id=entry_id or self._next_id("c"),
            employee_id=employee_id,
            date=day,
            item_name=item,
            amount=Decimal(str(amount)),
            created_at=CREATED,
        )
        self.credit.append(entry)
        return entry

    def add_payment(self, employee_id: str, salary, deducted, *, day: date, record_id=None) -> PaymentRecord:
        record = PaymentRecord(
            id=record_id or self._next_id("p"),
            employee_id=employee_id,
            salary_amount=Decimal(str(salary)),
            credit_deducted=Decimal(str(deducted)),
            net_paid=Decimal(str(salary)) - Decimal(str(deducted)),
            payment_date=day,
            created_at=CREATED,
        )
        self.payments.append(record)
        return record

    # EmployeeRepository
    def list_employees(self):
        return list(reversed(self.employees))

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return next((e for e in self.employees if e.id == employee_id), None)

    def create_employee(self, *, name: str, mobile: str) -> Employee:
        self.writes.append("create_employee")
        employee = Employee(id=self._next_id("e"), name=name, mobile=mobile, created_at=CREATED)
        self.employees.append(employee)
        return employee

    def update_employee(self, employee_id: str, *, name: str, mobile: str) -> bool:
        self.writes.append("update_employee")
        for i, e in enumerate(self.employees):
            if e.id == employee_id:
                self.employees[i] = replace(e, name=name, mobile=mobile)
                return True
        return False

    def delete_by_id(self, employee_id: str) -> bool:
        self.writes.append("delete_employee")
        before = len(self.employees)
        self.employees = [e for e in self.employees if e.id != employee_id]
        self.salary = [e for e in self.salary if e.employee_id != employee_id]
        self.credit = [e for e in self.credit if e.employee_id != employee_id]
        self.payments = [p for p in self.payments if p.employee_id != employee_id]
        return len(self.employees) < before

    # SalaryRepository
    def list_salary_entries(self):
        return sorted(self.salary, key=lambda e: e.date, reverse=True)

    def insert_salary_entry(self, entry) -> SalaryEntry:
        self.writes.append("insert_salary_entry")
        saved = SalaryEntry(id=self._next_id("s"), created_at=CREATED, **entry.__dict__)
        self.salary.append(saved)
        return saved

    def delete_salary_entry(self, entry_id: str) -> bool:
        self.writes.append("delete_salary_entry")
        before = len(self.salary)
        self.salary = [e for e in self.salary if e.id != entry_id]
        return len(self.salary) < before

    # CreditRepository
    def list_credit_entries(self):
        return list(self.credit)

    def insert_credit_entry(self, entry) -> CreditEntry:
        self.writes.append("insert_credit_entry")
        saved = CreditEntry(id=self._next_id("c"), created_at=CREATED, **entry.__dict__)
        self.credit.append(saved)
        return saved

    def update_credit_entry(self, entry_id: str, entry) -> Optional[CreditEntry]:
        self.writes.append("update_credit_entry")
        for i, e in enumerate(self.credit):
            if e.id == entry_id:
                self.credit[i] = CreditEntry(id=e.id, created_at=e.created_at, **entry.__dict__)
                return self.credit[i]
        return None

    def delete_credit_entry(self, entry_id: str) -> bool:
        self.writes.append("delete_credit_entry")
        before = len(self.credit)
        self.credit = [e for e in self.credit if e.id != entry_id]
        return len(self.credit) < before

    def replace_all_credit_entries(self, entries) -> None:
        self.writes.append("replace_all_credit_entries")
        self.credit = list(entries)

    # PaymentRepository
    def insert_payment_record(self, record) -> PaymentRecord:
        self.writes.append("insert_payment_record")
        saved = PaymentRecord(id=self._next_id("p"), created_at=CREATED, **record.__dict__)
        self.payments.append(saved)
        return saved

    def list_payment_records(self):
        return sorted(self.payments, key=lambda p: p.payment_date, reverse=True)

    # SettlementRepository
    def apply_settlement(self, plan) -> PaymentRecord:
        employee = self.get_by_id(plan.employee_id)
        if employee is None or employee.version != plan.expected_version:
            raise ConcurrentSettlementError("Employee was changed by another settlement")
        self.employees = [replace(e, version=e.version + 1) if e.id == employee.id else e for e in self.employees]

        record = self.insert_payment_record(plan.payment)
        self.replace_all_credit_entries(plan.credit_entries)
        for entry_id in plan.salary_entry_ids:
            self.delete_salary_entry(entry_id)
        return record


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def container(store):
    return wire(
        employees_repo=store,
        salary_repo=store,
        credit_repo=store,
        payments_repo=store,
        settlements_repo=store,
    )


@pytest.fixture
def today() -> date:
    return date(2026, 2, 15)
