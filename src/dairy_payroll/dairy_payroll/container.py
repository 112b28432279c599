from __future__ import annotations

from dataclasses import dataclass

from .credit.mysql_credit_repository import MySQLCreditRepository
from .credit.repository import CreditRepository
from .credit.service import CreditService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .payments.mysql_payment_repository import MySQLPaymentRepository
from .payments.repository import PaymentRepository
from .payroll.mysql_settlement_repository import MySQLSettlementRepository
from .payroll.repository import SettlementRepository
from .payroll.service import SettlementService
from .reports.service import ReportService
from .salary.mysql_salary_repository import MySQLSalaryRepository
from .salary.repository import SalaryRepository
from .salary.service import SalaryService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    salary_repo: SalaryRepository
    credit_repo: CreditRepository
    payments_repo: PaymentRepository
    settlements_repo: SettlementRepository

    employee_service: EmployeeService
    salary_service: SalaryService
    credit_service: CreditService
    settlement_service: SettlementService
    report_service: ReportService


def wire(
    *,
    employees_repo: EmployeeRepository,
    salary_repo: SalaryRepository,
    credit_repo: CreditRepository,
    payments_repo: PaymentRepository,
    settlements_repo: SettlementRepository,
    recent_activity_days: int = 7,
    recent_credit_days: int = 10,
) -> Container:
    return Container(
        employees_repo=employees_repo,
        salary_repo=salary_repo,
        credit_repo=credit_repo,
        payments_repo=payments_repo,
        settlements_repo=settlements_repo,
        employee_service=EmployeeService(employees_repo),
        salary_service=SalaryService(salary_repo, employees_repo),
        credit_service=CreditService(credit_repo, employees_repo, recent_days=recent_credit_days),
        settlement_service=SettlementService(
            employees_repo,
            salary_repo,
            credit_repo,
            payments_repo,
            settlements_repo,
            recent_days=recent_activity_days,
        ),
        report_service=ReportService(employees_repo, salary_repo, credit_repo, payments_repo),
    )


def build_container(*, db_config: dict, recent_activity_days: int = 7, recent_credit_days: int = 10) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire(
        employees_repo=MySQLEmployeeRepository(conn),
        salary_repo=MySQLSalaryRepository(conn),
        credit_repo=MySQLCreditRepository(conn),
        payments_repo=MySQLPaymentRepository(conn),
        settlements_repo=MySQLSettlementRepository(conn),
        recent_activity_days=recent_activity_days,
        recent_credit_days=recent_credit_days,
    )
