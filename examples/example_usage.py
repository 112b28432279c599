"""Example: drive the service layer directly (no Flask).

Controllers stay thin; the business rules live in the services.
"""

import importlib

from config import get_settings_module

from src.dairy_payroll.dairy_payroll.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    summaries = container.settlement_service.payment_summaries()
    for s in summaries:
        print(f"{s.employee_name}: salary={s.total_salary} credit={s.total_available_credit} entries={s.salary_entry_count}")

    payable = [s for s in summaries if s.total_salary > 0]
    if payable:
        first = payable[0]
        plan = container.settlement_service.preview(first.employee_id, first.total_available_credit)
        print("preview:", plan.payment)


if __name__ == "__main__":
    main()
