"""Dairy Payroll package.

Feature modules (employees, salary, credit, payments, payroll, reports) each
keep a repository Protocol, a MySQL implementation, a service holding the
business rules and a thin Flask controller.
"""
