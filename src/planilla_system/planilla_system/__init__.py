"""Planilla System package.

Attendance tracking and payroll calculation for two kinds of workers:
piece-rate production workers ("Producción") and daily-rate workers
("Al Día"). Organized by feature modules (employees, users, attendance,
payroll, dashboard) with a thin Flask controller layer on top of
service/repository layers.
"""
