"""HR Connect package.

Organized by feature modules (shifts, attendance, geo, payroll, ...) with a
thin Flask controller layer over pure domain functions and service classes.
"""
