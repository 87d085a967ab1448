"""School Portal package.

This package is organized by feature modules (auth, attendance, leave, fees, ...)
with a thin Flask controller layer over role-scoped REST API services.
"""
