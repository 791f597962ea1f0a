"""School Attendance package.

This package is organized by feature modules (users, classes, attendance,
dashboard, ...) with a thin Flask controller layer on top of service and
storage layers.
"""
