"""Student Attendance admin backend.

This package is organized by feature modules (unlocks, reports, dashboard, ...)
with a thin Flask controller layer and service/repository layers underneath.
"""
