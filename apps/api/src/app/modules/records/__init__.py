"""
Candidate Records Module

Typed access to the positional tables kept in the tabular store:
- screening: one row per screening application
- Enrollments: one row per verified payment
- user_log: visitor activity entries
"""

from .models import ActivityLogRecord, EnrollmentRecord, ScreeningRecord

__all__ = ["ScreeningRecord", "EnrollmentRecord", "ActivityLogRecord"]
