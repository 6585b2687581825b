"""
Candidate Records Repository

Named operations over the Screenings, Enrollments and activity log tables.
All operations are async and take the tabular store as their first argument,
the way the other repositories take a database session.

Design Principles:
- Single responsibility - only row access, no business logic
- Rows are decoded into typed records before leaving this module
- Scans return rows in insertion order
"""

from app.core.config import settings
from app.core.tabular import TabularStore

from .helpers import emails_match
from .models import ActivityLogRecord, EnrollmentRecord, ScreeningRecord

SCREENINGS_RANGE = "A2:J"
ENROLLMENTS_RANGE = "A2:J"


async def list_screenings(store: TabularStore) -> list[ScreeningRecord]:
    """Get every screening record, oldest first."""
    rows = await store.scan(settings.screenings_table, SCREENINGS_RANGE)
    return [ScreeningRecord.from_row(row) for row in rows]


async def get_screening_by_email(store: TabularStore, email: str) -> ScreeningRecord | None:
    """Get the first screening whose candidate email matches case-insensitively."""
    for record in await list_screenings(store):
        if emails_match(record.email, email):
            return record
    return None


async def get_screening_by_enrollment_id(
    store: TabularStore, enrollment_id: str
) -> ScreeningRecord | None:
    """Get the first screening with exactly this enrollment ID (case-sensitive)."""
    for record in await list_screenings(store):
        if record.enrollment_id == enrollment_id:
            return record
    return None


async def list_screenings_by_owner(store: TabularStore, owner_email: str) -> list[ScreeningRecord]:
    """Get all screenings whose owner email matches case-insensitively."""
    return [
        record
        for record in await list_screenings(store)
        if emails_match(record.owner_email, owner_email)
    ]


async def create_screening(store: TabularStore, record: ScreeningRecord) -> ScreeningRecord:
    """Append a screening record."""
    await store.append(settings.screenings_table, record.to_row())
    return record


async def list_enrollments(store: TabularStore) -> list[EnrollmentRecord]:
    """Get every enrollment record, oldest first."""
    rows = await store.scan(settings.enrollments_table, ENROLLMENTS_RANGE)
    return [EnrollmentRecord.from_row(row) for row in rows]


async def list_enrollments_by_owner(
    store: TabularStore, owner_email: str
) -> list[EnrollmentRecord]:
    """Get all enrollments whose owner email matches case-insensitively."""
    return [
        record
        for record in await list_enrollments(store)
        if emails_match(record.owner_email, owner_email)
    ]


async def create_enrollment(store: TabularStore, record: EnrollmentRecord) -> EnrollmentRecord:
    """Append an enrollment record."""
    await store.append(settings.enrollments_table, record.to_row())
    return record


async def create_activity_log_entry(
    store: TabularStore, record: ActivityLogRecord
) -> ActivityLogRecord:
    """Append an activity log entry."""
    await store.append(settings.activity_log_table, record.to_row())
    return record
