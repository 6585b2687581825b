"""
Activity Log Service

Records who visited the portal. Missing details are skipped, not rejected,
so the frontend can fire this unconditionally.
"""

import logging

from app.core.tabular import TabularStore
from app.modules.records import repository
from app.modules.records.helpers import utc_timestamp
from app.modules.records.models import ActivityLogRecord

logger = logging.getLogger(__name__)


async def log_activity(store: TabularStore, name: str | None, email: str | None) -> bool:
    """
    Append an activity log entry.

    Args:
        store: Tabular store holding the activity log table
        name: Visitor name
        email: Visitor email

    Returns:
        True if an entry was written, False if skipped for missing details
    """
    if not name or not email:
        return False

    await repository.create_activity_log_entry(
        store, ActivityLogRecord(logged_at=utc_timestamp(), name=name, email=email)
    )
    return True
