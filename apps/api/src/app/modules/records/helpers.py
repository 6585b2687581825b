"""
Candidate Records Shared Helpers

Timestamp and email utilities used by the screening, enrollment and
activity log services.
"""

import time
from datetime import UTC, datetime


def utc_timestamp(moment: datetime | None = None) -> str:
    """
    Format a timestamp the way rows are stored.

    Example: 2025-06-01T09:30:00.123Z

    Args:
        moment: Datetime to format (defaults to now, UTC)

    Returns:
        ISO-8601 UTC string with millisecond precision and a Z suffix
    """
    moment = moment or datetime.now(UTC)
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def now_millis() -> int:
    """Current epoch time in milliseconds."""
    return time.time_ns() // 1_000_000


def emails_match(stored: str, candidate: str) -> bool:
    """Case-insensitive exact email comparison (no trimming)."""
    return stored.lower() == candidate.lower()


def resolve_owner_email(user_email: str | None, email: str) -> str:
    """
    Get the owner email for a record.

    The owner is the signed-in account that submitted the form, which may
    differ from the candidate's contact email. Falls back to the contact email.
    """
    return user_email or email
