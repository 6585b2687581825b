"""
Screenings Service Layer

Business logic for screening applications.

This module implements:
1. Screening Submission Flow:
   - Reject submissions without a resume
   - Reject a second submission for the same candidate email (case-insensitive)
   - Issue an enrollment ID ("AGP" + last 6 digits of the epoch millis)
   - Upload the resume with a public-read link
   - Append the screening row (approval status empty)
   - Send the "screening received" email (best-effort)

2. Owner Lookup:
   - All screenings submitted from one account, matched case-insensitively

Known limitations:
- The duplicate check and the append are separate calls, so two concurrent
  submissions for one email can both pass the check
- Enrollment IDs are not collision-free within the same millisecond window
- A resume uploaded before a failed append stays in the blob store
"""

import logging

from app.core.blobs import BlobStore
from app.core.config import settings
from app.core.email import send_screening_received
from app.core.errors import ServiceError
from app.core.tabular import TabularStore
from app.modules.records import repository
from app.modules.records.helpers import now_millis, resolve_owner_email, utc_timestamp
from app.modules.records.models import ScreeningRecord
from app.modules.screenings.schemas import ResumeUpload, ScreeningCreate, ScreeningSubmitted

logger = logging.getLogger(__name__)

ENROLLMENT_ID_DIGITS = 6


class ScreeningServiceError(ServiceError):
    """Base exception for screening service errors."""


class ResumeMissingError(ScreeningServiceError):
    """Raised when a screening is submitted without a resume file."""

    def __init__(self):
        super().__init__(
            message="Resume missing",
            error_code="RESUME_MISSING",
            status_code=400,
        )


class DuplicateScreeningError(ScreeningServiceError):
    """
    Raised when the candidate email already has a screening.

    Not a failure from the caller's point of view: the endpoint answers
    200 with status "duplicate".
    """

    def __init__(self, email: str):
        super().__init__(
            message=f"A screening has already been submitted for {email}",
            error_code="DUPLICATE_SCREENING",
            status_code=200,
        )


class ScreeningsNotFoundError(ScreeningServiceError):
    """Raised when an owner has no screenings."""

    def __init__(self):
        super().__init__(
            message="No screenings found",
            error_code="SCREENINGS_NOT_FOUND",
            status_code=404,
        )


def generate_enrollment_id(millis: int | None = None) -> str:
    """
    Generate an enrollment ID from the current time.

    Example: 1718000123456 -> AGP123456

    Args:
        millis: Epoch milliseconds to derive the ID from (defaults to now)

    Returns:
        Configured prefix followed by the last 6 digits of the timestamp
    """
    if millis is None:
        millis = now_millis()
    return f"{settings.enrollment_id_prefix}{str(millis)[-ENROLLMENT_ID_DIGITS:]}"


def _resume_file_name(candidate_name: str, millis: int) -> str:
    return f"{candidate_name}_resume_{millis}.pdf"


async def submit_screening(
    store: TabularStore,
    blobs: BlobStore,
    data: ScreeningCreate,
    resume: ResumeUpload | None,
) -> ScreeningSubmitted:
    """
    Submit a new screening application.

    Args:
        store: Tabular store holding the Screenings table
        blobs: Blob store for the resume
        data: Candidate details from the form
        resume: Uploaded resume file

    Returns:
        ScreeningSubmitted with the new enrollment ID

    Raises:
        ResumeMissingError: If no resume (or an empty one) was uploaded
        DuplicateScreeningError: If the email already has a screening
    """
    if resume is None or not resume.content:
        raise ResumeMissingError()

    existing = await repository.get_screening_by_email(store, data.email)
    if existing:
        logger.warning(
            f"Duplicate screening attempt: existing enrollment_id={existing.enrollment_id}"
        )
        raise DuplicateScreeningError(data.email)

    millis = now_millis()
    enrollment_id = generate_enrollment_id(millis)

    resume_link = await blobs.upload_public(
        name=_resume_file_name(data.name, millis),
        content=resume.content,
        content_type=resume.content_type,
    )
    logger.info(f"Uploaded resume for enrollment {enrollment_id}")

    record = ScreeningRecord(
        submitted_at=utc_timestamp(),
        name=data.name,
        email=data.email,
        phone=data.phone,
        position=data.position,
        duration=data.duration,
        enrollment_id=enrollment_id,
        resume_link=resume_link,
        approval_status="",
        owner_email=resolve_owner_email(data.user_email, data.email),
    )

    try:
        await repository.create_screening(store, record)
    except Exception as e:
        logger.error(
            f"Screening row not saved for enrollment {enrollment_id}; "
            f"uploaded resume left at {resume_link}: {e}"
        )
        raise
    logger.info(f"Created screening {enrollment_id}")

    # Send confirmation email (non-blocking - log error but don't fail the request)
    notification_sent = False
    try:
        notification_sent = await send_screening_received(
            to_email=data.email,
            candidate_name=data.name,
            position=data.position,
            enrollment_id=enrollment_id,
            resume_link=resume_link,
        )
        if not notification_sent:
            logger.error(f"Failed to send screening email for enrollment {enrollment_id}")
    except Exception as e:
        logger.error(f"Exception sending screening email for enrollment {enrollment_id}: {e}")

    return ScreeningSubmitted(
        enrollment_id=enrollment_id,
        resume_link=resume_link,
        notification_sent=notification_sent,
    )


async def list_screenings_by_owner(store: TabularStore, email: str) -> list[ScreeningRecord]:
    """
    Get all screenings submitted from an account.

    Raises:
        ScreeningsNotFoundError: If there are none
    """
    records = await repository.list_screenings_by_owner(store, email)
    if not records:
        raise ScreeningsNotFoundError()
    return records
