"""
Approvals Service Layer

Read-only approval gate. Staff set the approval status on the screening row
out-of-band; this module only reads it.

Note: order creation does not consult this gate, so paying is not tied to
an approved candidate. The payment page calls it before starting checkout.
"""

import logging

from app.core.errors import ServiceError
from app.core.tabular import TabularStore
from app.modules.approvals.schemas import CandidateSnapshot
from app.modules.records import repository

logger = logging.getLogger(__name__)


class ApprovalServiceError(ServiceError):
    """Base exception for approval lookups."""


class CandidateNotFoundError(ApprovalServiceError):
    """Raised when no screening has the enrollment ID."""

    def __init__(self, enrollment_id: str):
        super().__init__(
            message=f"Enrollment {enrollment_id} not found",
            error_code="CANDIDATE_NOT_FOUND",
            status_code=404,
        )


class CandidateNotApprovedError(ApprovalServiceError):
    """Raised when the screening exists but has not been approved."""

    def __init__(self, enrollment_id: str):
        super().__init__(
            message=f"Enrollment {enrollment_id} is not approved",
            error_code="CANDIDATE_NOT_APPROVED",
            status_code=403,
        )


async def get_approved_candidate(store: TabularStore, enrollment_id: str) -> CandidateSnapshot:
    """
    Get an approved candidate by enrollment ID.

    The enrollment ID must match exactly (case-sensitive). The approval
    status is compared trimmed and case-insensitively against "approved".

    Args:
        store: Tabular store holding the Screenings table
        enrollment_id: Enrollment ID issued at screening time

    Returns:
        Snapshot of the candidate's screening details

    Raises:
        CandidateNotFoundError: If no screening has this enrollment ID
        CandidateNotApprovedError: If the screening is not approved
    """
    record = await repository.get_screening_by_enrollment_id(store, enrollment_id)

    if record is None:
        raise CandidateNotFoundError(enrollment_id)

    if not record.is_approved:
        logger.info(f"Enrollment {enrollment_id} looked up before approval")
        raise CandidateNotApprovedError(enrollment_id)

    return CandidateSnapshot.from_record(record)
