"""
Enrollments Service Layer

Business logic for paying the program fee and recording the enrollment.

This module implements:
1. Order Creation:
   - Convert the fee to minor units and create a gateway order
   - No candidate identity is attached and approval is not checked

2. Payment Verification Flow:
   - Verify the gateway signature (hard rejection on mismatch)
   - Copy the resume link from the screening with the same enrollment ID,
     or record "N/A" when there is none
   - Append the enrollment row
   - Send the "payment received" email (best-effort)

3. Owner Lookup:
   - All enrollments recorded for one account

Known limitations:
- Verifying the same confirmation twice records two enrollments
- The append is not transactional; a failure after it leaves the row in place
"""

import logging

from app.core.config import settings
from app.core.email import send_payment_received
from app.core.errors import ServiceError
from app.core.payments import PaymentGateway
from app.core.security import verify_payment_signature
from app.core.tabular import TabularStore
from app.modules.enrollments.schemas import (
    EnrollmentVerified,
    PaymentOrder,
    PaymentVerificationRequest,
)
from app.modules.records import repository
from app.modules.records.helpers import now_millis, resolve_owner_email, utc_timestamp
from app.modules.records.models import RESUME_LINK_NOT_AVAILABLE, EnrollmentRecord

logger = logging.getLogger(__name__)

MINOR_UNITS_PER_MAJOR = 100


class EnrollmentServiceError(ServiceError):
    """Base exception for enrollment service errors."""


class InvalidSignatureError(EnrollmentServiceError):
    """Raised when a payment confirmation signature does not verify."""

    def __init__(self):
        super().__init__(
            message="Invalid signature",
            error_code="INVALID_SIGNATURE",
            status_code=400,
        )


class NotEnrolledError(EnrollmentServiceError):
    """Raised when an owner has no enrollments."""

    def __init__(self):
        super().__init__(
            message="No enrollments found",
            error_code="NOT_ENROLLED",
            status_code=404,
        )


def to_minor_units(amount: float) -> int:
    """Convert a major-unit amount (rupees) to minor units (paise)."""
    return int(round(amount * MINOR_UNITS_PER_MAJOR))


async def create_order(gateway: PaymentGateway, amount: float) -> PaymentOrder:
    """
    Create a payment order for the program fee.

    Args:
        gateway: Payment gateway client
        amount: Fee in major units

    Returns:
        The gateway order (amount in minor units)
    """
    order = await gateway.create_order(
        amount=to_minor_units(amount),
        currency=settings.payment_currency,
        receipt=f"rcpt_{now_millis()}",
    )
    return PaymentOrder.model_validate(order)


async def verify_and_enroll(
    store: TabularStore,
    data: PaymentVerificationRequest,
    secret: str,
) -> EnrollmentVerified:
    """
    Verify a payment confirmation and record the enrollment.

    Nothing is read, written or sent unless the signature verifies.

    Args:
        store: Tabular store holding the Screenings and Enrollments tables
        data: Candidate details and the gateway confirmation
        secret: Gateway account secret used to sign confirmations

    Returns:
        EnrollmentVerified with the stored record

    Raises:
        InvalidSignatureError: If the signature does not match
    """
    if not verify_payment_signature(data.order_id, data.payment_id, data.signature, secret):
        logger.warning(f"Rejected payment confirmation for order {data.order_id}: bad signature")
        raise InvalidSignatureError()

    screening = await repository.get_screening_by_enrollment_id(store, data.enrollment_id)
    if screening is None:
        logger.warning(
            f"No screening found for enrollment {data.enrollment_id!r}; "
            f"recording resume link as {RESUME_LINK_NOT_AVAILABLE}"
        )
        resume_link = RESUME_LINK_NOT_AVAILABLE
    else:
        resume_link = screening.resume_link

    record = EnrollmentRecord(
        recorded_at=utc_timestamp(),
        name=data.name,
        email=data.email,
        phone=data.phone,
        position=data.position,
        duration=data.duration,
        payment_id=data.payment_id,
        resume_link=resume_link,
        enrollment_id=data.enrollment_id,
        owner_email=resolve_owner_email(data.user_email, data.email),
    )
    await repository.create_enrollment(store, record)
    logger.info(f"Recorded enrollment {data.enrollment_id} for payment {data.payment_id}")

    # Send confirmation email (non-blocking - log error but don't fail the request)
    notification_sent = False
    try:
        notification_sent = await send_payment_received(
            to_email=data.email,
            candidate_name=data.name,
            position=data.position,
            enrollment_id=data.enrollment_id,
            payment_id=data.payment_id,
        )
        if not notification_sent:
            logger.error(f"Failed to send payment email for enrollment {data.enrollment_id}")
    except Exception as e:
        logger.error(f"Exception sending payment email for enrollment {data.enrollment_id}: {e}")

    return EnrollmentVerified(enrollment=record, notification_sent=notification_sent)


async def list_enrollments_by_owner(store: TabularStore, email: str) -> list[EnrollmentRecord]:
    """
    Get all enrollments recorded for an account.

    Raises:
        NotEnrolledError: If there are none
    """
    records = await repository.list_enrollments_by_owner(store, email)
    if not records:
        raise NotEnrolledError()
    return records
