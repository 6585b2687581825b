"""
Enrollments Router

Endpoints:
- POST /create-order - Create a payment order for the program fee
- POST /verify - Verify a payment confirmation and record the enrollment
- GET /check-enrollment/{email} - List enrollments recorded for an account
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.payments import PaymentGateway, get_payment_gateway
from app.core.tabular import TabularStore, get_tabular_store
from app.modules.enrollments import service
from app.modules.enrollments.schemas import (
    CreateOrderRequest,
    EnrollmentListItem,
    EnrollmentListResponse,
    PaymentOrder,
    PaymentVerificationRequest,
    VerifyPaymentResponse,
)
from app.modules.enrollments.service import InvalidSignatureError, NotEnrolledError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/create-order",
    response_model=PaymentOrder,
    summary="Create Payment Order",
    responses={
        500: {
            "description": "Gateway failure",
            "content": {"application/json": {"example": {"error": "Unable to create order"}}},
        },
    },
)
async def create_order(
    data: CreateOrderRequest,
    gateway: PaymentGateway = Depends(get_payment_gateway),
) -> PaymentOrder | JSONResponse:
    """
    Create a gateway order. The amount is given in rupees and sent in paise.

    Args:
        data: Request containing the fee amount
        gateway: Payment gateway (injected)
    """
    try:
        return await service.create_order(gateway, data.amount)
    except Exception as e:
        logger.exception(f"Error in /create-order: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Unable to create order"},
        )


@router.post(
    "/verify",
    response_model=VerifyPaymentResponse,
    summary="Verify Payment And Enroll",
    description="""
Verify the gateway's payment signature and record the enrollment.

The signature is HMAC-SHA256 over `order_id|payment_id`. On mismatch nothing
is stored and no email is sent. A stored enrollment whose confirmation email
failed answers `{"status": "success", "notification": "failed"}`.
""",
    responses={
        400: {
            "description": "Invalid signature",
            "content": {
                "application/json": {"example": {"status": "error", "message": "Invalid signature"}}
            },
        },
        500: {"description": "Storage failure after the signature verified"},
    },
)
async def verify_payment(
    data: PaymentVerificationRequest,
    store: TabularStore = Depends(get_tabular_store),
) -> VerifyPaymentResponse | JSONResponse:
    """
    Verify a payment confirmation and record the enrollment.

    Args:
        data: Candidate details and gateway confirmation
        store: Tabular store (injected)
    """
    try:
        result = await service.verify_and_enroll(store, data, settings.razorpay_secret)
        return VerifyPaymentResponse(
            notification="sent" if result.notification_sent else "failed"
        )
    except InvalidSignatureError as e:
        return JSONResponse(
            status_code=e.status_code,
            content={"status": "error", "message": e.message},
        )
    except Exception as e:
        logger.exception(f"Error in /verify: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"status": "error", "message": str(e)},
        )


@router.get(
    "/check-enrollment/{email}",
    response_model=EnrollmentListResponse,
    summary="List Enrollments For Account",
    responses={
        404: {
            "description": "No enrollments for this account",
            "content": {"application/json": {"example": {"status": "not_enrolled"}}},
        },
    },
)
async def check_enrollment(
    email: str,
    store: TabularStore = Depends(get_tabular_store),
) -> EnrollmentListResponse | JSONResponse:
    """
    List enrollments whose owner email matches (case-insensitive).

    Args:
        email: Owner email (URL-decoded path parameter)
        store: Tabular store (injected)
    """
    try:
        records = await service.list_enrollments_by_owner(store, email)
        return EnrollmentListResponse(data=[EnrollmentListItem.from_record(r) for r in records])
    except NotEnrolledError:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"status": "not_enrolled"}
        )
    except Exception as e:
        logger.exception(f"Error in /check-enrollment: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"status": "error", "message": str(e)},
        )
