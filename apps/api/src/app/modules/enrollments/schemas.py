"""
Enrollments Schemas

Pydantic schemas for order creation, payment verification and enrollment
lookup. Request keys follow the checkout page: order_id / payment_id /
signature in snake_case, enrollmentId / userEmail in camelCase.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.modules.records.models import EnrollmentRecord


class CreateOrderRequest(BaseModel):
    """Request body for POST /create-order."""

    amount: float = Field(..., gt=0, description="Fee in major currency units (rupees)")


class PaymentOrder(BaseModel):
    """
    Order returned by the payment gateway.

    Extra gateway fields (status, created_at, ...) are kept and echoed back.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    amount: int = Field(..., description="Amount in minor units (paise)")
    currency: str
    receipt: str


class PaymentVerificationRequest(BaseModel):
    """Request body for POST /verify."""

    model_config = ConfigDict(populate_by_name=True)

    # All optional: the signature is the only gate on this request
    name: str = ""
    email: str = ""
    phone: str = ""
    position: str = ""
    duration: str = ""
    enrollment_id: str = Field("", alias="enrollmentId")
    order_id: str = ""
    payment_id: str = ""
    signature: str = ""
    user_email: str | None = Field(None, alias="userEmail")


class EnrollmentVerified(BaseModel):
    """Result of a verified payment."""

    enrollment: EnrollmentRecord
    notification_sent: bool


class VerifyPaymentResponse(BaseModel):
    """Response for a verified payment. The enrollment is stored either way."""

    status: str = "success"
    notification: Literal["sent", "failed"] = Field(
        "sent", description="Whether the payment confirmation email went out"
    )


class EnrollmentListItem(BaseModel):
    """An enrollment as shown to its owner."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    date: str
    name: str
    email: str
    phone: str
    position: str
    duration: str
    payment_id: str
    resume_link: str
    enrollment_id: str

    @classmethod
    def from_record(cls, record: EnrollmentRecord) -> "EnrollmentListItem":
        return cls(
            date=record.recorded_at,
            name=record.name,
            email=record.email,
            phone=record.phone,
            position=record.position,
            duration=record.duration,
            payment_id=record.payment_id,
            resume_link=record.resume_link,
            enrollment_id=record.enrollment_id,
        )


class EnrollmentListResponse(BaseModel):
    """Response for GET /check-enrollment/{email}."""

    status: str = "enrolled"
    data: list[EnrollmentListItem]
