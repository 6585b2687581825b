"""
Screenings Schemas

Pydantic schemas for screening submission and lookup.
Wire format uses camelCase keys (enrollmentId, resumeLink, userEmail).
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.modules.records.models import ScreeningRecord


class ScreeningCreate(BaseModel):
    """Form fields of POST /screening (the resume file travels separately)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    phone: str = ""
    position: str = ""
    duration: str = ""
    user_email: str | None = None


class ResumeUpload(BaseModel):
    """An uploaded resume file."""

    filename: str = ""
    content_type: str = "application/pdf"
    content: bytes = b""


class ScreeningSubmitted(BaseModel):
    """Result of a successful screening submission."""

    enrollment_id: str
    resume_link: str
    notification_sent: bool


class ScreeningSubmitResponse(BaseModel):
    """Response for an accepted screening."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    status: str = "success"
    enrollment_id: str
    notification: Literal["sent", "failed"] = Field(
        "sent", description="Whether the confirmation email went out"
    )


class ScreeningListItem(BaseModel):
    """A screening as shown to its owner."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    email: str
    phone: str
    position: str
    duration: str
    enrollment_id: str
    resume_link: str
    status: str = Field(..., description="Approval status as set by staff ('' until reviewed)")

    @classmethod
    def from_record(cls, record: ScreeningRecord) -> "ScreeningListItem":
        return cls(
            name=record.name,
            email=record.email,
            phone=record.phone,
            position=record.position,
            duration=record.duration,
            enrollment_id=record.enrollment_id,
            resume_link=record.resume_link,
            status=record.approval_status,
        )


class ScreeningListResponse(BaseModel):
    """Response for GET /all-screenings/{email}."""

    status: str = "found"
    data: list[ScreeningListItem]
