"""
Approvals Schemas
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.modules.records.models import ScreeningRecord


class CandidateSnapshot(BaseModel):
    """Approved candidate details handed to the payment page."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    email: str
    phone: str
    position: str
    duration: str
    enrollment_id: str
    resume_link: str

    @classmethod
    def from_record(cls, record: ScreeningRecord) -> "CandidateSnapshot":
        return cls(
            name=record.name,
            email=record.email,
            phone=record.phone,
            position=record.position,
            duration=record.duration,
            enrollment_id=record.enrollment_id,
            resume_link=record.resume_link,
        )


class ApprovedCandidateResponse(BaseModel):
    """Response for GET /get-student/{enrollment_id}."""

    status: str = "approved"
    data: CandidateSnapshot
