"""
Candidate Record Models

Typed records for the positional tables in the tabular store. Column order
is the persisted schema: every reader depends on it, so change it only
together with the stored data.

to_row / from_row are the single encode/decode boundary. Nothing outside
this package indexes rows by position.
"""

import enum

from pydantic import BaseModel

RESUME_LINK_NOT_AVAILABLE = "N/A"
APPROVED_STATUS = "approved"


class ScreeningColumn(enum.IntEnum):
    """Column offsets of the Screenings table (A..J)."""

    SUBMITTED_AT = 0
    NAME = 1
    EMAIL = 2
    PHONE = 3
    POSITION = 4
    DURATION = 5
    ENROLLMENT_ID = 6
    RESUME_LINK = 7
    APPROVAL_STATUS = 8
    OWNER_EMAIL = 9


class EnrollmentColumn(enum.IntEnum):
    """Column offsets of the Enrollments table (A..J)."""

    RECORDED_AT = 0
    NAME = 1
    EMAIL = 2
    PHONE = 3
    POSITION = 4
    DURATION = 5
    PAYMENT_ID = 6
    RESUME_LINK = 7
    ENROLLMENT_ID = 8
    OWNER_EMAIL = 9


class ActivityLogColumn(enum.IntEnum):
    """Column offsets of the activity log table (A..C)."""

    LOGGED_AT = 0
    NAME = 1
    EMAIL = 2


def _cell(row: list[str], column: int) -> str:
    """Read a cell, treating cells past the end of a short row as empty."""
    if column < len(row) and row[column] is not None:
        return str(row[column])
    return ""


def _encode(values: dict[enum.IntEnum, str], columns: type[enum.IntEnum]) -> list[str]:
    return [values[column] for column in sorted(columns)]


class ScreeningRecord(BaseModel):
    """One screening application."""

    submitted_at: str
    name: str
    email: str
    phone: str
    position: str
    duration: str
    enrollment_id: str
    resume_link: str
    approval_status: str = ""
    owner_email: str

    @property
    def is_approved(self) -> bool:
        """Approval status compared trimmed and case-insensitively."""
        return self.approval_status.strip().lower() == APPROVED_STATUS

    @classmethod
    def from_row(cls, row: list[str]) -> "ScreeningRecord":
        return cls(
            submitted_at=_cell(row, ScreeningColumn.SUBMITTED_AT),
            name=_cell(row, ScreeningColumn.NAME),
            email=_cell(row, ScreeningColumn.EMAIL),
            phone=_cell(row, ScreeningColumn.PHONE),
            position=_cell(row, ScreeningColumn.POSITION),
            duration=_cell(row, ScreeningColumn.DURATION),
            enrollment_id=_cell(row, ScreeningColumn.ENROLLMENT_ID),
            resume_link=_cell(row, ScreeningColumn.RESUME_LINK),
            approval_status=_cell(row, ScreeningColumn.APPROVAL_STATUS),
            owner_email=_cell(row, ScreeningColumn.OWNER_EMAIL),
        )

    def to_row(self) -> list[str]:
        return _encode(
            {
                ScreeningColumn.SUBMITTED_AT: self.submitted_at,
                ScreeningColumn.NAME: self.name,
                ScreeningColumn.EMAIL: self.email,
                ScreeningColumn.PHONE: self.phone,
                ScreeningColumn.POSITION: self.position,
                ScreeningColumn.DURATION: self.duration,
                ScreeningColumn.ENROLLMENT_ID: self.enrollment_id,
                ScreeningColumn.RESUME_LINK: self.resume_link,
                ScreeningColumn.APPROVAL_STATUS: self.approval_status,
                ScreeningColumn.OWNER_EMAIL: self.owner_email,
            },
            ScreeningColumn,
        )


class EnrollmentRecord(BaseModel):
    """One finalized enrollment, written after a verified payment."""

    recorded_at: str
    name: str
    email: str
    phone: str
    position: str
    duration: str
    payment_id: str
    resume_link: str
    enrollment_id: str
    owner_email: str

    @classmethod
    def from_row(cls, row: list[str]) -> "EnrollmentRecord":
        return cls(
            recorded_at=_cell(row, EnrollmentColumn.RECORDED_AT),
            name=_cell(row, EnrollmentColumn.NAME),
            email=_cell(row, EnrollmentColumn.EMAIL),
            phone=_cell(row, EnrollmentColumn.PHONE),
            position=_cell(row, EnrollmentColumn.POSITION),
            duration=_cell(row, EnrollmentColumn.DURATION),
            payment_id=_cell(row, EnrollmentColumn.PAYMENT_ID),
            resume_link=_cell(row, EnrollmentColumn.RESUME_LINK),
            enrollment_id=_cell(row, EnrollmentColumn.ENROLLMENT_ID),
            owner_email=_cell(row, EnrollmentColumn.OWNER_EMAIL),
        )

    def to_row(self) -> list[str]:
        return _encode(
            {
                EnrollmentColumn.RECORDED_AT: self.recorded_at,
                EnrollmentColumn.NAME: self.name,
                EnrollmentColumn.EMAIL: self.email,
                EnrollmentColumn.PHONE: self.phone,
                EnrollmentColumn.POSITION: self.position,
                EnrollmentColumn.DURATION: self.duration,
                EnrollmentColumn.PAYMENT_ID: self.payment_id,
                EnrollmentColumn.RESUME_LINK: self.resume_link,
                EnrollmentColumn.ENROLLMENT_ID: self.enrollment_id,
                EnrollmentColumn.OWNER_EMAIL: self.owner_email,
            },
            EnrollmentColumn,
        )


class ActivityLogRecord(BaseModel):
    """One visitor activity entry."""

    logged_at: str
    name: str
    email: str

    def to_row(self) -> list[str]:
        return _encode(
            {
                ActivityLogColumn.LOGGED_AT: self.logged_at,
                ActivityLogColumn.NAME: self.name,
                ActivityLogColumn.EMAIL: self.email,
            },
            ActivityLogColumn,
        )
