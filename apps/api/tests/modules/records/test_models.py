"""
Unit tests for candidate record models and helpers.
"""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from app.modules.records.helpers import emails_match, resolve_owner_email, utc_timestamp
from app.modules.records.models import (
    ActivityLogRecord,
    EnrollmentColumn,
    EnrollmentRecord,
    ScreeningColumn,
    ScreeningRecord,
)


class TestScreeningRecord:
    """Tests for the Screenings row layout."""

    def test_to_row_column_order(self, sample_screening):
        row = sample_screening.to_row()

        assert len(row) == 10
        assert row[ScreeningColumn.NAME] == "Asha Verma"
        assert row[ScreeningColumn.EMAIL] == "asha@example.com"
        assert row[6] == "AGP123456"
        assert row[7] == "http://r/1"
        assert row[8] == "approved"
        assert row[9] == "asha.account@example.com"

    def test_from_row_short_row(self):
        """Trailing empty cells are dropped by the sheet; read them as empty."""
        record = ScreeningRecord.from_row(["ts", "Asha", "asha@example.com"])

        assert record.email == "asha@example.com"
        assert record.approval_status == ""
        assert record.owner_email == ""

    def test_from_row_round_trip(self, sample_screening):
        assert ScreeningRecord.from_row(sample_screening.to_row()) == sample_screening

    @pytest.mark.parametrize("status", ["approved", "Approved", "APPROVED", "  approved  "])
    def test_is_approved(self, sample_screening, status):
        assert sample_screening.model_copy(update={"approval_status": status}).is_approved

    @pytest.mark.parametrize("status", ["", "pending", "rejected", "approved!", "not approved"])
    def test_is_not_approved(self, sample_screening, status):
        assert not sample_screening.model_copy(update={"approval_status": status}).is_approved


class TestEnrollmentRecord:
    """Tests for the Enrollments row layout."""

    def test_payment_id_precedes_enrollment_id(self):
        record = EnrollmentRecord(
            recorded_at="ts",
            name="Asha",
            email="asha@example.com",
            phone="1",
            position="Dev",
            duration="3 months",
            payment_id="pay_1",
            resume_link="http://r/1",
            enrollment_id="AGP123456",
            owner_email="owner@example.com",
        )
        row = record.to_row()

        assert row[EnrollmentColumn.PAYMENT_ID] == row[6] == "pay_1"
        assert row[EnrollmentColumn.RESUME_LINK] == row[7] == "http://r/1"
        assert row[EnrollmentColumn.ENROLLMENT_ID] == row[8] == "AGP123456"
        assert EnrollmentRecord.from_row(row) == record


class TestActivityLogRecord:
    def test_to_row(self):
        assert ActivityLogRecord(logged_at="ts", name="A", email="a@x.com").to_row() == [
            "ts",
            "A",
            "a@x.com",
        ]


class TestHelpers:
    """Tests for timestamp and email helpers."""

    def test_utc_timestamp_format(self):
        moment = datetime(2025, 6, 1, 9, 30, 0, 123456, tzinfo=UTC)
        assert utc_timestamp(moment) == "2025-06-01T09:30:00.123Z"

    def test_utc_timestamp_converts_offsets(self):
        moment = datetime(2025, 6, 1, 15, 0, 0, tzinfo=timezone(timedelta(hours=5, minutes=30)))
        assert utc_timestamp(moment) == "2025-06-01T09:30:00.000Z"

    def test_utc_timestamp_now(self):
        assert utc_timestamp().endswith("Z")

    def test_emails_match_ignores_case(self):
        assert emails_match("A@X.com", "a@x.COM")

    def test_emails_match_does_not_trim(self):
        assert not emails_match("a@x.com ", "a@x.com")

    def test_owner_email_prefers_account(self):
        assert resolve_owner_email("owner@x.com", "a@x.com") == "owner@x.com"

    @pytest.mark.parametrize("user_email", [None, ""])
    def test_owner_email_falls_back(self, user_email):
        assert resolve_owner_email(user_email, "a@x.com") == "a@x.com"
