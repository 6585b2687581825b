"""
Unit tests for screenings service layer.

These tests cover:
- Enrollment ID generation
- Screening submission (resume check, duplicate check, upload, append, email)
- Owner lookup
"""

from unittest.mock import AsyncMock, patch

import pytest

from app.core.config import settings
from app.core.tabular import MemoryTabularStore
from app.modules.screenings.schemas import ResumeUpload, ScreeningCreate
from app.modules.screenings.service import (
    DuplicateScreeningError,
    ResumeMissingError,
    ScreeningsNotFoundError,
    generate_enrollment_id,
    list_screenings_by_owner,
    submit_screening,
)

EMAIL_TARGET = "app.modules.screenings.service.send_screening_received"


@pytest.fixture
def screening_form():
    return ScreeningCreate(
        name="Ravi Kumar",
        email="ravi@example.com",
        phone="9000000000",
        position="Data Analyst",
        duration="6 months",
        user_email="ravi.account@example.com",
    )


@pytest.fixture
def resume():
    return ResumeUpload(filename="cv.pdf", content_type="application/pdf", content=b"%PDF-1.4")


class TestGenerateEnrollmentId:
    """Tests for generate_enrollment_id."""

    def test_uses_last_six_digits(self):
        assert generate_enrollment_id(1718000123456) == "AGP123456"

    def test_keeps_leading_zeros(self):
        assert generate_enrollment_id(1718000000042) == "AGP000042"

    def test_defaults_to_now(self):
        enrollment_id = generate_enrollment_id()
        assert enrollment_id.startswith("AGP")
        assert len(enrollment_id) == 9
        assert enrollment_id[3:].isdigit()


class TestSubmitScreening:
    """Tests for submit_screening."""

    @pytest.mark.asyncio
    async def test_success(self, memory_store, memory_blobs, screening_form, resume):
        """Stores the row, uploads the resume and sends the email."""
        with patch(EMAIL_TARGET, new_callable=AsyncMock, return_value=True) as mock_email:
            with patch(
                "app.modules.screenings.service.now_millis", return_value=1718000123456
            ):
                result = await submit_screening(memory_store, memory_blobs, screening_form, resume)

        assert result.enrollment_id == "AGP123456"
        assert result.notification_sent is True

        name, content, content_type = memory_blobs.files["blob1"]
        assert name == "Ravi Kumar_resume_1718000123456.pdf"
        assert content == b"%PDF-1.4"
        assert content_type == "application/pdf"

        rows = await memory_store.scan(settings.screenings_table)
        assert len(rows) == 1
        row = rows[0]
        assert row[1:6] == ["Ravi Kumar", "ravi@example.com", "9000000000", "Data Analyst", "6 months"]
        assert row[6] == "AGP123456"
        assert row[7] == result.resume_link
        assert row[8] == ""
        assert row[9] == "ravi.account@example.com"

        mock_email.assert_called_once_with(
            to_email="ravi@example.com",
            candidate_name="Ravi Kumar",
            position="Data Analyst",
            enrollment_id="AGP123456",
            resume_link=result.resume_link,
        )

    @pytest.mark.asyncio
    async def test_owner_defaults_to_candidate_email(
        self, memory_store, memory_blobs, screening_form, resume
    ):
        form = screening_form.model_copy(update={"user_email": None})
        with patch(EMAIL_TARGET, new_callable=AsyncMock, return_value=True):
            await submit_screening(memory_store, memory_blobs, form, resume)

        rows = await memory_store.scan(settings.screenings_table)
        assert rows[0][9] == "ravi@example.com"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("upload", [None, ResumeUpload(content=b"")])
    async def test_missing_resume(self, memory_store, memory_blobs, screening_form, upload):
        """No upload, no row and no email without a resume."""
        with patch(EMAIL_TARGET, new_callable=AsyncMock) as mock_email:
            with pytest.raises(ResumeMissingError) as exc_info:
                await submit_screening(memory_store, memory_blobs, screening_form, upload)

        assert exc_info.value.message == "Resume missing"
        assert exc_info.value.status_code == 400
        assert memory_blobs.files == {}
        assert await memory_store.scan(settings.screenings_table) == []
        mock_email.assert_not_called()

    @pytest.mark.asyncio
    async def test_duplicate_is_case_insensitive(
        self, memory_store, memory_blobs, screening_form, resume
    ):
        """A second submission for A@x.com then a@x.com is a duplicate."""
        first = screening_form.model_copy(update={"email": "A@x.com"})
        second = screening_form.model_copy(update={"email": "a@x.com"})

        with patch(EMAIL_TARGET, new_callable=AsyncMock, return_value=True) as mock_email:
            await submit_screening(memory_store, memory_blobs, first, resume)
            with pytest.raises(DuplicateScreeningError):
                await submit_screening(memory_store, memory_blobs, second, resume)

        assert len(await memory_store.scan(settings.screenings_table)) == 1
        assert len(memory_blobs.files) == 1
        mock_email.assert_called_once()

    @pytest.mark.asyncio
    async def test_email_failure_still_succeeds(
        self, memory_store, memory_blobs, screening_form, resume
    ):
        """A failed send is reported on the result, the row stays."""
        with patch(EMAIL_TARGET, new_callable=AsyncMock, return_value=False):
            result = await submit_screening(memory_store, memory_blobs, screening_form, resume)

        assert result.notification_sent is False
        assert len(await memory_store.scan(settings.screenings_table)) == 1

    @pytest.mark.asyncio
    async def test_email_exception_still_succeeds(
        self, memory_store, memory_blobs, screening_form, resume
    ):
        with patch(EMAIL_TARGET, new_callable=AsyncMock, side_effect=Exception("smtp down")):
            result = await submit_screening(memory_store, memory_blobs, screening_form, resume)

        assert result.notification_sent is False
        assert result.enrollment_id.startswith("AGP")

    @pytest.mark.asyncio
    async def test_append_failure_propagates(self, memory_blobs, screening_form, resume):
        """The upload has happened; the error reaches the caller and no email is sent."""
        store = AsyncMock()
        store.scan = AsyncMock(return_value=[])
        store.append = AsyncMock(side_effect=RuntimeError("sheet unavailable"))

        with patch(EMAIL_TARGET, new_callable=AsyncMock) as mock_email:
            with pytest.raises(RuntimeError):
                await submit_screening(store, memory_blobs, screening_form, resume)

        assert len(memory_blobs.files) == 1
        mock_email.assert_not_called()

    @pytest.mark.asyncio
    async def test_upload_failure_propagates(self, memory_store, screening_form, resume):
        blobs = AsyncMock()
        blobs.upload_public = AsyncMock(side_effect=RuntimeError("drive unavailable"))

        with pytest.raises(RuntimeError):
            await submit_screening(memory_store, blobs, screening_form, resume)

        assert await memory_store.scan(settings.screenings_table) == []


class TestListScreeningsByOwner:
    """Tests for list_screenings_by_owner."""

    @pytest.mark.asyncio
    async def test_found(self, seeded_store, sample_screening):
        records = await list_screenings_by_owner(seeded_store, "ASHA.ACCOUNT@example.com")
        assert records == [sample_screening]

    @pytest.mark.asyncio
    async def test_candidate_email_is_not_the_owner(self, seeded_store):
        with pytest.raises(ScreeningsNotFoundError):
            await list_screenings_by_owner(seeded_store, "asha@example.com")

    @pytest.mark.asyncio
    async def test_empty_store(self):
        with pytest.raises(ScreeningsNotFoundError):
            await list_screenings_by_owner(MemoryTabularStore(), "a@x.com")
