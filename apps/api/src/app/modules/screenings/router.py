"""
Screenings Router

Endpoints:
- POST /screening - Submit a screening application (multipart, with resume)
- GET /all-screenings/{email} - List screenings submitted from an account

Response bodies carry a "status" key the frontend switches on:
success / duplicate / found / not_found / error.
"""

import logging

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.core.blobs import BlobStore, get_blob_store
from app.core.config import settings
from app.core.rate_limit import rate_limit
from app.core.tabular import TabularStore, get_tabular_store
from app.modules.screenings import service
from app.modules.screenings.schemas import (
    ResumeUpload,
    ScreeningCreate,
    ScreeningListItem,
    ScreeningListResponse,
    ScreeningSubmitResponse,
)
from app.modules.screenings.service import (
    DuplicateScreeningError,
    ScreeningServiceError,
    ScreeningsNotFoundError,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"status": "error", "message": message})


@router.post(
    "/screening",
    response_model=ScreeningSubmitResponse,
    summary="Submit Screening Application",
    description="""
Submit a screening application with a resume file.

**Outcomes:**
- `success`: screening stored and enrollment ID issued. `notification` is `sent`,
  or `failed` when the confirmation email could not be delivered
- `duplicate`: a screening already exists for this email (case-insensitive)

A missing resume is rejected with 400.
""",
    responses={
        200: {"description": "Screening accepted or duplicate detected"},
        400: {
            "description": "Resume missing or invalid form",
            "content": {
                "application/json": {"example": {"status": "error", "message": "Resume missing"}}
            },
        },
        429: {"description": "Too many submissions from this client"},
        500: {"description": "Storage, upload or mail failure"},
    },
)
@rate_limit(
    limit=lambda: settings.screening_rate_limit,
    window_seconds=lambda: settings.screening_rate_limit_window_seconds,
)
async def submit_screening(
    request: Request,
    name: str = Form(...),
    email: str = Form(...),
    phone: str = Form(""),
    position: str = Form(""),
    duration: str = Form(""),
    user_email: str | None = Form(None, alias="userEmail"),
    resume: UploadFile | None = File(None),
    store: TabularStore = Depends(get_tabular_store),
    blobs: BlobStore = Depends(get_blob_store),
) -> ScreeningSubmitResponse | JSONResponse:
    """
    Submit a screening application.

    Args:
        request: Incoming request (used for rate limiting)
        name, email, phone, position, duration, user_email: Form fields
        resume: Resume file
        store: Tabular store (injected)
        blobs: Blob store (injected)

    Returns:
        Enrollment ID on success, or a status-only body for duplicates
    """
    try:
        data = ScreeningCreate(
            name=name,
            email=email,
            phone=phone,
            position=position,
            duration=duration,
            user_email=user_email,
        )
        upload = None
        if resume is not None:
            upload = ResumeUpload(
                filename=resume.filename or "",
                content_type=resume.content_type or "application/pdf",
                content=await resume.read(),
            )

        result = await service.submit_screening(store, blobs, data, upload)

        logger.info(f"Screening submitted successfully: enrollment_id={result.enrollment_id}")

        return ScreeningSubmitResponse(
            enrollment_id=result.enrollment_id,
            notification="sent" if result.notification_sent else "failed",
        )

    except ValidationError as e:
        logger.warning(f"Invalid screening form: {e.error_count()} error(s)")
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid screening form")
    except DuplicateScreeningError:
        return JSONResponse(status_code=status.HTTP_200_OK, content={"status": "duplicate"})
    except ScreeningServiceError as e:
        logger.warning(f"Screening rejected: {e.message}")
        return _error(e.status_code, e.message)
    except Exception as e:
        logger.exception(f"Error in /screening: {e}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))


@router.get(
    "/all-screenings/{email}",
    response_model=ScreeningListResponse,
    summary="List Screenings For Account",
    responses={
        404: {
            "description": "No screenings for this account",
            "content": {"application/json": {"example": {"status": "not_found"}}},
        },
    },
)
async def list_screenings(
    email: str,
    store: TabularStore = Depends(get_tabular_store),
) -> ScreeningListResponse | JSONResponse:
    """
    List screenings whose owner email matches (case-insensitive).

    Args:
        email: Owner email (URL-decoded path parameter)
        store: Tabular store (injected)
    """
    try:
        records = await service.list_screenings_by_owner(store, email)
        return ScreeningListResponse(data=[ScreeningListItem.from_record(r) for r in records])
    except ScreeningsNotFoundError:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"status": "not_found"})
    except Exception as e:
        logger.exception(f"Error in /all-screenings: {e}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))
