"""
Approvals Router

Endpoints:
- GET /get-student/{enrollment_id} - Approved candidate details for payment
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.core.tabular import TabularStore, get_tabular_store
from app.modules.approvals import service
from app.modules.approvals.schemas import ApprovedCandidateResponse
from app.modules.approvals.service import CandidateNotApprovedError, CandidateNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/get-student/{enrollment_id}",
    response_model=ApprovedCandidateResponse,
    summary="Get Approved Candidate",
    responses={
        403: {
            "description": "Screening exists but is not approved",
            "content": {"application/json": {"example": {"status": "not_approved"}}},
        },
        404: {
            "description": "Unknown enrollment ID",
            "content": {"application/json": {"example": {"status": "not_found"}}},
        },
    },
)
async def get_student(
    enrollment_id: str,
    store: TabularStore = Depends(get_tabular_store),
) -> ApprovedCandidateResponse | JSONResponse:
    """
    Get candidate details for the payment page.

    Args:
        enrollment_id: Enrollment ID (exact match)
        store: Tabular store (injected)
    """
    try:
        snapshot = await service.get_approved_candidate(store, enrollment_id)
        return ApprovedCandidateResponse(data=snapshot)
    except CandidateNotFoundError:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"status": "not_found"})
    except CandidateNotApprovedError:
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN, content={"status": "not_approved"}
        )
    except Exception as e:
        logger.exception(f"Error in /get-student: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"status": "error", "message": str(e)},
        )
