"""
Activity Log Router

Endpoints:
- POST /log - Record a portal visit
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.core.tabular import TabularStore, get_tabular_store
from app.modules.activity_log import service

logger = logging.getLogger(__name__)

router = APIRouter()


class ActivityLogRequest(BaseModel):
    """Request body for POST /log. Both fields are optional."""

    name: str | None = None
    email: str | None = None


@router.post("/log", summary="Record Portal Visit")
async def log_activity(
    data: ActivityLogRequest,
    store: TabularStore = Depends(get_tabular_store),
) -> JSONResponse:
    """Append a visit entry, or skip when name or email is missing."""
    try:
        written = await service.log_activity(store, data.name, data.email)
    except Exception as e:
        logger.exception(f"Error in /log: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to log"},
        )

    if not written:
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content={"status": "skipped", "message": "Missing name or email"},
        )
    return JSONResponse(status_code=status.HTTP_200_OK, content={"status": "success"})
