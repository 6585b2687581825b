from fastapi import APIRouter

from app.modules.activity_log import router as activity_log_router
from app.modules.approvals import router as approvals_router
from app.modules.enrollments import router as enrollments_router
from app.modules.screenings import router as screenings_router

api_router = APIRouter()

# Paths are served at the root, where the existing frontend calls them
api_router.include_router(screenings_router, tags=["Screenings"])

api_router.include_router(approvals_router, tags=["Approvals"])

api_router.include_router(enrollments_router, tags=["Enrollments"])

api_router.include_router(activity_log_router, tags=["Activity Log"])
