"""
Approvals Module

Read-only approval gate over screening rows. Approval itself happens
out-of-band (staff edit the approval status column).

API Endpoints:
- GET /get-student/{enrollment_id} - Approved candidate details
"""

from .router import router

__all__ = ["router"]
