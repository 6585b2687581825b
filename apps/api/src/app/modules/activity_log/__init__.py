"""
Activity Log Module

API Endpoints:
- POST /log - Record a portal visit
"""

from .router import router

__all__ = ["router"]
