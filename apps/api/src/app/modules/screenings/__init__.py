"""
Screenings Module

Handles the first step of the internship workflow:
1. Screening submission with resume upload
2. Duplicate detection by candidate email (case-insensitive)
3. Enrollment ID issue and confirmation email
4. Lookup of an account's screenings

API Endpoints:
- POST /screening - Submit a screening application (multipart)
- GET /all-screenings/{email} - List screenings for an account
"""

from .router import router

__all__ = ["router"]
