"""
Enrollments Module

Handles payment of the program fee:
1. Gateway order creation
2. Payment signature verification (HMAC-SHA256)
3. Enrollment recording with the resume link from the screening
4. Lookup of an account's enrollments

API Endpoints:
- POST /create-order - Create a payment order
- POST /verify - Verify payment and record enrollment
- GET /check-enrollment/{email} - List enrollments for an account
"""

from .router import router

__all__ = ["router"]
