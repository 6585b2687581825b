"""
Core module - Configuration, collaborator clients, security, and utilities.
"""

from app.core.config import get_settings, settings
from app.core.errors import ServiceError
from app.core.security import sign_payment, verify_payment_signature

__all__ = [
    # Config
    "settings",
    "get_settings",
    # Errors
    "ServiceError",
    # Security
    "sign_payment",
    "verify_payment_signature",
]
