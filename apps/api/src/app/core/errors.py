"""
Service Error Base

Every service module raises subclasses of ServiceError. Routers translate
them into HTTP responses using the attached status code.
"""


class ServiceError(Exception):
    """Base exception for service-layer errors."""

    def __init__(self, message: str, error_code: str, status_code: int = 400):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        super().__init__(message)
