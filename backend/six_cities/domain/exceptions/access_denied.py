"""
AccessDeniedError - Raised when user lacks permission to access a resource.
Maps to: HTTP 403 Forbidden
"""

from six_cities.domain.exceptions.base import DomainError


class AccessDeniedError(DomainError):
    """Raised when user lacks permission to access a resource"""

    kind = "FORBIDDEN"

    def __init__(self, message: str = "Access denied", details=None):
        super().__init__(message, details)
