"""
InternalError - A collaborator failed in a way not attributable to the caller.
Maps to: HTTP 500 Internal Server Error
"""

from six_cities.domain.exceptions.base import DomainError


class InternalError(DomainError):
    kind = "INTERNAL_ERROR"

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
