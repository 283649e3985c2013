"""
ConflictError - Raised when a write collides with existing state.
Maps to: HTTP 409 Conflict
"""

from six_cities.domain.exceptions.base import DomainError


class ConflictError(DomainError):
    kind = "CONFLICT"
