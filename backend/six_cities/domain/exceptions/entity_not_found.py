"""
EntityNotFoundError - Raised when a requested entity does not exist.
Maps to: HTTP 404 Not Found
"""

from typing import Optional

from six_cities.domain.exceptions.base import DomainError


class EntityNotFoundError(DomainError):
    """Exception raised when a requested entity is not found."""

    kind = "NOT_FOUND"

    def __init__(
        self,
        message: str = "The requested entity was not found.",
        resource: Optional[str] = None,
        resource_id: Optional[str] = None,
    ):
        details = {"resource": resource, "id": resource_id} if resource else None
        super().__init__(message, details)
        self.resource = resource
        self.resource_id = resource_id

    @classmethod
    def for_resource(cls, resource: str, resource_id: str) -> "EntityNotFoundError":
        return cls(
            f"{resource} with id {resource_id} not found.",
            resource=resource,
            resource_id=resource_id,
        )
