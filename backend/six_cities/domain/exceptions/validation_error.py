"""
DomainValidationError - Raised when input does not satisfy a schema or rule.
Maps to: HTTP 400 Bad Request
"""

from dataclasses import dataclass, asdict
from typing import Optional

from six_cities.domain.exceptions.base import DomainError


@dataclass(frozen=True)
class FieldViolation:
    field: str
    message: str

    def to_dict(self) -> dict:
        return asdict(self)


class DomainValidationError(DomainError):
    """Exception raised for domain validation errors."""

    kind = "VALIDATION_ERROR"

    def __init__(
        self, message: str, violations: Optional[list[FieldViolation]] = None
    ):
        self.violations = list(violations or [])
        super().__init__(message, [v.to_dict() for v in self.violations])
