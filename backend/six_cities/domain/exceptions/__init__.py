"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain and application logic and caught by
the pipeline executor, which maps them to HTTP status codes.
"""

from six_cities.domain.exceptions.base import DomainError
from six_cities.domain.exceptions.entity_not_found import EntityNotFoundError
from six_cities.domain.exceptions.access_denied import AccessDeniedError
from six_cities.domain.exceptions.validation_error import (
    DomainValidationError,
    FieldViolation,
)
from six_cities.domain.exceptions.unauthorized import (
    UnauthorizedError,
    InvalidCredentialError,
)
from six_cities.domain.exceptions.conflict import ConflictError
from six_cities.domain.exceptions.internal import InternalError

__all__ = [
    "DomainError",
    "EntityNotFoundError",
    "AccessDeniedError",
    "DomainValidationError",
    "FieldViolation",
    "UnauthorizedError",
    "InvalidCredentialError",
    "ConflictError",
    "InternalError",
]
