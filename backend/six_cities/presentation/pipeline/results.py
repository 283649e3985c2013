"""
Guard results and pipeline responses.

A guard answers CONTINUE or a Halt carrying the status and payload of the
response to send instead of running the rest of the route. Domain errors
map to statuses here, in one place.
"""

from dataclasses import dataclass
from typing import Any, Optional, Union

from fastapi import status

from six_cities.domain.exceptions import (
    AccessDeniedError,
    ConflictError,
    DomainError,
    DomainValidationError,
    EntityNotFoundError,
    InternalError,
    UnauthorizedError,
)

INTERNAL_ERROR_MESSAGE = "Internal server error"

ERROR_STATUS: dict[type[DomainError], int] = {
    DomainValidationError: status.HTTP_400_BAD_REQUEST,
    UnauthorizedError: status.HTTP_401_UNAUTHORIZED,
    AccessDeniedError: status.HTTP_403_FORBIDDEN,
    EntityNotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    InternalError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(error: DomainError) -> int:
    for error_type in type(error).__mro__:
        if error_type in ERROR_STATUS:
            return ERROR_STATUS[error_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def internal_error_payload() -> dict:
    return {"error": INTERNAL_ERROR_MESSAGE, "kind": InternalError.kind}


def error_payload(error: DomainError) -> dict:
    if status_for(error) >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        return internal_error_payload()

    payload: dict[str, Any] = {"error": error.message, "kind": error.kind}
    if error.details is not None:
        payload["details"] = error.details
    return payload


@dataclass(frozen=True)
class PipelineResponse:
    status_code: int
    body: Optional[Any] = None

    @classmethod
    def from_error(cls, error: DomainError) -> "PipelineResponse":
        return cls(status_for(error), error_payload(error))

    @classmethod
    def internal_error(cls) -> "PipelineResponse":
        return cls(status.HTTP_500_INTERNAL_SERVER_ERROR, internal_error_payload())


@dataclass(frozen=True)
class Continue:
    pass


CONTINUE = Continue()


@dataclass(frozen=True)
class Halt:
    status_code: int
    payload: dict

    @classmethod
    def from_error(cls, error: DomainError) -> "Halt":
        return cls(status_for(error), error_payload(error))

    def to_response(self) -> PipelineResponse:
        return PipelineResponse(self.status_code, self.payload)


GuardResult = Union[Continue, Halt]
