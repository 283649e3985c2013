"""
UnauthorizedError - Raised when the caller is not authenticated.
Maps to: HTTP 401 Unauthorized

InvalidCredentialError is what a token verifier raises; the reason (missing,
malformed, expired, bad signature) stays in the message for logs only.
"""

from six_cities.domain.exceptions.base import DomainError


class UnauthorizedError(DomainError):
    kind = "UNAUTHORIZED"

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class InvalidCredentialError(UnauthorizedError):
    pass
