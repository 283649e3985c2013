"""
DomainError - Common base of every error the domain raises.

Each subclass carries a stable ``kind`` string; the presentation layer maps
kinds to HTTP status codes.
"""

from typing import Any


class DomainError(Exception):
    """Base exception for all domain errors"""

    kind = "DOMAIN_ERROR"

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.details = details
