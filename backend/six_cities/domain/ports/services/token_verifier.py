"""
Token ports - verify a bearer credential, issue one for a user.
"""

from abc import ABC, abstractmethod

from six_cities.domain.entities.user import User
from six_cities.domain.value_objects.identity import Identity


class TokenVerifier(ABC):
    @abstractmethod
    def verify(self, credential: str) -> Identity:
        """Raises InvalidCredentialError when the credential is not acceptable."""
        ...


class TokenIssuer(ABC):
    @abstractmethod
    def issue(self, user: User) -> str: ...
