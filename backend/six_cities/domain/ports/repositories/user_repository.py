"""
User Repository Port - Interface for user persistence.
"""

from abc import abstractmethod
from typing import Optional

from six_cities.domain.entities.user import User
from six_cities.domain.ports.repositories.document_repository import (
    DocumentRepository,
)


class UserRepository(DocumentRepository):
    @abstractmethod
    async def get_by_id(self, document_id: str) -> Optional[User]: ...

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]: ...

    @abstractmethod
    async def find_by_ids(self, user_ids: list[str]) -> list[User]:
        """Unknown ids are skipped."""
        ...

    @abstractmethod
    async def save(self, user: User) -> User: ...
