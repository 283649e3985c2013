"""
Comment Repository Port - Interface for comment persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional

from six_cities.domain.entities.comment import Comment


class CommentRepository(ABC):
    @abstractmethod
    async def find_by_offer(
        self, offer_id: str, limit: Optional[int] = None
    ) -> list[Comment]:
        """Newest first; all comments when limit is None."""
        ...

    @abstractmethod
    async def save(self, comment: Comment) -> Comment: ...

    @abstractmethod
    async def delete_by_offer(self, offer_id: str) -> int: ...
