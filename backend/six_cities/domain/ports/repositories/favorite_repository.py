"""
Favorite Repository Port - Interface for user/offer favorite relations.
"""

from abc import ABC, abstractmethod

from six_cities.domain.entities.favorite import Favorite


class FavoriteRepository(ABC):
    @abstractmethod
    async def get_by_user(self, user_id: str) -> list[Favorite]: ...

    @abstractmethod
    async def exists(self, user_id: str, offer_id: str) -> bool: ...

    @abstractmethod
    async def add(self, favorite: Favorite) -> bool:
        """Returns False when the relation already existed."""
        ...

    @abstractmethod
    async def remove(self, user_id: str, offer_id: str) -> bool:
        """Returns False when there was nothing to remove."""
        ...
