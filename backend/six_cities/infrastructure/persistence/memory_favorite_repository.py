"""
In-memory Favorite Repository Implementation.

Relations are keyed by (user_id, offer_id), so a pair can only be stored once.
"""

from six_cities.domain.entities.favorite import Favorite
from six_cities.domain.ports.repositories import FavoriteRepository
from six_cities.infrastructure.persistence.memory_store import InMemoryStore


class InMemoryFavoriteRepository(FavoriteRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    async def get_by_user(self, user_id: str) -> list[Favorite]:
        return [f for f in self._store.favorites.values() if f.user_id == user_id]

    async def exists(self, user_id: str, offer_id: str) -> bool:
        return (user_id, offer_id) in self._store.favorites

    async def add(self, favorite: Favorite) -> bool:
        if favorite.key in self._store.favorites:
            return False
        self._store.favorites[favorite.key] = favorite
        return True

    async def remove(self, user_id: str, offer_id: str) -> bool:
        return self._store.favorites.pop((user_id, offer_id), None) is not None
