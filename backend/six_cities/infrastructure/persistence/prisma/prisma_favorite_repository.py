"""
Prisma Favorite Repository Implementation.

The composite primary key on (user_id, offer_id) makes the database the
arbiter of uniqueness; a losing concurrent insert means the relation exists.
"""

from prisma import Prisma
from prisma.errors import UniqueViolationError
from six_cities.domain.entities.favorite import Favorite
from six_cities.domain.ports.repositories import FavoriteRepository


class PrismaFavoriteRepository(FavoriteRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    async def get_by_user(self, user_id: str) -> list[Favorite]:
        records = await self._prisma.favorite.find_many(where={"user_id": user_id})
        return [
            Favorite(
                user_id=record.user_id,
                offer_id=record.offer_id,
                created_at=record.created_at,
            )
            for record in records
        ]

    async def exists(self, user_id: str, offer_id: str) -> bool:
        count = await self._prisma.favorite.count(
            where={"user_id": user_id, "offer_id": offer_id}
        )
        return count > 0

    async def add(self, favorite: Favorite) -> bool:
        if await self.exists(favorite.user_id, favorite.offer_id):
            return False
        try:
            await self._prisma.favorite.create(
                data={
                    "user_id": favorite.user_id,
                    "offer_id": favorite.offer_id,
                    "created_at": favorite.created_at,
                }
            )
        except UniqueViolationError:
            return False
        return True

    async def remove(self, user_id: str, offer_id: str) -> bool:
        deleted = await self._prisma.favorite.delete_many(
            where={"user_id": user_id, "offer_id": offer_id}
        )
        return deleted > 0
