"""
Prisma Comment Repository Implementation.
"""

from typing import Optional
from prisma import Prisma
from prisma.models import Comment as PrismaComment
from six_cities.domain.entities.comment import Comment
from six_cities.domain.ports.repositories import CommentRepository


class PrismaCommentRepository(CommentRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaComment) -> Comment:
        return Comment(
            id=record.id,
            offer_id=record.offer_id,
            user_id=record.user_id,
            text=record.text,
            rating=record.rating,
            created_at=record.created_at,
        )

    async def find_by_offer(
        self, offer_id: str, limit: Optional[int] = None
    ) -> list[Comment]:
        records = await self._prisma.comment.find_many(
            where={"offer_id": offer_id},
            order={"created_at": "desc"},
            take=limit,
        )
        return [self._to_entity(record) for record in records]

    async def save(self, comment: Comment) -> Comment:
        record = await self._prisma.comment.create(
            data={
                "id": comment.id,
                "offer_id": comment.offer_id,
                "user_id": comment.user_id,
                "text": comment.text,
                "rating": comment.rating,
                "created_at": comment.created_at,
            }
        )
        return self._to_entity(record)

    async def delete_by_offer(self, offer_id: str) -> int:
        return await self._prisma.comment.delete_many(where={"offer_id": offer_id})
