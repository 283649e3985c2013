"""List Comments Query - newest comments of an offer."""

from dataclasses import dataclass

from six_cities.application.common.interfaces import Query, QueryHandler
from six_cities.domain.entities.comment import Comment
from six_cities.domain.ports.repositories import CommentRepository


@dataclass(frozen=True)
class ListCommentsQuery(Query[list[Comment]]):
    offer_id: str
    limit: int


class ListCommentsHandler(QueryHandler[list[Comment]]):
    def __init__(self, comment_repository: CommentRepository):
        self._comment_repository = comment_repository

    async def execute(self, query: ListCommentsQuery) -> list[Comment]:
        return await self._comment_repository.find_by_offer(
            query.offer_id, limit=query.limit
        )
