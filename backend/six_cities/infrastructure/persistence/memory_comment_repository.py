"""
In-memory Comment Repository Implementation.
"""

import copy
from typing import Optional

from six_cities.domain.entities.comment import Comment
from six_cities.domain.ports.repositories import CommentRepository
from six_cities.infrastructure.persistence.memory_store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    async def find_by_offer(
        self, offer_id: str, limit: Optional[int] = None
    ) -> list[Comment]:
        comments = [c for c in self._store.comments.values() if c.offer_id == offer_id]
        comments.sort(key=lambda comment: comment.created_at, reverse=True)
        if limit is not None:
            comments = comments[:limit]
        return [copy.deepcopy(comment) for comment in comments]

    async def save(self, comment: Comment) -> Comment:
        self._store.comments[comment.id] = copy.deepcopy(comment)
        return copy.deepcopy(comment)

    async def delete_by_offer(self, offer_id: str) -> int:
        doomed = [cid for cid, c in self._store.comments.items() if c.offer_id == offer_id]
        for comment_id in doomed:
            del self._store.comments[comment_id]
        return len(doomed)
