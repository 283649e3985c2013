"""
Owner Lookup Service - resolves the users behind offers and comments.

A response list is resolved with one bulk user query, never one query per
item. Ids whose user no longer exists are left out of the mapping.
"""

import logging

from six_cities.domain.entities.user import User
from six_cities.domain.ports.repositories import UserRepository

logger = logging.getLogger(__name__)


class OwnerLookupService:
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def by_ids(self, user_ids: list[str]) -> dict[str, User]:
        if not user_ids:
            return {}
        users = await self._user_repository.find_by_ids(user_ids)
        found = {user.id: user for user in users}
        missing = set(user_ids) - found.keys()
        if missing:
            logger.warning(f"{len(missing)} owner(s) not found among {len(user_ids)} ids")
        return found
