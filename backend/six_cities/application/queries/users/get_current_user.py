"""
GetCurrentUser Query - the user behind a verified token.

A token can outlive its user, so a missing user is reported as
unauthorized rather than not found.
"""

from dataclasses import dataclass

from six_cities.application.common.interfaces import Query, QueryHandler
from six_cities.domain.entities.user import User
from six_cities.domain.exceptions import UnauthorizedError
from six_cities.domain.ports.repositories import UserRepository


@dataclass(frozen=True)
class GetCurrentUserQuery(Query[User]):
    user_id: str


class GetCurrentUserHandler(QueryHandler[User]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, query: GetCurrentUserQuery) -> User:
        user = await self._user_repository.get_by_id(query.user_id)
        if user is None:
            raise UnauthorizedError()
        return user
