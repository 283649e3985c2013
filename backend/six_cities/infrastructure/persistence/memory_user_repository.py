"""
In-memory User Repository Implementation.
"""

import copy
from typing import Optional

from six_cities.domain.entities.user import User
from six_cities.domain.exceptions import ConflictError
from six_cities.domain.ports.repositories import UserRepository
from six_cities.infrastructure.persistence.memory_store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    async def exists(self, document_id: str) -> bool:
        return document_id in self._store.users

    async def get_by_id(self, document_id: str) -> Optional[User]:
        user = self._store.users.get(document_id)
        return copy.deepcopy(user) if user else None

    async def get_by_email(self, email: str) -> Optional[User]:
        for user in self._store.users.values():
            if user.email == email:
                return copy.deepcopy(user)
        return None

    async def find_by_ids(self, user_ids: list[str]) -> list[User]:
        return [
            copy.deepcopy(self._store.users[user_id])
            for user_id in dict.fromkeys(user_ids)
            if user_id in self._store.users
        ]

    async def save(self, user: User) -> User:
        for existing in self._store.users.values():
            if existing.email == user.email and existing.id != user.id:
                raise ConflictError(f"User with email {user.email} exists.")
        self._store.users[user.id] = copy.deepcopy(user)
        return copy.deepcopy(user)
