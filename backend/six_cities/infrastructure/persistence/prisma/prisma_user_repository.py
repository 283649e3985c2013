"""
Prisma User Repository Implementation.
"""

from typing import Optional
from prisma import Prisma
from prisma.errors import UniqueViolationError
from prisma.models import User as PrismaUser
from six_cities.domain.entities.user import User
from six_cities.domain.exceptions import ConflictError
from six_cities.domain.ports.repositories import UserRepository
from six_cities.domain.value_objects.user_type import UserType


class PrismaUserRepository(UserRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaUser) -> User:
        return User(
            id=record.id,
            email=record.email,
            password_hash=record.password_hash,
            type=UserType(record.type),
            created_at=record.created_at,
            name=record.name,
            avatar_path=record.avatar_path,
        )

    async def exists(self, document_id: str) -> bool:
        return await self._prisma.user.count(where={"id": document_id}) > 0

    async def get_by_id(self, document_id: str) -> Optional[User]:
        record = await self._prisma.user.find_unique(where={"id": document_id})
        return self._to_entity(record) if record else None

    async def get_by_email(self, email: str) -> Optional[User]:
        record = await self._prisma.user.find_unique(where={"email": email})
        return self._to_entity(record) if record else None

    async def find_by_ids(self, user_ids: list[str]) -> list[User]:
        if not user_ids:
            return []
        records = await self._prisma.user.find_many(
            where={"id": {"in": list(dict.fromkeys(user_ids))}}
        )
        return [self._to_entity(record) for record in records]

    async def save(self, user: User) -> User:
        try:
            record = await self._prisma.user.create(
                data={
                    "id": user.id,
                    "email": user.email,
                    "name": user.name,
                    "avatar_path": user.avatar_path,
                    "password_hash": user.password_hash,
                    "type": user.type.value,
                    "created_at": user.created_at,
                }
            )
        except UniqueViolationError as e:
            raise ConflictError(f"User with email {user.email} exists.") from e
        return self._to_entity(record)
