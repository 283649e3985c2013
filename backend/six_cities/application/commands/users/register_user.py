"""Register User Command."""

import logging
from dataclasses import dataclass

from six_cities.application.common.interfaces import Command, CommandHandler
from six_cities.application.dto.user import CreateUserDto
from six_cities.domain.entities.user import User
from six_cities.domain.exceptions import ConflictError
from six_cities.domain.ports.repositories import UserRepository
from six_cities.domain.ports.services import PasswordHasher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegisterUserCommand(Command[User]):
    dto: CreateUserDto


class RegisterUserHandler(CommandHandler[User]):
    def __init__(self, user_repository: UserRepository, password_hasher: PasswordHasher):
        self._user_repository = user_repository
        self._password_hasher = password_hasher

    async def execute(self, command: RegisterUserCommand) -> User:
        dto = command.dto
        if await self._user_repository.get_by_email(dto.email):
            raise ConflictError(
                f"User with email {dto.email} exists.", details={"field": "email"}
            )

        user = User.create(
            email=dto.email,
            password_hash=self._password_hasher.hash(dto.password),
            type=dto.type,
            name=dto.name,
            avatar_path=dto.avatar_path,
        )
        saved = await self._user_repository.save(user)
        logger.info(f"New user created: {saved.email}")
        return saved
