"""Login User Command - checks credentials and issues a bearer token."""

from dataclasses import dataclass

from six_cities.application.common.interfaces import Command, CommandHandler
from six_cities.domain.entities.user import User
from six_cities.domain.exceptions import UnauthorizedError
from six_cities.domain.ports.repositories import UserRepository
from six_cities.domain.ports.services import PasswordHasher, TokenIssuer


@dataclass
class LoginResult:
    user: User
    token: str


@dataclass(frozen=True)
class LoginUserCommand(Command[LoginResult]):
    email: str
    password: str


class LoginUserHandler(CommandHandler[LoginResult]):
    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_issuer: TokenIssuer,
    ):
        self._user_repository = user_repository
        self._password_hasher = password_hasher
        self._token_issuer = token_issuer

    async def execute(self, command: LoginUserCommand) -> LoginResult:
        user = await self._user_repository.get_by_email(command.email)
        # Unknown email and wrong password look the same to the caller
        if user is None or not self._password_hasher.verify(
            command.password, user.password_hash
        ):
            raise UnauthorizedError("Incorrect email or password")

        return LoginResult(user=user, token=self._token_issuer.issue(user))
