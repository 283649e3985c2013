"""User DTOs for API request/response."""

from pydantic import Field

from six_cities.application.dto.base import CamelModel
from six_cities.domain.entities.user import User
from six_cities.domain.value_objects.user_type import UserType

EMAIL_PATTERN = r"^[\w.+-]+@([\w-]+\.)+[\w-]{2,}$"


class CreateUserDto(CamelModel):
    email: str = Field(pattern=EMAIL_PATTERN)
    name: str = Field(min_length=1, max_length=15)
    password: str = Field(min_length=6, max_length=12)
    type: UserType = UserType.REGULAR
    avatar_path: str = ""


class LoginDto(CamelModel):
    email: str = Field(pattern=EMAIL_PATTERN)
    password: str = Field(min_length=6, max_length=12)


class UserResponse(CamelModel):
    id: str
    email: str
    name: str
    avatar_path: str
    type: UserType

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            avatar_path=user.avatar_path,
            type=user.type,
        )


class LoggedUserResponse(CamelModel):
    email: str
    token: str
