from six_cities.application.dto.offer import (
    CoordinatesDTO,
    CreateOfferDto,
    OfferResponse,
    UpdateOfferDto,
)
from six_cities.application.dto.comment import CommentResponse, CreateCommentDto
from six_cities.application.dto.user import (
    CreateUserDto,
    LoggedUserResponse,
    LoginDto,
    UserResponse,
)

__all__ = [
    "CoordinatesDTO",
    "CreateOfferDto",
    "OfferResponse",
    "UpdateOfferDto",
    "CommentResponse",
    "CreateCommentDto",
    "CreateUserDto",
    "LoggedUserResponse",
    "LoginDto",
    "UserResponse",
]
