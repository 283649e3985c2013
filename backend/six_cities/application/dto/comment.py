"""Comment DTOs for API request/response."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from six_cities.application.dto.base import CamelModel
from six_cities.application.dto.user import UserResponse
from six_cities.domain.entities.comment import Comment, MAX_RATING, MIN_RATING
from six_cities.domain.entities.user import User


class CreateCommentDto(CamelModel):
    text: str = Field(min_length=5, max_length=1024)
    rating: int = Field(ge=MIN_RATING, le=MAX_RATING)


class CommentResponse(CamelModel):
    id: str
    text: str
    rating: int
    post_date: datetime
    offer_id: str
    user_id: str
    owner: Optional[UserResponse] = None

    @classmethod
    def from_entity(
        cls, comment: Comment, owner: Optional[User] = None
    ) -> "CommentResponse":
        return cls(
            id=comment.id,
            text=comment.text,
            rating=comment.rating,
            post_date=comment.created_at,
            offer_id=comment.offer_id,
            user_id=comment.user_id,
            owner=UserResponse.from_entity(owner) if owner else None,
        )
