"""
Comment Entity - A rated review of an offer.
"""

from dataclasses import dataclass
from datetime import datetime, timezone

from six_cities.domain.value_objects.entity_id import new_entity_id

MIN_RATING = 1
MAX_RATING = 5


@dataclass
class Comment:
    id: str
    offer_id: str
    user_id: str
    text: str
    rating: int
    created_at: datetime

    def __post_init__(self):
        if not MIN_RATING <= self.rating <= MAX_RATING:
            raise ValueError(
                f"Invalid rating: {self.rating}. Must be between {MIN_RATING} and {MAX_RATING}."
            )

    @classmethod
    def create(cls, offer_id: str, user_id: str, text: str, rating: int) -> "Comment":
        return cls(
            id=new_entity_id(),
            offer_id=offer_id,
            user_id=user_id,
            text=text,
            rating=rating,
            created_at=datetime.now(timezone.utc),
        )
