"""
Offer Entity - A rental listing.

``rating`` and ``comments_count`` are cached aggregates of the offer's
comments; ``is_favorite`` is stamped per caller at read time and is never
stored.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from six_cities.domain.value_objects.entity_id import new_entity_id
from six_cities.domain.value_objects.offer_types import (
    Amenity,
    City,
    Coordinates,
    HousingType,
)


@dataclass
class Offer:
    id: str
    title: str
    description: str
    city: City
    preview_path: str
    image_paths: list[str]
    is_premium: bool
    type: HousingType
    rooms: int
    guests: int
    price: int
    amenities: list[Amenity]
    owner_id: str
    coordinates: Coordinates
    created_at: datetime
    rating: float = 0.0
    comments_count: int = 0
    is_favorite: bool = field(default=False, compare=False)

    @classmethod
    def create(cls, owner_id: str, **fields) -> "Offer":
        now = datetime.now(timezone.utc)
        return cls(
            id=new_entity_id(),
            owner_id=owner_id,
            created_at=now,
            rating=0.0,
            comments_count=0,
            **fields,
        )
