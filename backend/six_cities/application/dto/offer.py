"""Offer DTOs for API request/response."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from six_cities.application.dto.base import CamelModel
from six_cities.application.dto.user import UserResponse
from six_cities.domain.entities.offer import Offer
from six_cities.domain.entities.user import User
from six_cities.domain.value_objects.offer_types import Amenity, City, HousingType

IMAGE_COUNT = 6


class CoordinatesDTO(CamelModel):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class CreateOfferDto(CamelModel):
    title: str = Field(min_length=10, max_length=100)
    description: str = Field(min_length=20, max_length=1024)
    city: City
    preview_path: str = Field(min_length=1)
    image_paths: list[str] = Field(min_length=IMAGE_COUNT, max_length=IMAGE_COUNT)
    is_premium: bool
    type: HousingType
    rooms: int = Field(ge=1, le=8)
    guests: int = Field(ge=1, le=10)
    price: int = Field(ge=100, le=100_000)
    amenities: list[Amenity] = Field(min_length=1)
    coordinates: CoordinatesDTO


class UpdateOfferDto(CamelModel):
    title: Optional[str] = Field(default=None, min_length=10, max_length=100)
    description: Optional[str] = Field(default=None, min_length=20, max_length=1024)
    city: Optional[City] = None
    preview_path: Optional[str] = Field(default=None, min_length=1)
    image_paths: Optional[list[str]] = Field(
        default=None, min_length=IMAGE_COUNT, max_length=IMAGE_COUNT
    )
    is_premium: Optional[bool] = None
    type: Optional[HousingType] = None
    rooms: Optional[int] = Field(default=None, ge=1, le=8)
    guests: Optional[int] = Field(default=None, ge=1, le=10)
    price: Optional[int] = Field(default=None, ge=100, le=100_000)
    amenities: Optional[list[Amenity]] = Field(default=None, min_length=1)
    coordinates: Optional[CoordinatesDTO] = None


class OfferResponse(CamelModel):
    id: str
    title: str
    description: str
    post_date: datetime
    city: City
    preview_path: str
    image_paths: list[str]
    is_premium: bool
    is_favorite: bool
    rating: float
    type: HousingType
    rooms: int
    guests: int
    price: int
    amenities: list[Amenity]
    owner_id: str
    owner: Optional[UserResponse] = None
    comments_count: int
    coordinates: CoordinatesDTO

    @classmethod
    def from_entity(
        cls, offer: Offer, owner: Optional[User] = None
    ) -> "OfferResponse":
        return cls(
            id=offer.id,
            title=offer.title,
            description=offer.description,
            post_date=offer.created_at,
            city=offer.city,
            preview_path=offer.preview_path,
            image_paths=offer.image_paths,
            is_premium=offer.is_premium,
            is_favorite=offer.is_favorite,
            rating=offer.rating,
            type=offer.type,
            rooms=offer.rooms,
            guests=offer.guests,
            price=offer.price,
            amenities=offer.amenities,
            owner_id=offer.owner_id,
            owner=UserResponse.from_entity(owner) if owner else None,
            comments_count=offer.comments_count,
            coordinates=CoordinatesDTO(
                latitude=offer.coordinates.latitude,
                longitude=offer.coordinates.longitude,
            ),
        )
