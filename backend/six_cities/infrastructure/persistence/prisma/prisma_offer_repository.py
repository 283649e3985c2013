"""
Prisma Offer Repository Implementation.

Mapping:
- Prisma model fields: snake_case columns, coordinates flattened into
  latitude/longitude, enums stored as their string values
- Domain entity: Offer with City/HousingType/Amenity enums and Coordinates
"""

from typing import Any, Optional
from prisma import Prisma
from prisma.models import Offer as PrismaOffer
from six_cities.domain.entities.offer import Offer
from six_cities.domain.ports.repositories import OfferRepository
from six_cities.domain.value_objects.offer_types import (
    Amenity,
    City,
    Coordinates,
    HousingType,
)

_READ_ONLY_FIELDS = {"id", "owner_id", "created_at", "rating", "comments_count", "is_favorite"}


def _to_data(values: dict[str, Any]) -> dict[str, Any]:
    """Flatten entity values into Prisma column values."""
    data: dict[str, Any] = {}
    for key, value in values.items():
        if key == "coordinates":
            data["latitude"] = value.latitude
            data["longitude"] = value.longitude
        elif key == "amenities":
            data[key] = [amenity.value for amenity in value]
        elif key in ("city", "type"):
            data[key] = value.value
        else:
            data[key] = value
    return data


class PrismaOfferRepository(OfferRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaOffer) -> Offer:
        """Map Prisma record to domain entity."""
        return Offer(
            id=record.id,
            title=record.title,
            description=record.description,
            city=City(record.city),
            preview_path=record.preview_path,
            image_paths=list(record.image_paths),
            is_premium=record.is_premium,
            type=HousingType(record.type),
            rooms=record.rooms,
            guests=record.guests,
            price=record.price,
            amenities=[Amenity(a) for a in record.amenities],
            owner_id=record.owner_id,
            coordinates=Coordinates(
                latitude=record.latitude, longitude=record.longitude
            ),
            created_at=record.created_at,
            rating=record.rating,
            comments_count=record.comments_count,
        )

    async def exists(self, document_id: str) -> bool:
        return await self._prisma.offer.count(where={"id": document_id}) > 0

    async def get_by_id(self, document_id: str) -> Optional[Offer]:
        record = await self._prisma.offer.find_unique(where={"id": document_id})
        return self._to_entity(record) if record else None

    async def find_many(
        self,
        limit: int,
        city: Optional[City] = None,
        premium_only: bool = False,
    ) -> list[Offer]:
        where: dict[str, Any] = {}
        if city is not None:
            where["city"] = city.value
        if premium_only:
            where["is_premium"] = True

        records = await self._prisma.offer.find_many(
            where=where,
            order={"created_at": "desc"},
            take=limit,
        )
        return [self._to_entity(record) for record in records]

    async def find_by_ids(self, offer_ids: list[str]) -> list[Offer]:
        if not offer_ids:
            return []
        records = await self._prisma.offer.find_many(where={"id": {"in": offer_ids}})
        return [self._to_entity(record) for record in records]

    async def save(self, offer: Offer) -> Offer:
        data = _to_data(
            {
                "id": offer.id,
                "title": offer.title,
                "description": offer.description,
                "city": offer.city,
                "preview_path": offer.preview_path,
                "image_paths": offer.image_paths,
                "is_premium": offer.is_premium,
                "type": offer.type,
                "rooms": offer.rooms,
                "guests": offer.guests,
                "price": offer.price,
                "amenities": offer.amenities,
                "rating": offer.rating,
                "comments_count": offer.comments_count,
                "coordinates": offer.coordinates,
                "owner_id": offer.owner_id,
                "created_at": offer.created_at,
            }
        )
        record = await self._prisma.offer.create(data=data)
        return self._to_entity(record)

    async def update(self, offer_id: str, patch: dict[str, Any]) -> Optional[Offer]:
        changes = {k: v for k, v in patch.items() if k not in _READ_ONLY_FIELDS}
        if not changes:
            return await self.get_by_id(offer_id)
        record = await self._prisma.offer.update(
            where={"id": offer_id}, data=_to_data(changes)
        )
        return self._to_entity(record) if record else None

    async def delete(self, offer_id: str) -> Optional[Offer]:
        record = await self._prisma.offer.delete(where={"id": offer_id})
        return self._to_entity(record) if record else None

    async def set_rating(
        self, offer_id: str, rating: float, comments_count: int
    ) -> Optional[Offer]:
        record = await self._prisma.offer.update(
            where={"id": offer_id},
            data={"rating": rating, "comments_count": comments_count},
        )
        return self._to_entity(record) if record else None
