"""
In-memory Offer Repository Implementation.
"""

import copy
from dataclasses import fields, replace
from typing import Any, Optional

from six_cities.domain.entities.offer import Offer
from six_cities.domain.ports.repositories import OfferRepository
from six_cities.domain.value_objects.offer_types import City
from six_cities.infrastructure.persistence.memory_store import InMemoryStore

# Derived or identity fields a patch must never overwrite
_READ_ONLY_FIELDS = {"id", "owner_id", "created_at", "rating", "comments_count", "is_favorite"}
_OFFER_FIELDS = {f.name for f in fields(Offer)}


class InMemoryOfferRepository(OfferRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    def _copy(self, offer: Offer) -> Offer:
        result = copy.deepcopy(offer)
        result.is_favorite = False
        return result

    async def exists(self, document_id: str) -> bool:
        return document_id in self._store.offers

    async def get_by_id(self, document_id: str) -> Optional[Offer]:
        offer = self._store.offers.get(document_id)
        return self._copy(offer) if offer else None

    async def find_many(
        self,
        limit: int,
        city: Optional[City] = None,
        premium_only: bool = False,
    ) -> list[Offer]:
        offers = [
            offer
            for offer in self._store.offers.values()
            if (city is None or offer.city == city)
            and (not premium_only or offer.is_premium)
        ]
        offers.sort(key=lambda offer: offer.created_at, reverse=True)
        return [self._copy(offer) for offer in offers[:limit]]

    async def find_by_ids(self, offer_ids: list[str]) -> list[Offer]:
        return [
            self._copy(self._store.offers[offer_id])
            for offer_id in dict.fromkeys(offer_ids)
            if offer_id in self._store.offers
        ]

    async def save(self, offer: Offer) -> Offer:
        self._store.offers[offer.id] = self._copy(offer)
        return self._copy(offer)

    async def update(self, offer_id: str, patch: dict[str, Any]) -> Optional[Offer]:
        offer = self._store.offers.get(offer_id)
        if offer is None:
            return None

        unknown = set(patch) - _OFFER_FIELDS
        if unknown:
            raise ValueError(f"Unknown offer fields: {sorted(unknown)}")
        changes = {k: v for k, v in patch.items() if k not in _READ_ONLY_FIELDS}

        updated = replace(offer, **changes)
        self._store.offers[offer_id] = updated
        return self._copy(updated)

    async def delete(self, offer_id: str) -> Optional[Offer]:
        offer = self._store.offers.pop(offer_id, None)
        return self._copy(offer) if offer else None

    async def set_rating(
        self, offer_id: str, rating: float, comments_count: int
    ) -> Optional[Offer]:
        offer = self._store.offers.get(offer_id)
        if offer is None:
            return None

        offer.rating = rating
        offer.comments_count = comments_count
        return self._copy(offer)
