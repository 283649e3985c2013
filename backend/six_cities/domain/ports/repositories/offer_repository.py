"""
Offer Repository Port - Interface for offer persistence.
Implementations: six_cities/infrastructure/persistence/
"""

from abc import abstractmethod
from typing import Any, Optional

from six_cities.domain.entities.offer import Offer
from six_cities.domain.ports.repositories.document_repository import (
    DocumentRepository,
)
from six_cities.domain.value_objects.offer_types import City


class OfferRepository(DocumentRepository):
    @abstractmethod
    async def get_by_id(self, document_id: str) -> Optional[Offer]: ...

    @abstractmethod
    async def find_many(
        self,
        limit: int,
        city: Optional[City] = None,
        premium_only: bool = False,
    ) -> list[Offer]:
        """Newest first."""
        ...

    @abstractmethod
    async def find_by_ids(self, offer_ids: list[str]) -> list[Offer]:
        """Unknown ids are skipped."""
        ...

    @abstractmethod
    async def save(self, offer: Offer) -> Offer: ...

    @abstractmethod
    async def update(self, offer_id: str, patch: dict[str, Any]) -> Optional[Offer]: ...

    @abstractmethod
    async def delete(self, offer_id: str) -> Optional[Offer]: ...

    @abstractmethod
    async def set_rating(
        self, offer_id: str, rating: float, comments_count: int
    ) -> Optional[Offer]: ...
