"""List Premium Offers Query - premium offers of one city."""

from dataclasses import dataclass
from typing import Optional

from six_cities.application.common.interfaces import Query, QueryHandler
from six_cities.application.services.offer_aggregation import OfferAggregationService
from six_cities.domain.entities.offer import Offer
from six_cities.domain.ports.repositories import OfferRepository
from six_cities.domain.value_objects.offer_types import City


@dataclass(frozen=True)
class ListPremiumOffersQuery(Query[list[Offer]]):
    city: City
    limit: int
    user_id: Optional[str] = None


class ListPremiumOffersHandler(QueryHandler[list[Offer]]):
    def __init__(
        self,
        offer_repository: OfferRepository,
        aggregation: OfferAggregationService,
    ):
        self._offer_repository = offer_repository
        self._aggregation = aggregation

    async def execute(self, query: ListPremiumOffersQuery) -> list[Offer]:
        offers = await self._offer_repository.find_many(
            limit=query.limit, city=query.city, premium_only=True
        )
        return await self._aggregation.get_with_favorites(offers, query.user_id)
