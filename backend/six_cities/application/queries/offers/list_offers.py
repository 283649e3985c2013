"""List Offers Query - newest offers, favorite flags for the caller."""

from dataclasses import dataclass
from typing import Optional

from six_cities.application.common.interfaces import Query, QueryHandler
from six_cities.application.services.offer_aggregation import OfferAggregationService
from six_cities.domain.entities.offer import Offer
from six_cities.domain.ports.repositories import OfferRepository


@dataclass(frozen=True)
class ListOffersQuery(Query[list[Offer]]):
    limit: int
    user_id: Optional[str] = None


class ListOffersHandler(QueryHandler[list[Offer]]):
    def __init__(
        self,
        offer_repository: OfferRepository,
        aggregation: OfferAggregationService,
    ):
        self._offer_repository = offer_repository
        self._aggregation = aggregation

    async def execute(self, query: ListOffersQuery) -> list[Offer]:
        offers = await self._offer_repository.find_many(limit=query.limit)
        return await self._aggregation.get_with_favorites(offers, query.user_id)
