"""List Favorite Offers Query."""

from dataclasses import dataclass

from six_cities.application.common.interfaces import Query, QueryHandler
from six_cities.application.services.offer_aggregation import OfferAggregationService
from six_cities.domain.entities.offer import Offer


@dataclass(frozen=True)
class ListFavoriteOffersQuery(Query[list[Offer]]):
    user_id: str


class ListFavoriteOffersHandler(QueryHandler[list[Offer]]):
    def __init__(self, aggregation: OfferAggregationService):
        self._aggregation = aggregation

    async def execute(self, query: ListFavoriteOffersQuery) -> list[Offer]:
        return await self._aggregation.get_user_favorites(query.user_id)
