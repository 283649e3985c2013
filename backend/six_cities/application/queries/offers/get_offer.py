"""
GetOffer Query - one offer with the caller's favorite flag.

``prefetched`` lets the caller hand over an offer already loaded earlier in
the request so the store is not queried twice.
"""

from dataclasses import dataclass
from typing import Optional

from six_cities.application.common.interfaces import Query, QueryHandler
from six_cities.application.services.offer_aggregation import OfferAggregationService
from six_cities.domain.entities.offer import Offer
from six_cities.domain.exceptions import EntityNotFoundError
from six_cities.domain.ports.repositories import OfferRepository


@dataclass(frozen=True)
class GetOfferQuery(Query[Offer]):
    offer_id: str
    user_id: Optional[str] = None
    prefetched: Optional[Offer] = None


class GetOfferHandler(QueryHandler[Offer]):
    def __init__(
        self,
        offer_repository: OfferRepository,
        aggregation: OfferAggregationService,
    ):
        self._offer_repository = offer_repository
        self._aggregation = aggregation

    async def execute(self, query: GetOfferQuery) -> Offer:
        offer = query.prefetched
        if offer is None or offer.id != query.offer_id:
            offer = await self._offer_repository.get_by_id(query.offer_id)
        if offer is None:
            raise EntityNotFoundError.for_resource("Offer", query.offer_id)

        return await self._aggregation.get_one_with_favorite(offer, query.user_id)
