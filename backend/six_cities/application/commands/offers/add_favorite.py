"""Add Favorite Command."""

from dataclasses import dataclass

from six_cities.application.common.interfaces import Command, CommandHandler
from six_cities.application.services.offer_aggregation import OfferAggregationService
from six_cities.domain.entities.offer import Offer


@dataclass(frozen=True)
class AddFavoriteCommand(Command[Offer]):
    user_id: str
    offer_id: str


class AddFavoriteHandler(CommandHandler[Offer]):
    def __init__(self, aggregation: OfferAggregationService):
        self._aggregation = aggregation

    async def execute(self, command: AddFavoriteCommand) -> Offer:
        return await self._aggregation.add_favorite(command.user_id, command.offer_id)
