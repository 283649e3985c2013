"""Remove Favorite Command."""

from dataclasses import dataclass

from six_cities.application.common.interfaces import Command, CommandHandler
from six_cities.application.services.offer_aggregation import OfferAggregationService


@dataclass(frozen=True)
class RemoveFavoriteCommand(Command[None]):
    user_id: str
    offer_id: str


class RemoveFavoriteHandler(CommandHandler[None]):
    def __init__(self, aggregation: OfferAggregationService):
        self._aggregation = aggregation

    async def execute(self, command: RemoveFavoriteCommand) -> None:
        await self._aggregation.delete_favorite(command.user_id, command.offer_id)
