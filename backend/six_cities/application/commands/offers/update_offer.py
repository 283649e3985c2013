"""Update Offer Command."""

from dataclasses import dataclass

from six_cities.application.common.interfaces import Command, CommandHandler
from six_cities.application.dto.offer import UpdateOfferDto
from six_cities.application.services.offer_aggregation import OfferAggregationService
from six_cities.domain.entities.offer import Offer
from six_cities.domain.exceptions import EntityNotFoundError
from six_cities.domain.ports.repositories import OfferRepository
from six_cities.domain.value_objects.offer_types import Coordinates


@dataclass(frozen=True)
class UpdateOfferCommand(Command[Offer]):
    offer_id: str
    user_id: str
    dto: UpdateOfferDto


class UpdateOfferHandler(CommandHandler[Offer]):
    def __init__(
        self,
        offer_repository: OfferRepository,
        aggregation: OfferAggregationService,
    ):
        self._offer_repository = offer_repository
        self._aggregation = aggregation

    async def execute(self, command: UpdateOfferCommand) -> Offer:
        patch = command.dto.model_dump(
            exclude_unset=True, exclude_none=True, exclude={"coordinates"}
        )
        if command.dto.coordinates is not None:
            patch["coordinates"] = Coordinates(
                latitude=command.dto.coordinates.latitude,
                longitude=command.dto.coordinates.longitude,
            )

        offer = await self._offer_repository.update(command.offer_id, patch)
        if offer is None:
            raise EntityNotFoundError.for_resource("Offer", command.offer_id)

        return await self._aggregation.get_one_with_favorite(offer, command.user_id)
