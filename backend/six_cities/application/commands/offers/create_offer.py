"""Create Offer Command."""

import logging
from dataclasses import dataclass

from six_cities.application.common.interfaces import Command, CommandHandler
from six_cities.application.dto.offer import CreateOfferDto
from six_cities.domain.entities.offer import Offer
from six_cities.domain.ports.repositories import OfferRepository
from six_cities.domain.value_objects.offer_types import Coordinates

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateOfferCommand(Command[Offer]):
    owner_id: str
    dto: CreateOfferDto


class CreateOfferHandler(CommandHandler[Offer]):
    def __init__(self, offer_repository: OfferRepository):
        self._offer_repository = offer_repository

    async def execute(self, command: CreateOfferCommand) -> Offer:
        fields = command.dto.model_dump(exclude={"coordinates"})
        offer = Offer.create(
            owner_id=command.owner_id,
            coordinates=Coordinates(
                latitude=command.dto.coordinates.latitude,
                longitude=command.dto.coordinates.longitude,
            ),
            **fields,
        )
        saved = await self._offer_repository.save(offer)
        logger.info(f"New offer created: {saved.title}")
        return saved
