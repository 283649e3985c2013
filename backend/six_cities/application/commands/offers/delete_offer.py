"""Delete Offer Command - removes the offer and cascades to its comments."""

import logging
from dataclasses import dataclass

from six_cities.application.common.interfaces import Command, CommandHandler
from six_cities.domain.ports.repositories import CommentRepository, OfferRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteOfferCommand(Command[None]):
    offer_id: str


class DeleteOfferHandler(CommandHandler[None]):
    def __init__(
        self,
        offer_repository: OfferRepository,
        comment_repository: CommentRepository,
    ):
        self._offer_repository = offer_repository
        self._comment_repository = comment_repository

    async def execute(self, command: DeleteOfferCommand) -> None:
        await self._offer_repository.delete(command.offer_id)
        deleted = await self._comment_repository.delete_by_offer(command.offer_id)
        logger.info(f"Offer {command.offer_id} deleted with {deleted} comments")
