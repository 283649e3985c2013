"""
Create Comment Command.

Rejects authors whose account no longer exists, saves the comment, then
recomputes the offer's rating and comment count.
"""

from dataclasses import dataclass

from six_cities.application.common.interfaces import Command, CommandHandler
from six_cities.application.dto.comment import CreateCommentDto
from six_cities.application.services.offer_aggregation import OfferAggregationService
from six_cities.domain.entities.comment import Comment
from six_cities.domain.exceptions import UnauthorizedError
from six_cities.domain.ports.repositories import CommentRepository, UserRepository


@dataclass(frozen=True)
class CreateCommentCommand(Command[Comment]):
    offer_id: str
    user_id: str
    dto: CreateCommentDto


class CreateCommentHandler(CommandHandler[Comment]):
    def __init__(
        self,
        comment_repository: CommentRepository,
        user_repository: UserRepository,
        aggregation: OfferAggregationService,
    ):
        self._comment_repository = comment_repository
        self._user_repository = user_repository
        self._aggregation = aggregation

    async def execute(self, command: CreateCommentCommand) -> Comment:
        if not await self._user_repository.exists(command.user_id):
            raise UnauthorizedError()
        comment = Comment.create(
            offer_id=command.offer_id,
            user_id=command.user_id,
            text=command.dto.text,
            rating=command.dto.rating,
        )
        saved = await self._comment_repository.save(comment)
        await self._aggregation.update_rating(command.offer_id)
        return saved
