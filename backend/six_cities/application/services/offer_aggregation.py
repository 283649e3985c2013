"""
Offer Aggregation Service - derived offer state.

Two independent concerns share the offer, comment and favorite stores:

- Favorite enrichment: stamp ``is_favorite`` on offers for one caller.
  A list is enriched with a single bulk relation query, never one query per
  offer. Anonymous callers cost zero queries.
- Rating recomputation: ``rating`` is the mean of the offer's comment
  ratings at call time (0 when there are none), cached on the offer.
  Nothing ties the comment write and the recomputation into one
  transaction; the value is only consistent as of the last call.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from six_cities.domain.entities.favorite import Favorite
from six_cities.domain.entities.offer import Offer
from six_cities.domain.exceptions import EntityNotFoundError
from six_cities.domain.ports.repositories import (
    CommentRepository,
    FavoriteRepository,
    OfferRepository,
)

logger = logging.getLogger(__name__)


def average_rating(ratings: list[int], precision: int = 1) -> float:
    """Mean of ``ratings`` rounded half-up to ``precision`` decimals; 0 when empty."""
    if not ratings:
        return 0.0
    mean = Decimal(sum(ratings)) / Decimal(len(ratings))
    quantum = Decimal(1).scaleb(-precision)
    return float(mean.quantize(quantum, rounding=ROUND_HALF_UP))


class OfferAggregationService:
    def __init__(
        self,
        offer_repository: OfferRepository,
        comment_repository: CommentRepository,
        favorite_repository: FavoriteRepository,
        rating_precision: int = 1,
    ):
        self._offer_repository = offer_repository
        self._comment_repository = comment_repository
        self._favorite_repository = favorite_repository
        self._rating_precision = rating_precision

    # ==================== FAVORITE ENRICHMENT ====================

    async def get_with_favorites(
        self, offers: list[Offer], user_id: Optional[str] = None
    ) -> list[Offer]:
        if not user_id:
            for offer in offers:
                offer.is_favorite = False
            return offers

        favorites = await self._favorite_repository.get_by_user(user_id)
        favorite_ids = {favorite.offer_id for favorite in favorites}

        for offer in offers:
            offer.is_favorite = offer.id in favorite_ids
        return offers

    async def get_one_with_favorite(
        self, offer: Offer, user_id: Optional[str] = None
    ) -> Offer:
        if not user_id:
            offer.is_favorite = False
            return offer

        offer.is_favorite = await self._favorite_repository.exists(user_id, offer.id)
        return offer

    async def get_user_favorites(self, user_id: str) -> list[Offer]:
        """Offers the user favorited; relations to deleted offers are skipped."""
        favorites = await self._favorite_repository.get_by_user(user_id)
        offer_ids = [favorite.offer_id for favorite in favorites]
        if not offer_ids:
            return []

        offers = await self._offer_repository.find_by_ids(offer_ids)
        for offer in offers:
            offer.is_favorite = True
        return offers

    # ==================== FAVORITE TOGGLING ====================

    async def add_favorite(self, user_id: str, offer_id: str) -> Offer:
        """
        Mark an offer as favorite for a user.

        Idempotent: a second call leaves exactly one relation in place.

        Raises:
            EntityNotFoundError: If the offer doesn't exist
        """
        offer = await self._offer_repository.get_by_id(offer_id)
        if offer is None:
            raise EntityNotFoundError.for_resource("Offer", offer_id)

        created = await self._favorite_repository.add(
            Favorite(user_id=user_id, offer_id=offer_id)
        )
        if created:
            logger.info(f"User {user_id} added offer {offer_id} to favorites")

        offer.is_favorite = True
        return offer

    async def delete_favorite(self, user_id: str, offer_id: str) -> None:
        removed = await self._favorite_repository.remove(user_id, offer_id)
        if removed:
            logger.info(f"User {user_id} removed offer {offer_id} from favorites")

    # ==================== RATING ====================

    async def update_rating(self, offer_id: str) -> Optional[Offer]:
        """
        Recompute the offer's rating from all of its comments.

        Returns the updated offer, or None when the offer no longer exists.
        """
        comments = await self._comment_repository.find_by_offer(offer_id)
        rating = average_rating(
            [comment.rating for comment in comments], self._rating_precision
        )

        offer = await self._offer_repository.set_rating(
            offer_id, rating=rating, comments_count=len(comments)
        )
        logger.debug(
            f"Offer {offer_id} rating recomputed: {rating} over {len(comments)} comments"
        )
        return offer
