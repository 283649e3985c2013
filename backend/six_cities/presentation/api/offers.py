"""
Offers API - offers, favorites and offer comments.

Guard order per route (left to right):

    GET    /offers                      identify
    GET    /offers/favorites            auth
    GET    /offers/premium/{city}       identify, city
    GET    /offers/{offer_id}           identify, id, exists
    POST   /offers                      auth, dto
    PATCH  /offers/{offer_id}           auth, id, dto, exists, owner
    DELETE /offers/{offer_id}           auth, id, exists, owner
    POST   /offers/{offer_id}/favorite  auth, id, exists
    DELETE /offers/{offer_id}/favorite  auth, id, exists
    GET    /offers/{offer_id}/comments  id, exists
    POST   /offers/{offer_id}/comments  auth, id, dto, exists
"""

import logging

from six_cities.application.commands.comments import (
    CreateCommentCommand,
    CreateCommentHandler,
)
from six_cities.application.commands.offers import (
    AddFavoriteCommand,
    AddFavoriteHandler,
    CreateOfferCommand,
    CreateOfferHandler,
    DeleteOfferCommand,
    DeleteOfferHandler,
    RemoveFavoriteCommand,
    RemoveFavoriteHandler,
    UpdateOfferCommand,
    UpdateOfferHandler,
)
from six_cities.application.dto import (
    CommentResponse,
    CreateCommentDto,
    CreateOfferDto,
    OfferResponse,
    UpdateOfferDto,
)
from six_cities.application.queries.comments import (
    ListCommentsHandler,
    ListCommentsQuery,
)
from six_cities.application.queries.offers import (
    GetOfferHandler,
    GetOfferQuery,
    ListFavoriteOffersHandler,
    ListFavoriteOffersQuery,
    ListOffersHandler,
    ListOffersQuery,
    ListPremiumOffersHandler,
    ListPremiumOffersQuery,
)
from six_cities.application.services import OwnerLookupService
from six_cities.config.settings import Config
from six_cities.domain.entities import Comment, Offer
from six_cities.domain.ports.repositories import OfferRepository
from six_cities.domain.ports.services import SchemaValidator, TokenVerifier
from six_cities.domain.value_objects.offer_types import City
from six_cities.presentation.api.base_controller import BaseController, parse_limit
from six_cities.presentation.guards import (
    CheckOwnerGuard,
    DocumentExistsGuard,
    IdentifyCallerGuard,
    PrivateRouteGuard,
    ValidateChoiceGuard,
    ValidateDtoGuard,
    ValidateObjectIdGuard,
)
from six_cities.presentation.pipeline import (
    HttpMethod,
    PipelineRequest,
    PipelineResponse,
    RequestContext,
)

logger = logging.getLogger(__name__)

OFFER_ID = "offer_id"


def _user_id(context: RequestContext):
    return context.identity.id if context.identity else None


class OfferController(BaseController):
    prefix = "/offers"
    tags = ["offers"]

    def __init__(
        self,
        config: type[Config],
        offer_repository: OfferRepository,
        token_verifier: TokenVerifier,
        schema_validator: SchemaValidator,
        list_offers: ListOffersHandler,
        get_offer: GetOfferHandler,
        list_premium: ListPremiumOffersHandler,
        list_favorites: ListFavoriteOffersHandler,
        create_offer: CreateOfferHandler,
        update_offer: UpdateOfferHandler,
        delete_offer: DeleteOfferHandler,
        add_favorite: AddFavoriteHandler,
        remove_favorite: RemoveFavoriteHandler,
        list_comments: ListCommentsHandler,
        create_comment: CreateCommentHandler,
        owner_lookup: OwnerLookupService,
    ):
        super().__init__()
        self._config = config
        self._owner_lookup = owner_lookup
        self._list_offers = list_offers
        self._get_offer = get_offer
        self._list_premium = list_premium
        self._list_favorites = list_favorites
        self._create_offer = create_offer
        self._update_offer = update_offer
        self._delete_offer = delete_offer
        self._add_favorite = add_favorite
        self._remove_favorite = remove_favorite
        self._list_comments = list_comments
        self._create_comment = create_comment

        logger.info("Register routes for OfferController...")

        identify = IdentifyCallerGuard(token_verifier)
        private = PrivateRouteGuard(token_verifier)
        offer_id = ValidateObjectIdGuard(OFFER_ID)
        offer_exists = DocumentExistsGuard(offer_repository, "Offer", OFFER_ID)
        owner = CheckOwnerGuard(offer_repository, "Offer", OFFER_ID)

        self.add_route("", HttpMethod.GET, self.get_all, [identify])
        self.add_route("/favorites", HttpMethod.GET, self.get_favorites, [private])
        self.add_route(
            "/premium/{city}",
            HttpMethod.GET,
            self.get_premium,
            [identify, ValidateChoiceGuard("city", City)],
        )
        self.add_route(
            "/{offer_id}",
            HttpMethod.GET,
            self.get_one,
            [identify, offer_id, offer_exists],
        )
        self.add_route(
            "",
            HttpMethod.POST,
            self.create,
            [private, ValidateDtoGuard(schema_validator, CreateOfferDto)],
        )
        self.add_route(
            "/{offer_id}",
            HttpMethod.PATCH,
            self.update,
            [
                private,
                offer_id,
                ValidateDtoGuard(schema_validator, UpdateOfferDto),
                offer_exists,
                owner,
            ],
        )
        self.add_route(
            "/{offer_id}",
            HttpMethod.DELETE,
            self.delete,
            [private, offer_id, offer_exists, owner],
        )
        self.add_route(
            "/{offer_id}/favorite",
            HttpMethod.POST,
            self.add_favorite,
            [private, offer_id, offer_exists],
        )
        self.add_route(
            "/{offer_id}/favorite",
            HttpMethod.DELETE,
            self.delete_favorite,
            [private, offer_id, offer_exists],
        )
        self.add_route(
            "/{offer_id}/comments",
            HttpMethod.GET,
            self.get_comments,
            [offer_id, offer_exists],
        )
        self.add_route(
            "/{offer_id}/comments",
            HttpMethod.POST,
            self.create_comment,
            [
                private,
                offer_id,
                ValidateDtoGuard(schema_validator, CreateCommentDto),
                offer_exists,
            ],
        )

    async def get_all(
        self, request: PipelineRequest, context: RequestContext
    ) -> PipelineResponse:
        limit = parse_limit(
            request.query_params.get("limit"), self._config.DEFAULT_OFFER_COUNT
        )
        offers = await self._list_offers.execute(
            ListOffersQuery(limit=limit, user_id=_user_id(context))
        )
        return self.ok(await self._offers_json(offers))

    async def get_favorites(
        self, request: PipelineRequest, context: RequestContext
    ) -> PipelineResponse:
        offers = await self._list_favorites.execute(
            ListFavoriteOffersQuery(user_id=context.identity.id)
        )
        return self.ok(await self._offers_json(offers))

    async def get_premium(
        self, request: PipelineRequest, context: RequestContext
    ) -> PipelineResponse:
        offers = await self._list_premium.execute(
            ListPremiumOffersQuery(
                city=City(request.path_params["city"]),
                limit=self._config.DEFAULT_PREMIUM_OFFER_COUNT,
                user_id=_user_id(context),
            )
        )
        return self.ok(await self._offers_json(offers))

    async def get_one(
        self, request: PipelineRequest, context: RequestContext
    ) -> PipelineResponse:
        offer = await self._get_offer.execute(
            GetOfferQuery(
                offer_id=request.path_params[OFFER_ID],
                user_id=_user_id(context),
                prefetched=context.resource,
            )
        )
        return self.ok(await self._offer_json(offer))

    async def create(
        self, request: PipelineRequest, context: RequestContext
    ) -> PipelineResponse:
        offer = await self._create_offer.execute(
            CreateOfferCommand(owner_id=context.identity.id, dto=context.payload)
        )
        return self.created(await self._offer_json(offer))

    async def update(
        self, request: PipelineRequest, context: RequestContext
    ) -> PipelineResponse:
        offer = await self._update_offer.execute(
            UpdateOfferCommand(
                offer_id=request.path_params[OFFER_ID],
                user_id=context.identity.id,
                dto=context.payload,
            )
        )
        return self.ok(await self._offer_json(offer))

    async def delete(
        self, request: PipelineRequest, context: RequestContext
    ) -> PipelineResponse:
        await self._delete_offer.execute(
            DeleteOfferCommand(offer_id=request.path_params[OFFER_ID])
        )
        return self.no_content()

    async def add_favorite(
        self, request: PipelineRequest, context: RequestContext
    ) -> PipelineResponse:
        offer = await self._add_favorite.execute(
            AddFavoriteCommand(
                user_id=context.identity.id, offer_id=request.path_params[OFFER_ID]
            )
        )
        return self.created(await self._offer_json(offer))

    async def delete_favorite(
        self, request: PipelineRequest, context: RequestContext
    ) -> PipelineResponse:
        await self._remove_favorite.execute(
            RemoveFavoriteCommand(
                user_id=context.identity.id, offer_id=request.path_params[OFFER_ID]
            )
        )
        return self.no_content()

    async def get_comments(
        self, request: PipelineRequest, context: RequestContext
    ) -> PipelineResponse:
        comments = await self._list_comments.execute(
            ListCommentsQuery(
                offer_id=request.path_params[OFFER_ID],
                limit=self._config.DEFAULT_COMMENT_COUNT,
            )
        )
        return self.ok(await self._comments_json(comments))

    async def create_comment(
        self, request: PipelineRequest, context: RequestContext
    ) -> PipelineResponse:
        comment = await self._create_comment.execute(
            CreateCommentCommand(
                offer_id=request.path_params[OFFER_ID],
                user_id=context.identity.id,
                dto=context.payload,
            )
        )
        return self.created((await self._comments_json([comment]))[0])

    # ==================== RESPONSES ====================

    async def _offers_json(self, offers: list[Offer]) -> list[dict]:
        owners = await self._owner_lookup.by_ids([offer.owner_id for offer in offers])
        return [
            OfferResponse.from_entity(offer, owners.get(offer.owner_id)).to_json()
            for offer in offers
        ]

    async def _offer_json(self, offer: Offer) -> dict:
        return (await self._offers_json([offer]))[0]

    async def _comments_json(self, comments: list[Comment]) -> list[dict]:
        owners = await self._owner_lookup.by_ids([c.user_id for c in comments])
        return [
            CommentResponse.from_entity(c, owners.get(c.user_id)).to_json()
            for c in comments
        ]
