"""
Dishka DI Container Setup.

- AppProvider wires services, handlers, controllers and the pipeline
  executor against the abstract ports.
- A StorageProvider supplies the four repositories. The in-memory one is
  the default; the Prisma one is loaded only when STORAGE_BACKEND=prisma.

Every dependency is app-scoped: guards are constructed once, when the
controllers declare their routes, so the objects they hold must live as
long as the app.

Flow:
  Container → provides → InMemoryOfferRepository → to → DocumentExistsGuard
                                    ↓
                            uses OfferRepository interface
"""

from datetime import timedelta

from dishka import Container, Provider, Scope, make_container, provide

from six_cities.application.commands.comments import CreateCommentHandler
from six_cities.application.commands.offers import (
    AddFavoriteHandler,
    CreateOfferHandler,
    DeleteOfferHandler,
    RemoveFavoriteHandler,
    UpdateOfferHandler,
)
from six_cities.application.commands.users import (
    LoginUserHandler,
    RegisterUserHandler,
)
from six_cities.application.queries.comments import ListCommentsHandler
from six_cities.application.queries.offers import (
    GetOfferHandler,
    ListFavoriteOffersHandler,
    ListOffersHandler,
    ListPremiumOffersHandler,
)
from six_cities.application.queries.users import GetCurrentUserHandler
from six_cities.application.services import (
    OfferAggregationService,
    OwnerLookupService,
)
from six_cities.config.settings import Config
from six_cities.domain.ports.repositories import (
    CommentRepository,
    FavoriteRepository,
    OfferRepository,
    UserRepository,
)
from six_cities.domain.ports.services import (
    PasswordHasher,
    SchemaValidator,
    TokenIssuer,
    TokenVerifier,
)
from six_cities.infrastructure.auth import JwtTokenService, Sha256PasswordHasher
from six_cities.infrastructure.persistence import (
    InMemoryCommentRepository,
    InMemoryFavoriteRepository,
    InMemoryOfferRepository,
    InMemoryStore,
    InMemoryUserRepository,
)
from six_cities.infrastructure.validation import PydanticSchemaValidator
from six_cities.presentation.api import OfferController, UserController
from six_cities.presentation.pipeline import PipelineExecutor



class AppProvider(Provider):
    """
    Application dependency provider.

    Registers services, handlers and controllers. Repositories come from a
    StorageProvider registered next to it.
    """

    def __init__(self, config: type[Config] = Config):
        super().__init__()
        self._config = config

    # ==================== AUTH ====================

    @provide(scope=Scope.APP)
    def get_jwt_token_service(self) -> JwtTokenService:
        return JwtTokenService(
            secret=self._config.JWT_SECRET,
            issuer=self._config.JWT_ISSUER,
            audience=self._config.JWT_AUDIENCE,
            expires_in=timedelta(minutes=self._config.JWT_EXPIRES_MINUTES),
        )

    @provide(scope=Scope.APP)
    def get_token_verifier(self, service: JwtTokenService) -> TokenVerifier:
        return service

    @provide(scope=Scope.APP)
    def get_token_issuer(self, service: JwtTokenService) -> TokenIssuer:
        return service

    @provide(scope=Scope.APP)
    def get_password_hasher(self) -> PasswordHasher:
        return Sha256PasswordHasher(salt=self._config.PASSWORD_SALT)

    @provide(scope=Scope.APP)
    def get_schema_validator(self) -> SchemaValidator:
        return PydanticSchemaValidator()

    # ==================== SERVICES ====================

    @provide(scope=Scope.APP)
    def get_offer_aggregation_service(
        self,
        offer_repository: OfferRepository,
        comment_repository: CommentRepository,
        favorite_repository: FavoriteRepository,
    ) -> OfferAggregationService:
        return OfferAggregationService(
            offer_repository=offer_repository,
            comment_repository=comment_repository,
            favorite_repository=favorite_repository,
            rating_precision=self._config.RATING_PRECISION,
        )

    @provide(scope=Scope.APP)
    def get_owner_lookup_service(
        self, user_repository: UserRepository
    ) -> OwnerLookupService:
        return OwnerLookupService(user_repository)

    # ==================== OFFER HANDLERS ====================

    @provide(scope=Scope.APP)
    def get_list_offers_handler(
        self, offer_repository: OfferRepository, aggregation: OfferAggregationService
    ) -> ListOffersHandler:
        return ListOffersHandler(offer_repository, aggregation)

    @provide(scope=Scope.APP)
    def get_offer_handler(
        self, offer_repository: OfferRepository, aggregation: OfferAggregationService
    ) -> GetOfferHandler:
        return GetOfferHandler(offer_repository, aggregation)

    @provide(scope=Scope.APP)
    def get_list_premium_offers_handler(
        self, offer_repository: OfferRepository, aggregation: OfferAggregationService
    ) -> ListPremiumOffersHandler:
        return ListPremiumOffersHandler(offer_repository, aggregation)

    @provide(scope=Scope.APP)
    def get_list_favorite_offers_handler(
        self, aggregation: OfferAggregationService
    ) -> ListFavoriteOffersHandler:
        return ListFavoriteOffersHandler(aggregation)

    @provide(scope=Scope.APP)
    def get_create_offer_handler(
        self, offer_repository: OfferRepository
    ) -> CreateOfferHandler:
        return CreateOfferHandler(offer_repository)

    @provide(scope=Scope.APP)
    def get_update_offer_handler(
        self, offer_repository: OfferRepository, aggregation: OfferAggregationService
    ) -> UpdateOfferHandler:
        return UpdateOfferHandler(offer_repository, aggregation)

    @provide(scope=Scope.APP)
    def get_delete_offer_handler(
        self,
        offer_repository: OfferRepository,
        comment_repository: CommentRepository,
    ) -> DeleteOfferHandler:
        return DeleteOfferHandler(offer_repository, comment_repository)

    @provide(scope=Scope.APP)
    def get_add_favorite_handler(
        self, aggregation: OfferAggregationService
    ) -> AddFavoriteHandler:
        return AddFavoriteHandler(aggregation)

    @provide(scope=Scope.APP)
    def get_remove_favorite_handler(
        self, aggregation: OfferAggregationService
    ) -> RemoveFavoriteHandler:
        return RemoveFavoriteHandler(aggregation)

    # ==================== COMMENT HANDLERS ====================

    @provide(scope=Scope.APP)
    def get_list_comments_handler(
        self, comment_repository: CommentRepository
    ) -> ListCommentsHandler:
        return ListCommentsHandler(comment_repository)

    @provide(scope=Scope.APP)
    def get_create_comment_handler(
        self,
        comment_repository: CommentRepository,
        user_repository: UserRepository,
        aggregation: OfferAggregationService,
    ) -> CreateCommentHandler:
        return CreateCommentHandler(comment_repository, user_repository, aggregation)

    # ==================== USER HANDLERS ====================

    @provide(scope=Scope.APP)
    def get_register_user_handler(
        self, user_repository: UserRepository, password_hasher: PasswordHasher
    ) -> RegisterUserHandler:
        return RegisterUserHandler(user_repository, password_hasher)

    @provide(scope=Scope.APP)
    def get_login_user_handler(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_issuer: TokenIssuer,
    ) -> LoginUserHandler:
        return LoginUserHandler(user_repository, password_hasher, token_issuer)

    @provide(scope=Scope.APP)
    def get_current_user_handler(
        self, user_repository: UserRepository
    ) -> GetCurrentUserHandler:
        return GetCurrentUserHandler(user_repository)

    # ==================== PRESENTATION ====================

    @provide(scope=Scope.APP)
    def get_pipeline_executor(self) -> PipelineExecutor:
        return PipelineExecutor()

    @provide(scope=Scope.APP)
    def get_offer_controller(
        self,
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
    ) -> OfferController:
        return OfferController(
            config=self._config,
            offer_repository=offer_repository,
            token_verifier=token_verifier,
            schema_validator=schema_validator,
            list_offers=list_offers,
            get_offer=get_offer,
            list_premium=list_premium,
            list_favorites=list_favorites,
            create_offer=create_offer,
            update_offer=update_offer,
            delete_offer=delete_offer,
            add_favorite=add_favorite,
            remove_favorite=remove_favorite,
            list_comments=list_comments,
            create_comment=create_comment,
            owner_lookup=owner_lookup,
        )

    @provide(scope=Scope.APP)
    def get_user_controller(
        self,
        token_verifier: TokenVerifier,
        schema_validator: SchemaValidator,
        register_user: RegisterUserHandler,
        login_user: LoginUserHandler,
        get_current_user: GetCurrentUserHandler,
    ) -> UserController:
        return UserController(
            token_verifier=token_verifier,
            schema_validator=schema_validator,
            register_user=register_user,
            login_user=login_user,
            get_current_user=get_current_user,
        )


class StorageProvider(Provider):
    """
    Supplies the four repository ports.

    ``startup``/``shutdown`` run in the app lifespan for backends that hold
    a connection.
    """

    async def startup(self, container: Container) -> None:
        return None

    async def shutdown(self, container: Container) -> None:
        return None


class InMemoryStorageProvider(StorageProvider):
    """Process-local storage. Pass a store to share or inspect it in tests."""

    def __init__(self, store: InMemoryStore | None = None):
        super().__init__()
        self._store = store or InMemoryStore()

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        return self._store

    @provide(scope=Scope.APP)
    def get_offer_repository(self, store: InMemoryStore) -> OfferRepository:
        return InMemoryOfferRepository(store)

    @provide(scope=Scope.APP)
    def get_comment_repository(self, store: InMemoryStore) -> CommentRepository:
        return InMemoryCommentRepository(store)

    @provide(scope=Scope.APP)
    def get_favorite_repository(self, store: InMemoryStore) -> FavoriteRepository:
        return InMemoryFavoriteRepository(store)

    @provide(scope=Scope.APP)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        return InMemoryUserRepository(store)


def build_container(
    config: type[Config], storage_provider: StorageProvider
) -> Container:
    return make_container(AppProvider(config), storage_provider)
