"""
Prisma storage provider.

Imported only when STORAGE_BACKEND=prisma, since the Prisma client module
exists only after ``prisma generate`` has run.
"""

import logging

from dishka import Container, Scope, provide
from prisma import Prisma

from six_cities.domain.ports.repositories import (
    CommentRepository,
    FavoriteRepository,
    OfferRepository,
    UserRepository,
)
from six_cities.infrastructure.persistence.prisma import (
    PrismaCommentRepository,
    PrismaFavoriteRepository,
    PrismaOfferRepository,
    PrismaUserRepository,
)
from six_cities.setup.ioc.container import StorageProvider

logger = logging.getLogger(__name__)


class PrismaStorageProvider(StorageProvider):
    @provide(scope=Scope.APP)
    def get_prisma(self) -> Prisma:
        """
        Provide Prisma client (singleton, app-scoped).

        Connected in ``startup``: the container is synchronous and
        ``connect()`` is a coroutine.
        """
        return Prisma()

    @provide(scope=Scope.APP)
    def get_offer_repository(self, prisma: Prisma) -> OfferRepository:
        return PrismaOfferRepository(prisma)

    @provide(scope=Scope.APP)
    def get_comment_repository(self, prisma: Prisma) -> CommentRepository:
        return PrismaCommentRepository(prisma)

    @provide(scope=Scope.APP)
    def get_favorite_repository(self, prisma: Prisma) -> FavoriteRepository:
        return PrismaFavoriteRepository(prisma)

    @provide(scope=Scope.APP)
    def get_user_repository(self, prisma: Prisma) -> UserRepository:
        return PrismaUserRepository(prisma)

    async def startup(self, container: Container) -> None:
        prisma = container.get(Prisma)
        if not prisma.is_connected():
            await prisma.connect()
        logger.info("Prisma client connected")

    async def shutdown(self, container: Container) -> None:
        prisma = container.get(Prisma)
        if prisma.is_connected():
            await prisma.disconnect()
        logger.info("Prisma client disconnected")
