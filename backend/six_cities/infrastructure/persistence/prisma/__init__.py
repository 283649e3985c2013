"""
Prisma repositories. Importing this package requires a generated Prisma
client (``prisma generate --schema backend/prisma/schema.prisma``).
"""

from six_cities.infrastructure.persistence.prisma.prisma_offer_repository import (
    PrismaOfferRepository,
)
from six_cities.infrastructure.persistence.prisma.prisma_comment_repository import (
    PrismaCommentRepository,
)
from six_cities.infrastructure.persistence.prisma.prisma_favorite_repository import (
    PrismaFavoriteRepository,
)
from six_cities.infrastructure.persistence.prisma.prisma_user_repository import (
    PrismaUserRepository,
)

__all__ = [
    "PrismaOfferRepository",
    "PrismaCommentRepository",
    "PrismaFavoriteRepository",
    "PrismaUserRepository",
]
