"""
Persistence Layer - Store implementations of the repository ports.

In-memory repositories live here; Prisma repositories live in the
``prisma`` subpackage and are only imported when that backend is selected,
because the Prisma client must be generated first.
"""

from six_cities.infrastructure.persistence.memory_store import InMemoryStore
from six_cities.infrastructure.persistence.memory_offer_repository import (
    InMemoryOfferRepository,
)
from six_cities.infrastructure.persistence.memory_comment_repository import (
    InMemoryCommentRepository,
)
from six_cities.infrastructure.persistence.memory_favorite_repository import (
    InMemoryFavoriteRepository,
)
from six_cities.infrastructure.persistence.memory_user_repository import (
    InMemoryUserRepository,
)

__all__ = [
    "InMemoryStore",
    "InMemoryOfferRepository",
    "InMemoryCommentRepository",
    "InMemoryFavoriteRepository",
    "InMemoryUserRepository",
]
