"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the application needs
- Does NOT specify implementation (in-memory, Prisma, etc.)

Infrastructure layer provides implementations.
"""

from six_cities.domain.ports.repositories.document_repository import DocumentRepository
from six_cities.domain.ports.repositories.offer_repository import OfferRepository
from six_cities.domain.ports.repositories.comment_repository import CommentRepository
from six_cities.domain.ports.repositories.favorite_repository import FavoriteRepository
from six_cities.domain.ports.repositories.user_repository import UserRepository

__all__ = [
    "DocumentRepository",
    "OfferRepository",
    "CommentRepository",
    "FavoriteRepository",
    "UserRepository",
]
