"""
In-memory storage backing the memory repositories.

Mutations never await, so on a single event loop each write is applied
atomically relative to other requests. Repositories hand out copies;
callers can stamp derived fields without touching stored state.
"""

from dataclasses import dataclass, field

from six_cities.domain.entities.comment import Comment
from six_cities.domain.entities.favorite import Favorite
from six_cities.domain.entities.offer import Offer
from six_cities.domain.entities.user import User


@dataclass
class InMemoryStore:
    offers: dict[str, Offer] = field(default_factory=dict)
    comments: dict[str, Comment] = field(default_factory=dict)
    users: dict[str, User] = field(default_factory=dict)
    favorites: dict[tuple[str, str], Favorite] = field(default_factory=dict)

    def clear(self) -> None:
        self.offers.clear()
        self.comments.clear()
        self.users.clear()
        self.favorites.clear()
