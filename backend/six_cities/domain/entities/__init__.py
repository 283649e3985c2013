from six_cities.domain.entities.offer import Offer
from six_cities.domain.entities.comment import Comment
from six_cities.domain.entities.user import User
from six_cities.domain.entities.favorite import Favorite

__all__ = ["Offer", "Comment", "User", "Favorite"]
