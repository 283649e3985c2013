"""Offer queries."""

from .list_offers import ListOffersQuery, ListOffersHandler
from .get_offer import GetOfferQuery, GetOfferHandler
from .list_premium_offers import ListPremiumOffersQuery, ListPremiumOffersHandler
from .list_favorite_offers import ListFavoriteOffersQuery, ListFavoriteOffersHandler

__all__ = [
    "ListOffersQuery",
    "ListOffersHandler",
    "GetOfferQuery",
    "GetOfferHandler",
    "ListPremiumOffersQuery",
    "ListPremiumOffersHandler",
    "ListFavoriteOffersQuery",
    "ListFavoriteOffersHandler",
]
