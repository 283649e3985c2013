"""Offer commands."""

from .create_offer import CreateOfferCommand, CreateOfferHandler
from .update_offer import UpdateOfferCommand, UpdateOfferHandler
from .delete_offer import DeleteOfferCommand, DeleteOfferHandler
from .add_favorite import AddFavoriteCommand, AddFavoriteHandler
from .remove_favorite import RemoveFavoriteCommand, RemoveFavoriteHandler

__all__ = [
    "CreateOfferCommand",
    "CreateOfferHandler",
    "UpdateOfferCommand",
    "UpdateOfferHandler",
    "DeleteOfferCommand",
    "DeleteOfferHandler",
    "AddFavoriteCommand",
    "AddFavoriteHandler",
    "RemoveFavoriteCommand",
    "RemoveFavoriteHandler",
]
