"""
API Controllers - route tables built from guards and handlers.
"""

from six_cities.presentation.api.base_controller import BaseController
from six_cities.presentation.api.offers import OfferController
from six_cities.presentation.api.users import UserController

__all__ = ["BaseController", "OfferController", "UserController"]
