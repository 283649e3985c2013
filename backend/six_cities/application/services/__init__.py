from six_cities.application.services.offer_aggregation import (
    OfferAggregationService,
    average_rating,
)
from six_cities.application.services.owner_lookup import OwnerLookupService

__all__ = ["OfferAggregationService", "OwnerLookupService", "average_rating"]
