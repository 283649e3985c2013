from six_cities.domain.value_objects.entity_id import new_entity_id, is_valid_entity_id
from six_cities.domain.value_objects.identity import Identity
from six_cities.domain.value_objects.user_type import UserType
from six_cities.domain.value_objects.offer_types import (
    Amenity,
    City,
    Coordinates,
    HousingType,
)

__all__ = [
    "new_entity_id",
    "is_valid_entity_id",
    "Identity",
    "UserType",
    "Amenity",
    "City",
    "Coordinates",
    "HousingType",
]
