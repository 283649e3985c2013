"""
Offer enumerations and the coordinates value object.
"""

from dataclasses import dataclass
from enum import Enum


class City(str, Enum):
    PARIS = "Paris"
    COLOGNE = "Cologne"
    BRUSSELS = "Brussels"
    AMSTERDAM = "Amsterdam"
    HAMBURG = "Hamburg"
    DUSSELDORF = "Dusseldorf"


class HousingType(str, Enum):
    APARTMENT = "apartment"
    HOUSE = "house"
    ROOM = "room"
    HOTEL = "hotel"


class Amenity(str, Enum):
    BREAKFAST = "Breakfast"
    AIR_CONDITIONING = "Air conditioning"
    LAPTOP_FRIENDLY_WORKSPACE = "Laptop friendly workspace"
    BABY_SEAT = "Baby seat"
    WASHER = "Washer"
    TOWELS = "Towels"
    FRIDGE = "Fridge"


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float

    def __post_init__(self):
        if not -90 <= self.latitude <= 90:
            raise ValueError(f"Invalid latitude: {self.latitude}")
        if not -180 <= self.longitude <= 180:
            raise ValueError(f"Invalid longitude: {self.longitude}")
