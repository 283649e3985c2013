"""
Identity Value Object - The authenticated caller.

Built per request from a verified credential and never persisted.
"""

from dataclasses import dataclass
from typing import Optional

from six_cities.domain.value_objects.user_type import UserType


@dataclass(frozen=True)
class Identity:
    id: str
    role: UserType
    email: Optional[str] = None

    def __post_init__(self):
        if not self.id:
            raise ValueError("Identity must have an id")
