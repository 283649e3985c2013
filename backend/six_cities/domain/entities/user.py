"""
User Entity - A registered marketplace user.
"""

from dataclasses import dataclass
from datetime import datetime, timezone

from six_cities.domain.value_objects.entity_id import new_entity_id
from six_cities.domain.value_objects.identity import Identity
from six_cities.domain.value_objects.user_type import UserType


@dataclass
class User:
    # Required fields (no defaults) - must come first
    id: str
    email: str
    password_hash: str
    type: UserType
    created_at: datetime
    # Optional fields (with defaults) - must come last
    name: str = ""
    avatar_path: str = ""

    @classmethod
    def create(
        cls,
        email: str,
        password_hash: str,
        type: UserType,
        name: str = "",
        avatar_path: str = "",
    ) -> "User":
        return cls(
            id=new_entity_id(),
            email=email,
            password_hash=password_hash,
            type=type,
            created_at=datetime.now(timezone.utc),
            name=name,
            avatar_path=avatar_path,
        )

    def to_identity(self) -> Identity:
        return Identity(id=self.id, role=self.type, email=self.email)
