"""
Favorite Entity - Links a user to an offer they favorited.

At most one relation exists per (user_id, offer_id). A relation may outlive
its offer; readers treat such orphans as absent.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(frozen=True)
class Favorite:
    user_id: str
    offer_id: str
    created_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc), compare=False
    )

    @property
    def key(self) -> tuple[str, str]:
        return (self.user_id, self.offer_id)
