"""
EntityId - UUID string identity shared by offers, comments and users.
"""

from uuid import UUID, uuid4


def new_entity_id() -> str:
    return str(uuid4())


def is_valid_entity_id(value: str) -> bool:
    """Check if string is a UUID in the canonical hyphenated form ids are stored in."""
    if not value:
        return False
    try:
        return str(UUID(value)) == value
    except (ValueError, TypeError, AttributeError):
        return False
