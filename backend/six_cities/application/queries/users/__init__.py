"""User queries."""

from .get_current_user import GetCurrentUserQuery, GetCurrentUserHandler

__all__ = ["GetCurrentUserQuery", "GetCurrentUserHandler"]
