"""Comment queries."""

from .list_comments import ListCommentsQuery, ListCommentsHandler

__all__ = ["ListCommentsQuery", "ListCommentsHandler"]
