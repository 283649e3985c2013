"""
Document Repository Port - Lookup by id, shared by every resource kind.

Existence and ownership guards depend only on this interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class DocumentRepository(ABC):
    @abstractmethod
    async def exists(self, document_id: str) -> bool: ...

    @abstractmethod
    async def get_by_id(self, document_id: str) -> Optional[Any]: ...
