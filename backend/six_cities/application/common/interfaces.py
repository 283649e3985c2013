"""
Base interfaces for CQRS pattern.

Usage:
    @dataclass(frozen=True)
    class DeleteOfferCommand(Command[None]):
        offer_id: str

    class DeleteOfferHandler(CommandHandler[None]):
        def __init__(self, offers: OfferRepository, comments: CommentRepository):
            ...

        async def execute(self, command: DeleteOfferCommand) -> None:
            ...
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar("T")
class Command(ABC, Generic[T]):
    """Base class for write operations"""
    pass

class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> T:
        """Execute the command and return a result of type T"""
        ...

class Query(ABC, Generic[T]):
    """Base class for read operations"""
    pass

class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T:
        """Execute the query and return a result of type T"""
        ...
