"""
Guard - one ordered step in front of a route handler.

Every guard declares what it needs from earlier guards (``requires``) and
what it leaves in the context for later ones (``provides``). Route
descriptors check these declarations when they are built, so an ownership
check placed before authentication fails at startup instead of at request
time.
"""

from abc import ABC, abstractmethod
from enum import Enum

from six_cities.presentation.pipeline.context import PipelineRequest, RequestContext
from six_cities.presentation.pipeline.results import GuardResult

# Context capabilities exchanged between guards
IDENTITY = "identity"
RESOURCE = "resource"
PAYLOAD = "payload"


def valid_id(param: str) -> str:
    return f"valid_id:{param}"


class GuardPhase(Enum):
    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    # Guards that consult the store; validation must not follow them
    BUSINESS = "business"


class Guard(ABC):
    phase: GuardPhase = GuardPhase.VALIDATION

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def requires(self) -> frozenset[str]:
        return frozenset()

    @property
    def provides(self) -> frozenset[str]:
        return frozenset()

    @property
    def path_params(self) -> frozenset[str]:
        """Path parameters the guard reads; they must exist in the route path."""
        return frozenset()

    @abstractmethod
    async def check(
        self, request: PipelineRequest, context: RequestContext
    ) -> GuardResult: ...

    def __repr__(self) -> str:
        return f"<{self.name}>"
