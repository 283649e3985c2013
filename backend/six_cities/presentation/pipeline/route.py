"""
Route Descriptor - path, method, ordered guards and the terminal handler.

Descriptors are immutable. The guard chain is validated on construction:
- every guard's ``requires`` is provided by a guard before it
- no validation guard comes after a business guard
- every path parameter a guard reads appears in the path
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Iterable

from six_cities.presentation.pipeline.context import PipelineRequest, RequestContext
from six_cities.presentation.pipeline.guard import Guard, GuardPhase
from six_cities.presentation.pipeline.results import PipelineResponse

Handler = Callable[[PipelineRequest, RequestContext], Awaitable[PipelineResponse]]

_PATH_PARAM = re.compile(r"{(\w+)(?::\w+)?}")


class RouteConfigurationError(Exception):
    """A route's guard chain cannot work as declared."""


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


def validate_guard_chain(path: str, method: HttpMethod, guards: Iterable[Guard]) -> None:
    route = f"{method.value} {path}"
    path_params = set(_PATH_PARAM.findall(path))
    provided: set[str] = set()
    business_guard = None

    for guard in guards:
        if not isinstance(guard, Guard):
            raise RouteConfigurationError(f"{route}: {guard!r} is not a Guard")

        missing = guard.requires - provided
        if missing:
            raise RouteConfigurationError(
                f"{route}: {guard.name} requires {sorted(missing)} from an earlier guard"
            )

        unknown = guard.path_params - path_params
        if unknown:
            raise RouteConfigurationError(
                f"{route}: {guard.name} reads path parameters {sorted(unknown)} "
                f"that the path does not declare"
            )

        if guard.phase is GuardPhase.VALIDATION and business_guard is not None:
            raise RouteConfigurationError(
                f"{route}: {guard.name} validates input after {business_guard.name}"
            )
        if guard.phase is GuardPhase.BUSINESS:
            business_guard = guard

        provided |= guard.provides


@dataclass(frozen=True)
class RouteDescriptor:
    path: str
    method: HttpMethod
    handler: Handler
    guards: tuple[Guard, ...] = ()
    name: str = ""

    def __post_init__(self):
        object.__setattr__(self, "guards", tuple(self.guards))
        if not self.name:
            object.__setattr__(
                self, "name", getattr(self.handler, "__name__", "handler")
            )
        validate_guard_chain(self.path, self.method, self.guards)

    def __str__(self) -> str:
        return f"{self.method.value} {self.path}"
