"""
Request pipeline: ordered guards around a terminal handler.
"""

from six_cities.presentation.pipeline.context import PipelineRequest, RequestContext
from six_cities.presentation.pipeline.executor import PipelineExecutor
from six_cities.presentation.pipeline.guard import (
    IDENTITY,
    PAYLOAD,
    RESOURCE,
    Guard,
    GuardPhase,
    valid_id,
)
from six_cities.presentation.pipeline.results import (
    CONTINUE,
    Continue,
    GuardResult,
    Halt,
    PipelineResponse,
)
from six_cities.presentation.pipeline.route import (
    Handler,
    HttpMethod,
    RouteConfigurationError,
    RouteDescriptor,
)
from six_cities.presentation.pipeline.mount import mount_routes, render_response

__all__ = [
    "PipelineRequest",
    "RequestContext",
    "PipelineExecutor",
    "IDENTITY",
    "PAYLOAD",
    "RESOURCE",
    "Guard",
    "GuardPhase",
    "valid_id",
    "CONTINUE",
    "Continue",
    "GuardResult",
    "Halt",
    "PipelineResponse",
    "Handler",
    "HttpMethod",
    "RouteConfigurationError",
    "RouteDescriptor",
    "mount_routes",
    "render_response",
]
