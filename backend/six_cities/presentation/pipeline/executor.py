"""
Pipeline Executor - runs a route's guards in order, then its handler.

Guarantees exactly one response per request:
- the first Halt becomes the response; later guards and the handler never run
- after the last guard the handler runs once
- domain errors raised anywhere map to their status
- anything else (store down, bugs) becomes a generic 500
"""

import logging

from six_cities.domain.exceptions import DomainError
from six_cities.presentation.pipeline.context import PipelineRequest, RequestContext
from six_cities.presentation.pipeline.results import (
    Continue,
    Halt,
    PipelineResponse,
    status_for,
)
from six_cities.presentation.pipeline.route import RouteDescriptor

logger = logging.getLogger(__name__)


class PipelineExecutor:
    async def execute(
        self, route: RouteDescriptor, request: PipelineRequest
    ) -> PipelineResponse:
        try:
            return await self._run(route, request)
        except DomainError as e:
            if status_for(e) >= 500:
                logger.exception(f"[{route}] internal error: {e.message}")
            else:
                logger.info(f"[{route}] {e.kind}: {e.message}")
            return PipelineResponse.from_error(e)
        except Exception as e:
            logger.exception(f"[{route}] unhandled {type(e).__name__}: {e}")
            return PipelineResponse.internal_error()

    async def _run(
        self, route: RouteDescriptor, request: PipelineRequest
    ) -> PipelineResponse:
        context = RequestContext()

        for guard in route.guards:
            result = await guard.check(request, context)
            if isinstance(result, Halt):
                logger.info(
                    f"[{route}] halted by {guard.name} with {result.status_code}"
                )
                return result.to_response()
            if not isinstance(result, Continue):
                raise TypeError(
                    f"{guard.name} returned {result!r} instead of a guard result"
                )

        response = await route.handler(request, context)
        if not isinstance(response, PipelineResponse):
            raise TypeError(
                f"Handler {route.name} returned {type(response).__name__} "
                f"instead of a PipelineResponse"
            )
        return response
