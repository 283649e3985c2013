"""
Base controller - collects route descriptors and shapes responses.

Subclasses declare their routes in ``__init__`` with ``add_route``; the app
factory mounts ``controller.routes`` in declaration order.
"""

import logging
from typing import Any, Iterable, Optional

from fastapi import status

from six_cities.presentation.pipeline.guard import Guard
from six_cities.presentation.pipeline.results import PipelineResponse
from six_cities.presentation.pipeline.route import Handler, HttpMethod, RouteDescriptor

logger = logging.getLogger(__name__)


class BaseController:
    prefix: str = ""
    tags: list[str] = []

    def __init__(self):
        self._routes: list[RouteDescriptor] = []

    @property
    def routes(self) -> list[RouteDescriptor]:
        return list(self._routes)

    def add_route(
        self,
        path: str,
        method: HttpMethod,
        handler: Handler,
        guards: Iterable[Guard] = (),
    ) -> RouteDescriptor:
        route = RouteDescriptor(
            path=f"{self.prefix}{path}",
            method=method,
            handler=handler,
            guards=tuple(guards),
        )
        self._routes.append(route)
        logger.debug(f"Route registered: {route}")
        return route

    @staticmethod
    def ok(body: Any) -> PipelineResponse:
        return PipelineResponse(status.HTTP_200_OK, body)

    @staticmethod
    def created(body: Any) -> PipelineResponse:
        return PipelineResponse(status.HTTP_201_CREATED, body)

    @staticmethod
    def no_content() -> PipelineResponse:
        return PipelineResponse(status.HTTP_204_NO_CONTENT)


def parse_limit(raw: Optional[str], default: int) -> int:
    """Positive integer from a query string value, else ``default``."""
    try:
        limit = int(raw) if raw is not None else default
    except ValueError:
        return default
    return limit if limit > 0 else default
