"""
Bridges route descriptors onto FastAPI.

Each descriptor becomes one FastAPI route whose endpoint converts the
Starlette request, runs the pipeline and renders its single response.
Routes are added in declaration order; Starlette matches the first hit, so
literal paths (``/offers/favorites``) must be declared before templated
ones (``/offers/{offer_id}``).
"""

import logging
from typing import Iterable

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, Response

from six_cities.presentation.pipeline.context import PipelineRequest
from six_cities.presentation.pipeline.executor import PipelineExecutor
from six_cities.presentation.pipeline.results import PipelineResponse
from six_cities.presentation.pipeline.route import RouteDescriptor

logger = logging.getLogger(__name__)


def render_response(response: PipelineResponse) -> Response:
    if response.status_code == status.HTTP_204_NO_CONTENT or response.body is None:
        return Response(status_code=response.status_code)
    return JSONResponse(status_code=response.status_code, content=response.body)


def _make_endpoint(route: RouteDescriptor, executor: PipelineExecutor):
    async def endpoint(request: Request) -> Response:
        pipeline_request = await PipelineRequest.from_starlette(request)
        response = await executor.execute(route, pipeline_request)
        return render_response(response)

    endpoint.__name__ = route.name
    return endpoint


def mount_routes(
    app: FastAPI,
    routes: Iterable[RouteDescriptor],
    executor: PipelineExecutor,
    tags: list[str] | None = None,
) -> None:
    for route in routes:
        app.add_api_route(
            route.path,
            _make_endpoint(route, executor),
            methods=[route.method.value],
            name=f"{route.method.value.lower()}_{route.name}",
            tags=tags,
        )
        logger.debug(f"Mounted {route} ({len(route.guards)} guards)")
