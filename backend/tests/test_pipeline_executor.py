"""
Pipeline executor tests: ordering, short-circuiting and the
one-response-per-request guarantee.
"""

import asyncio

import pytest

from six_cities.domain.exceptions import AccessDeniedError, InternalError
from six_cities.presentation.pipeline import (
    CONTINUE,
    Guard,
    Halt,
    HttpMethod,
    PipelineExecutor,
    PipelineRequest,
    PipelineResponse,
    RouteDescriptor,
)


class RecordingGuard(Guard):
    def __init__(self, label, trace, result=CONTINUE, error=None):
        self.label = label
        self.trace = trace
        self.result = result
        self.error = error

    @property
    def name(self):
        return f"RecordingGuard({self.label})"

    async def check(self, request, context):
        self.trace.append(self.label)
        if self.error is not None:
            raise self.error
        return self.result


def _handler(trace, response=None, error=None):
    async def handler(request, context):
        trace.append("handler")
        if error is not None:
            raise error
        return response if response is not None else PipelineResponse(200, {"ok": True})

    return handler


def _run(route, request=None):
    request = request or PipelineRequest(method=route.method.value, path=route.path)
    return asyncio.run(PipelineExecutor().execute(route, request))


def test_guards_run_in_order_then_handler():
    trace = []
    route = RouteDescriptor(
        "/things",
        HttpMethod.GET,
        _handler(trace),
        [RecordingGuard("a", trace), RecordingGuard("b", trace), RecordingGuard("c", trace)],
    )

    response = _run(route)

    assert trace == ["a", "b", "c", "handler"]
    assert response == PipelineResponse(200, {"ok": True})


def test_route_without_guards_runs_handler_once():
    trace = []
    route = RouteDescriptor("/things", HttpMethod.GET, _handler(trace))

    _run(route)

    assert trace == ["handler"]


def test_halt_short_circuits_remaining_guards_and_handler():
    trace = []
    halt = Halt(418, {"error": "teapot"})
    route = RouteDescriptor(
        "/things",
        HttpMethod.GET,
        _handler(trace),
        [
            RecordingGuard("a", trace),
            RecordingGuard("b", trace, result=halt),
            RecordingGuard("c", trace),
        ],
    )

    response = _run(route)

    assert trace == ["a", "b"]
    assert response.status_code == 418
    assert response.body == {"error": "teapot"}


def test_halt_from_domain_error_maps_status():
    trace = []
    route = RouteDescriptor(
        "/things",
        HttpMethod.GET,
        _handler(trace),
        [RecordingGuard("a", trace, result=Halt.from_error(AccessDeniedError("no")))],
    )

    response = _run(route)

    assert response.status_code == 403
    assert response.body["kind"] == "FORBIDDEN"
    assert "handler" not in trace


def test_guard_exception_becomes_generic_500():
    trace = []
    route = RouteDescriptor(
        "/things",
        HttpMethod.GET,
        _handler(trace),
        [
            RecordingGuard("a", trace, error=ConnectionError("store down at 10.0.0.3")),
            RecordingGuard("b", trace),
        ],
    )

    response = _run(route)

    assert trace == ["a"]
    assert response.status_code == 500
    assert response.body == {"error": "Internal server error", "kind": "INTERNAL_ERROR"}
    assert "10.0.0.3" not in str(response.body)


def test_handler_exception_becomes_generic_500():
    trace = []
    route = RouteDescriptor(
        "/things", HttpMethod.GET, _handler(trace, error=RuntimeError("boom"))
    )

    response = _run(route)

    assert trace == ["handler"]
    assert response.status_code == 500
    assert "boom" not in str(response.body)


def test_internal_domain_error_hides_its_message():
    trace = []
    route = RouteDescriptor(
        "/things",
        HttpMethod.GET,
        _handler(trace, error=InternalError("db password rejected")),
    )

    response = _run(route)

    assert response.status_code == 500
    assert "password" not in str(response.body)


def test_domain_error_from_handler_maps_status():
    trace = []
    route = RouteDescriptor(
        "/things", HttpMethod.GET, _handler(trace, error=AccessDeniedError("not yours"))
    )

    response = _run(route)

    assert response.status_code == 403
    assert response.body["error"] == "not yours"


@pytest.mark.parametrize("bad_result", [None, True, {"status": 200}])
def test_guard_returning_non_result_is_internal_error(bad_result):
    trace = []
    route = RouteDescriptor(
        "/things",
        HttpMethod.GET,
        _handler(trace),
        [RecordingGuard("a", trace, result=bad_result)],
    )

    response = _run(route)

    assert response.status_code == 500
    assert "handler" not in trace


def test_handler_returning_non_response_is_internal_error():
    async def handler(request, context):
        return {"ok": True}

    route = RouteDescriptor("/things", HttpMethod.GET, handler)

    assert _run(route).status_code == 500


def test_context_is_fresh_per_request():
    seen = []

    class StampGuard(Guard):
        async def check(self, request, context):
            seen.append(context.payload)
            context.payload = "stamped"
            return CONTINUE

    async def handler(request, context):
        return PipelineResponse(200, context.payload)

    route = RouteDescriptor("/things", HttpMethod.GET, handler, [StampGuard()])

    _run(route)
    _run(route)

    assert seen == [None, None]
