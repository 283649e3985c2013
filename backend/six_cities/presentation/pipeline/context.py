"""
Request-scoped values that flow through a pipeline.

PipelineRequest is the framework-neutral view of the inbound request.
RequestContext is created empty for every request; guards fill it in and
later guards and the handler read it. It is dropped once the response is
produced.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from starlette.requests import Request

from six_cities.domain.value_objects.identity import Identity


@dataclass(frozen=True)
class PipelineRequest:
    method: str
    path: str
    path_params: Mapping[str, str] = field(default_factory=dict)
    query_params: Mapping[str, str] = field(default_factory=dict)
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Any = None

    def __post_init__(self):
        # Header lookups are case-insensitive
        object.__setattr__(
            self, "headers", {k.lower(): v for k, v in self.headers.items()}
        )

    def header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.headers.get(name.lower(), default)

    @classmethod
    async def from_starlette(cls, request: Request) -> "PipelineRequest":
        body: Any = None
        raw = await request.body()
        if raw:
            try:
                body = json.loads(raw)
            except ValueError:
                # Left as text so body validation reports it
                body = raw.decode("utf-8", errors="replace")

        return cls(
            method=request.method,
            path=request.url.path,
            path_params=dict(request.path_params),
            query_params=dict(request.query_params),
            headers=dict(request.headers),
            body=body,
        )


@dataclass
class RequestContext:
    identity: Optional[Identity] = None
    resource: Optional[Any] = None
    resource_kind: Optional[str] = None
    payload: Optional[Any] = None
