"""
Guard tests, run through the executor against in-memory repositories.
"""

import asyncio
from datetime import timedelta

import pytest

from conftest import TestConfig, make_token, seed_offer, seed_user
from six_cities.application.dto import CreateCommentDto
from six_cities.domain.exceptions import InvalidCredentialError
from six_cities.domain.value_objects import City
from six_cities.infrastructure.auth import JwtTokenService
from six_cities.infrastructure.persistence import (
    InMemoryOfferRepository,
    InMemoryStore,
)
from six_cities.infrastructure.validation import PydanticSchemaValidator
from six_cities.presentation.guards import (
    CheckOwnerGuard,
    DocumentExistsGuard,
    IdentifyCallerGuard,
    PrivateRouteGuard,
    ValidateChoiceGuard,
    ValidateDtoGuard,
    ValidateObjectIdGuard,
)
from six_cities.presentation.guards.private_route import bearer_token
from six_cities.presentation.pipeline import (
    HttpMethod,
    PipelineExecutor,
    PipelineRequest,
    PipelineResponse,
    RouteDescriptor,
)

MISSING_ID = "0b6b3c9e-1b1f-4a7e-9d52-1f5a2c7b0e11"


@pytest.fixture()
def store():
    return InMemoryStore()


@pytest.fixture()
def repository(store):
    return InMemoryOfferRepository(store)


@pytest.fixture()
def verifier():
    return JwtTokenService(
        TestConfig.JWT_SECRET,
        TestConfig.JWT_ISSUER,
        TestConfig.JWT_AUDIENCE,
        expires_in=timedelta(minutes=5),
    )


class CountingOwnerGuard(CheckOwnerGuard):
    calls = 0

    async def check(self, request, context):
        type(self).calls += 1
        return await super().check(request, context)


async def echo_handler(request, context):
    body = {
        "identity": context.identity.id if context.identity else None,
        "resource": getattr(context.resource, "id", None),
    }
    return PipelineResponse(200, body)


def _execute(route, path_params=None, headers=None, body=None):
    request = PipelineRequest(
        method=route.method.value,
        path=route.path,
        path_params=path_params or {},
        headers=headers or {},
        body=body,
    )
    return asyncio.run(PipelineExecutor().execute(route, request))


# ==================== AUTHENTICATION ====================


@pytest.mark.parametrize(
    "authorization",
    [
        None,
        "",
        "Token abc",
        "Bearer ",
        "Bearer not-a-jwt",
    ],
)
def test_private_route_rejects_bad_credentials_uniformly(verifier, authorization):
    route = RouteDescriptor(
        "/private", HttpMethod.GET, echo_handler, [PrivateRouteGuard(verifier)]
    )
    headers = {} if authorization is None else {"Authorization": authorization}

    response = _execute(route, headers=headers)

    assert response.status_code == 401
    assert response.body == {"error": "Unauthorized", "kind": "UNAUTHORIZED"}


def test_expired_and_forged_tokens_get_the_same_401(verifier, store):
    user = seed_user(store)
    route = RouteDescriptor(
        "/private", HttpMethod.GET, echo_handler, [PrivateRouteGuard(verifier)]
    )
    expired = make_token(user, expires_in=-60)
    forged = make_token(user, secret="someone-else")
    wrong_audience = make_token(user, audience="other-app")

    bodies = [
        _execute(route, headers={"Authorization": f"Bearer {token}"}).body
        for token in (expired, forged, wrong_audience)
    ]

    assert bodies[0] == bodies[1] == bodies[2]


def test_private_route_sets_identity(verifier, store):
    user = seed_user(store)
    route = RouteDescriptor(
        "/private", HttpMethod.GET, echo_handler, [PrivateRouteGuard(verifier)]
    )

    response = _execute(route, headers={"authorization": f"Bearer {make_token(user)}"})

    assert response.status_code == 200
    assert response.body["identity"] == user.id


def test_identify_caller_allows_anonymous(verifier):
    route = RouteDescriptor(
        "/public", HttpMethod.GET, echo_handler, [IdentifyCallerGuard(verifier)]
    )

    response = _execute(route)

    assert response.status_code == 200
    assert response.body["identity"] is None


def test_identify_caller_rejects_invalid_token(verifier):
    route = RouteDescriptor(
        "/public", HttpMethod.GET, echo_handler, [IdentifyCallerGuard(verifier)]
    )

    response = _execute(route, headers={"Authorization": "Bearer garbage"})

    assert response.status_code == 401


def test_bearer_token_parsing():
    assert bearer_token("Bearer abc.def") == "abc.def"
    with pytest.raises(InvalidCredentialError):
        bearer_token("bearer abc")


# ==================== VALIDATION ====================


@pytest.mark.parametrize(
    "raw_id",
    [
        "42",
        MISSING_ID.replace("-", ""),
        "{" + MISSING_ID + "}",
        "urn:uuid:" + MISSING_ID,
        MISSING_ID.upper(),
    ],
)
def test_invalid_object_id_is_400(raw_id):
    route = RouteDescriptor(
        "/offers/{offer_id}",
        HttpMethod.GET,
        echo_handler,
        [ValidateObjectIdGuard("offer_id")],
    )

    response = _execute(route, path_params={"offer_id": raw_id})

    assert response.status_code == 400
    assert response.body["kind"] == "VALIDATION_ERROR"
    assert response.body["details"][0]["field"] == "offer_id"


def test_canonical_object_id_passes():
    route = RouteDescriptor(
        "/offers/{offer_id}",
        HttpMethod.GET,
        echo_handler,
        [ValidateObjectIdGuard("offer_id")],
    )

    assert _execute(route, path_params={"offer_id": MISSING_ID}).status_code == 200


def test_choice_guard_accepts_enum_values_only():
    route = RouteDescriptor(
        "/offers/premium/{city}",
        HttpMethod.GET,
        echo_handler,
        [ValidateChoiceGuard("city", City)],
    )

    assert _execute(route, path_params={"city": "Paris"}).status_code == 200
    assert _execute(route, path_params={"city": "Berlin"}).status_code == 400


def test_dto_guard_reports_field_violations():
    route = RouteDescriptor(
        "/comments",
        HttpMethod.POST,
        echo_handler,
        [ValidateDtoGuard(PydanticSchemaValidator(), CreateCommentDto)],
    )

    response = _execute(route, body={"text": "ok", "rating": 9})

    assert response.status_code == 400
    fields = {violation["field"] for violation in response.body["details"]}
    assert fields == {"text", "rating"}


def test_dto_guard_rejects_non_object_body():
    route = RouteDescriptor(
        "/comments",
        HttpMethod.POST,
        echo_handler,
        [ValidateDtoGuard(PydanticSchemaValidator(), CreateCommentDto)],
    )

    assert _execute(route, body="not json").status_code == 400
    assert _execute(route, body=None).status_code == 400


def test_dto_guard_leaves_parsed_payload():
    captured = {}

    async def handler(request, context):
        captured["payload"] = context.payload
        return PipelineResponse(201)

    route = RouteDescriptor(
        "/comments",
        HttpMethod.POST,
        handler,
        [ValidateDtoGuard(PydanticSchemaValidator(), CreateCommentDto)],
    )

    response = _execute(route, body={"text": "Great place", "rating": 4})

    assert response.status_code == 201
    assert isinstance(captured["payload"], CreateCommentDto)
    assert captured["payload"].rating == 4


# ==================== EXISTENCE / OWNERSHIP ====================


def _owned_route(verifier, repository):
    CountingOwnerGuard.calls = 0
    return RouteDescriptor(
        "/offers/{offer_id}",
        HttpMethod.DELETE,
        echo_handler,
        [
            PrivateRouteGuard(verifier),
            ValidateObjectIdGuard("offer_id"),
            DocumentExistsGuard(repository, "Offer", "offer_id"),
            CountingOwnerGuard(repository, "Offer", "offer_id"),
        ],
    )


def test_missing_document_is_404_and_owner_guard_never_runs(verifier, repository, store):
    user = seed_user(store)
    route = _owned_route(verifier, repository)

    response = _execute(
        route,
        path_params={"offer_id": MISSING_ID},
        headers={"Authorization": f"Bearer {make_token(user)}"},
    )

    assert response.status_code == 404
    assert response.body["details"] == {"resource": "Offer", "id": MISSING_ID}
    assert CountingOwnerGuard.calls == 0


def test_non_owner_is_403(verifier, repository, store):
    owner = seed_user(store, "host@example.com")
    intruder = seed_user(store, "intruder@example.com")
    offer = seed_offer(store, owner)
    route = _owned_route(verifier, repository)

    response = _execute(
        route,
        path_params={"offer_id": offer.id},
        headers={"Authorization": f"Bearer {make_token(intruder)}"},
    )

    assert response.status_code == 403
    assert response.body["kind"] == "FORBIDDEN"
    assert CountingOwnerGuard.calls == 1


def test_owner_passes_and_resource_is_cached(verifier, repository, store):
    owner = seed_user(store)
    offer = seed_offer(store, owner)
    route = _owned_route(verifier, repository)

    response = _execute(
        route,
        path_params={"offer_id": offer.id},
        headers={"Authorization": f"Bearer {make_token(owner)}"},
    )

    assert response.status_code == 200
    assert response.body == {"identity": owner.id, "resource": offer.id}


def test_existence_without_cache_uses_exists(repository, store):
    owner = seed_user(store)
    offer = seed_offer(store, owner)
    route = RouteDescriptor(
        "/offers/{offer_id}",
        HttpMethod.GET,
        echo_handler,
        [
            ValidateObjectIdGuard("offer_id"),
            DocumentExistsGuard(repository, "Offer", "offer_id", cache_resource=False),
        ],
    )

    response = _execute(route, path_params={"offer_id": offer.id})

    assert response.status_code == 200
    assert response.body["resource"] is None
