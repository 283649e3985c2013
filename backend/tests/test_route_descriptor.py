"""
Route descriptor tests: guard chains that cannot work are rejected when
the route is declared.
"""

import pytest

from six_cities.infrastructure.persistence import (
    InMemoryOfferRepository,
    InMemoryStore,
)
from six_cities.infrastructure.auth import JwtTokenService
from six_cities.infrastructure.validation import PydanticSchemaValidator
from six_cities.application.dto import CreateOfferDto
from six_cities.presentation.guards import (
    CheckOwnerGuard,
    DocumentExistsGuard,
    PrivateRouteGuard,
    ValidateDtoGuard,
    ValidateObjectIdGuard,
)
from six_cities.presentation.pipeline import (
    HttpMethod,
    PipelineResponse,
    RouteConfigurationError,
    RouteDescriptor,
)


async def handler(request, context):
    return PipelineResponse(200)


@pytest.fixture()
def repository():
    return InMemoryOfferRepository(InMemoryStore())


@pytest.fixture()
def private():
    return PrivateRouteGuard(JwtTokenService("secret", "iss", "aud"))


def test_valid_chain_is_accepted(repository, private):
    route = RouteDescriptor(
        "/offers/{offer_id}",
        HttpMethod.PATCH,
        handler,
        [
            private,
            ValidateObjectIdGuard("offer_id"),
            ValidateDtoGuard(PydanticSchemaValidator(), CreateOfferDto),
            DocumentExistsGuard(repository, "Offer", "offer_id"),
            CheckOwnerGuard(repository, "Offer", "offer_id"),
        ],
    )

    assert len(route.guards) == 5
    assert route.name == "handler"
    assert str(route) == "PATCH /offers/{offer_id}"


def test_guards_are_frozen_into_a_tuple(private):
    guards = [private]
    route = RouteDescriptor("/offers", HttpMethod.POST, handler, guards)
    guards.append(private)

    assert route.guards == (private,)


def test_owner_guard_without_authentication_is_rejected(repository):
    with pytest.raises(RouteConfigurationError, match="identity"):
        RouteDescriptor(
            "/offers/{offer_id}",
            HttpMethod.DELETE,
            handler,
            [
                ValidateObjectIdGuard("offer_id"),
                DocumentExistsGuard(repository, "Offer", "offer_id"),
                CheckOwnerGuard(repository, "Offer", "offer_id"),
            ],
        )


def test_owner_guard_before_existence_guard_is_rejected(repository, private):
    with pytest.raises(RouteConfigurationError, match="resource"):
        RouteDescriptor(
            "/offers/{offer_id}",
            HttpMethod.DELETE,
            handler,
            [
                private,
                ValidateObjectIdGuard("offer_id"),
                CheckOwnerGuard(repository, "Offer", "offer_id"),
                DocumentExistsGuard(repository, "Offer", "offer_id"),
            ],
        )


def test_existence_guard_requires_id_validation(repository):
    with pytest.raises(RouteConfigurationError, match="valid_id:offer_id"):
        RouteDescriptor(
            "/offers/{offer_id}",
            HttpMethod.GET,
            handler,
            [DocumentExistsGuard(repository, "Offer", "offer_id")],
        )


def test_validation_after_business_guard_is_rejected(repository, private):
    with pytest.raises(RouteConfigurationError, match="validates input after"):
        RouteDescriptor(
            "/offers/{offer_id}",
            HttpMethod.PATCH,
            handler,
            [
                private,
                ValidateObjectIdGuard("offer_id"),
                DocumentExistsGuard(repository, "Offer", "offer_id"),
                ValidateDtoGuard(PydanticSchemaValidator(), CreateOfferDto),
            ],
        )


def test_guard_reading_undeclared_path_param_is_rejected():
    with pytest.raises(RouteConfigurationError, match="path parameters"):
        RouteDescriptor(
            "/offers/{id}",
            HttpMethod.GET,
            handler,
            [ValidateObjectIdGuard("offer_id")],
        )


def test_non_guard_in_chain_is_rejected():
    with pytest.raises(RouteConfigurationError, match="is not a Guard"):
        RouteDescriptor("/offers", HttpMethod.GET, handler, [object()])
