"""
Authentication guards.

PrivateRouteGuard requires a valid bearer token and puts the caller's
Identity in the context. A missing header, a malformed header, an expired
token and a bad signature all produce the same 401; the reason is only
logged.

IdentifyCallerGuard is for public routes that personalize their answer:
no header means an anonymous caller, a header that fails verification is
still a 401.
"""

import logging
from typing import Optional

from six_cities.domain.exceptions import InvalidCredentialError, UnauthorizedError
from six_cities.domain.ports.services import TokenVerifier
from six_cities.domain.value_objects.identity import Identity
from six_cities.presentation.pipeline.context import PipelineRequest, RequestContext
from six_cities.presentation.pipeline.guard import IDENTITY, Guard, GuardPhase
from six_cities.presentation.pipeline.results import CONTINUE, GuardResult, Halt

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def bearer_token(authorization: Optional[str]) -> str:
    if not authorization:
        raise InvalidCredentialError("Missing Authorization header")
    if not authorization.startswith(BEARER_PREFIX):
        raise InvalidCredentialError("Authorization header is not a Bearer token")

    token = authorization.split(" ", 1)[1].strip()
    if not token:
        raise InvalidCredentialError("Empty Bearer token")
    return token


def _authenticate(verifier: TokenVerifier, authorization: Optional[str]) -> Identity:
    return verifier.verify(bearer_token(authorization))


class PrivateRouteGuard(Guard):
    phase = GuardPhase.AUTHENTICATION

    def __init__(self, token_verifier: TokenVerifier):
        self._token_verifier = token_verifier

    @property
    def provides(self) -> frozenset[str]:
        return frozenset({IDENTITY})

    async def check(
        self, request: PipelineRequest, context: RequestContext
    ) -> GuardResult:
        try:
            context.identity = _authenticate(
                self._token_verifier, request.header("Authorization")
            )
        except InvalidCredentialError as e:
            logger.debug(f"Authentication failed for {request.path}: {e.message}")
            return Halt.from_error(UnauthorizedError())
        return CONTINUE


class IdentifyCallerGuard(Guard):
    phase = GuardPhase.AUTHENTICATION

    def __init__(self, token_verifier: TokenVerifier):
        self._token_verifier = token_verifier

    async def check(
        self, request: PipelineRequest, context: RequestContext
    ) -> GuardResult:
        authorization = request.header("Authorization")
        if authorization is None:
            return CONTINUE

        try:
            context.identity = _authenticate(self._token_verifier, authorization)
        except InvalidCredentialError as e:
            logger.debug(f"Authentication failed for {request.path}: {e.message}")
            return Halt.from_error(UnauthorizedError())
        return CONTINUE
