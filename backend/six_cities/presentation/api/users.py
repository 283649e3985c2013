"""
Users API - registration, login and the current session.

    POST /users/register  dto
    POST /users/login     dto
    GET  /users/login     auth
    POST /users/logout    -
"""

import logging

from six_cities.application.commands.users import (
    LoginUserCommand,
    LoginUserHandler,
    RegisterUserCommand,
    RegisterUserHandler,
)
from six_cities.application.dto import (
    CreateUserDto,
    LoggedUserResponse,
    LoginDto,
    UserResponse,
)
from six_cities.application.queries.users import (
    GetCurrentUserHandler,
    GetCurrentUserQuery,
)
from six_cities.domain.ports.services import SchemaValidator, TokenVerifier
from six_cities.presentation.api.base_controller import BaseController
from six_cities.presentation.guards import PrivateRouteGuard, ValidateDtoGuard
from six_cities.presentation.pipeline import (
    HttpMethod,
    PipelineRequest,
    PipelineResponse,
    RequestContext,
)

logger = logging.getLogger(__name__)


class UserController(BaseController):
    prefix = "/users"
    tags = ["users"]

    def __init__(
        self,
        token_verifier: TokenVerifier,
        schema_validator: SchemaValidator,
        register_user: RegisterUserHandler,
        login_user: LoginUserHandler,
        get_current_user: GetCurrentUserHandler,
    ):
        super().__init__()
        self._register_user = register_user
        self._login_user = login_user
        self._get_current_user = get_current_user

        logger.info("Register routes for UserController...")

        self.add_route(
            "/register",
            HttpMethod.POST,
            self.register,
            [ValidateDtoGuard(schema_validator, CreateUserDto)],
        )
        self.add_route(
            "/login",
            HttpMethod.POST,
            self.login,
            [ValidateDtoGuard(schema_validator, LoginDto)],
        )
        self.add_route(
            "/login",
            HttpMethod.GET,
            self.check_auth,
            [PrivateRouteGuard(token_verifier)],
        )
        self.add_route("/logout", HttpMethod.POST, self.logout)

    async def register(
        self, request: PipelineRequest, context: RequestContext
    ) -> PipelineResponse:
        user = await self._register_user.execute(RegisterUserCommand(dto=context.payload))
        return self.created(UserResponse.from_entity(user).to_json())

    async def login(
        self, request: PipelineRequest, context: RequestContext
    ) -> PipelineResponse:
        dto: LoginDto = context.payload
        result = await self._login_user.execute(
            LoginUserCommand(email=dto.email, password=dto.password)
        )
        return self.ok(
            LoggedUserResponse(email=result.user.email, token=result.token).to_json()
        )

    async def check_auth(
        self, request: PipelineRequest, context: RequestContext
    ) -> PipelineResponse:
        user = await self._get_current_user.execute(
            GetCurrentUserQuery(user_id=context.identity.id)
        )
        return self.ok(UserResponse.from_entity(user).to_json())

    async def logout(
        self, request: PipelineRequest, context: RequestContext
    ) -> PipelineResponse:
        # Tokens are stateless; the client drops its copy
        return self.no_content()
