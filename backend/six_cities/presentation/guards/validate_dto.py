from typing import Any

from six_cities.domain.exceptions import DomainValidationError
from six_cities.domain.ports.services import SchemaValidator
from six_cities.presentation.pipeline.context import PipelineRequest, RequestContext
from six_cities.presentation.pipeline.guard import PAYLOAD, Guard, GuardPhase
from six_cities.presentation.pipeline.results import CONTINUE, GuardResult, Halt


class ValidateDtoGuard(Guard):
    """
    Validates the request body against a schema.

    On success the parsed DTO is stored as ``context.payload``; on failure
    the response lists every violated field.
    """

    phase = GuardPhase.VALIDATION

    def __init__(self, validator: SchemaValidator, schema: Any):
        self._validator = validator
        self._schema = schema

    @property
    def name(self) -> str:
        return f"ValidateDtoGuard({getattr(self._schema, '__name__', self._schema)})"

    @property
    def provides(self) -> frozenset[str]:
        return frozenset({PAYLOAD})

    async def check(
        self, request: PipelineRequest, context: RequestContext
    ) -> GuardResult:
        violations = self._validator.validate(self._schema, request.body)
        if violations:
            return Halt.from_error(
                DomainValidationError("Validation failed", violations)
            )

        context.payload = self._validator.parse(self._schema, request.body)
        return CONTINUE
