from six_cities.domain.exceptions import DomainValidationError, FieldViolation
from six_cities.domain.value_objects.entity_id import is_valid_entity_id
from six_cities.presentation.pipeline.context import PipelineRequest, RequestContext
from six_cities.presentation.pipeline.guard import Guard, GuardPhase, valid_id
from six_cities.presentation.pipeline.results import CONTINUE, GuardResult, Halt


class ValidateObjectIdGuard(Guard):
    """Rejects a path parameter that is not a well-formed entity id."""

    phase = GuardPhase.VALIDATION

    def __init__(self, param: str):
        self._param = param

    @property
    def provides(self) -> frozenset[str]:
        return frozenset({valid_id(self._param)})

    @property
    def path_params(self) -> frozenset[str]:
        return frozenset({self._param})

    async def check(
        self, request: PipelineRequest, context: RequestContext
    ) -> GuardResult:
        value = request.path_params.get(self._param, "")
        if is_valid_entity_id(value):
            return CONTINUE

        return Halt.from_error(
            DomainValidationError(
                f"{value} is not a valid id",
                [FieldViolation(field=self._param, message="must be a valid id")],
            )
        )
