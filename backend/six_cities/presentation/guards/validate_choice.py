from enum import Enum
from typing import Iterable, Union

from six_cities.domain.exceptions import DomainValidationError, FieldViolation
from six_cities.presentation.pipeline.context import PipelineRequest, RequestContext
from six_cities.presentation.pipeline.guard import Guard, GuardPhase
from six_cities.presentation.pipeline.results import CONTINUE, GuardResult, Halt


class ValidateChoiceGuard(Guard):
    """Rejects a path parameter outside a fixed set of values."""

    phase = GuardPhase.VALIDATION

    def __init__(self, param: str, choices: Union[type[Enum], Iterable[str]]):
        self._param = param
        if isinstance(choices, type) and issubclass(choices, Enum):
            self._choices = tuple(str(member.value) for member in choices)
        else:
            self._choices = tuple(choices)

    @property
    def path_params(self) -> frozenset[str]:
        return frozenset({self._param})

    async def check(
        self, request: PipelineRequest, context: RequestContext
    ) -> GuardResult:
        value = request.path_params.get(self._param)
        if value in self._choices:
            return CONTINUE

        return Halt.from_error(
            DomainValidationError(
                f"{value} is not a valid {self._param}",
                [
                    FieldViolation(
                        field=self._param,
                        message=f"must be one of: {', '.join(self._choices)}",
                    )
                ],
            )
        )
