from six_cities.domain.exceptions import (
    AccessDeniedError,
    EntityNotFoundError,
    InternalError,
)
from six_cities.domain.ports.repositories import DocumentRepository
from six_cities.presentation.pipeline.context import PipelineRequest, RequestContext
from six_cities.presentation.pipeline.guard import (
    IDENTITY,
    RESOURCE,
    Guard,
    GuardPhase,
)
from six_cities.presentation.pipeline.results import CONTINUE, GuardResult, Halt


class CheckOwnerGuard(Guard):
    """
    Lets only the owner of the target document through (403 otherwise).

    Must follow PrivateRouteGuard and DocumentExistsGuard; route
    descriptors refuse any other order. The document cached by the
    existence guard is reused, or loaded here when caching was off.
    """

    phase = GuardPhase.BUSINESS

    def __init__(self, repository: DocumentRepository, entity_name: str, param: str):
        self._repository = repository
        self._entity_name = entity_name
        self._param = param

    @property
    def requires(self) -> frozenset[str]:
        return frozenset({IDENTITY, RESOURCE})

    @property
    def path_params(self) -> frozenset[str]:
        return frozenset({self._param})

    async def check(
        self, request: PipelineRequest, context: RequestContext
    ) -> GuardResult:
        if context.identity is None:
            raise InternalError(f"{self.name} ran without an identity")

        document_id = request.path_params[self._param]
        document = context.resource
        if document is None or getattr(document, "id", None) != document_id:
            document = await self._repository.get_by_id(document_id)
        if document is None:
            # Removed between the existence check and now
            return Halt.from_error(
                EntityNotFoundError.for_resource(self._entity_name, document_id)
            )

        if document.owner_id != context.identity.id:
            return Halt.from_error(
                AccessDeniedError(
                    f"{self._entity_name} {document_id} belongs to another user",
                    details={"resource": self._entity_name, "id": document_id},
                )
            )
        return CONTINUE
