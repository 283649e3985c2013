import logging

from six_cities.domain.exceptions import EntityNotFoundError
from six_cities.domain.ports.repositories import DocumentRepository
from six_cities.presentation.pipeline.context import PipelineRequest, RequestContext
from six_cities.presentation.pipeline.guard import (
    RESOURCE,
    Guard,
    GuardPhase,
    valid_id,
)
from six_cities.presentation.pipeline.results import CONTINUE, GuardResult, Halt

logger = logging.getLogger(__name__)


class DocumentExistsGuard(Guard):
    """
    Halts with 404 when the id in ``param`` does not resolve.

    With ``cache_resource`` the document is fetched once and left in the
    context for the ownership guard and the handler; otherwise only
    ``exists`` is asked. Deleted and never-created documents look the same.
    """

    phase = GuardPhase.BUSINESS

    def __init__(
        self,
        repository: DocumentRepository,
        entity_name: str,
        param: str,
        cache_resource: bool = True,
    ):
        self._repository = repository
        self._entity_name = entity_name
        self._param = param
        self._cache_resource = cache_resource

    @property
    def name(self) -> str:
        return f"DocumentExistsGuard({self._entity_name})"

    @property
    def requires(self) -> frozenset[str]:
        return frozenset({valid_id(self._param)})

    @property
    def provides(self) -> frozenset[str]:
        return frozenset({RESOURCE})

    @property
    def path_params(self) -> frozenset[str]:
        return frozenset({self._param})

    async def check(
        self, request: PipelineRequest, context: RequestContext
    ) -> GuardResult:
        document_id = request.path_params[self._param]

        if self._cache_resource:
            document = await self._repository.get_by_id(document_id)
            found = document is not None
            if found:
                context.resource = document
                context.resource_kind = self._entity_name
        else:
            found = await self._repository.exists(document_id)

        if not found:
            logger.debug(f"{self._entity_name} {document_id} not found")
            return Halt.from_error(
                EntityNotFoundError.for_resource(self._entity_name, document_id)
            )
        return CONTINUE
