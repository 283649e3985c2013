from six_cities.presentation.guards.private_route import (
    IdentifyCallerGuard,
    PrivateRouteGuard,
)
from six_cities.presentation.guards.validate_object_id import ValidateObjectIdGuard
from six_cities.presentation.guards.validate_choice import ValidateChoiceGuard
from six_cities.presentation.guards.validate_dto import ValidateDtoGuard
from six_cities.presentation.guards.document_exists import DocumentExistsGuard
from six_cities.presentation.guards.check_owner import CheckOwnerGuard

__all__ = [
    "IdentifyCallerGuard",
    "PrivateRouteGuard",
    "ValidateObjectIdGuard",
    "ValidateChoiceGuard",
    "ValidateDtoGuard",
    "DocumentExistsGuard",
    "CheckOwnerGuard",
]
