"""
Schema validation backed by pydantic models.

Field paths use the wire (camelCase) names, joined with dots, e.g.
``coordinates.latitude`` or ``imagePaths.2``.
"""

from typing import Any

from pydantic import BaseModel, ValidationError

from six_cities.domain.exceptions import FieldViolation
from six_cities.domain.ports.services import SchemaValidator


class PydanticSchemaValidator(SchemaValidator):
    def validate(self, schema: type[BaseModel], body: Any) -> list[FieldViolation]:
        try:
            schema.model_validate(body)
        except ValidationError as exc:
            return [
                FieldViolation(
                    field=".".join(str(part) for part in error["loc"]) or "body",
                    message=error["msg"],
                )
                for error in exc.errors()
            ]
        return []

    def parse(self, schema: type[BaseModel], body: Any) -> BaseModel:
        return schema.model_validate(body)
