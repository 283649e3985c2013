"""
Schema Validator port - field-level body validation.
"""

from abc import ABC, abstractmethod
from typing import Any

from six_cities.domain.exceptions.validation_error import FieldViolation


class SchemaValidator(ABC):
    @abstractmethod
    def validate(self, schema: Any, body: Any) -> list[FieldViolation]:
        """Empty list means the body conforms."""
        ...

    @abstractmethod
    def parse(self, schema: Any, body: Any) -> Any:
        """Build the schema instance from a body that already validated."""
        ...
