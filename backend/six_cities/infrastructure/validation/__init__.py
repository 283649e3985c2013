from six_cities.infrastructure.validation.pydantic_validator import PydanticSchemaValidator

__all__ = ["PydanticSchemaValidator"]
