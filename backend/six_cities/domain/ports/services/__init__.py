from six_cities.domain.ports.services.token_verifier import TokenIssuer, TokenVerifier
from six_cities.domain.ports.services.schema_validator import SchemaValidator
from six_cities.domain.ports.services.password_hasher import PasswordHasher

__all__ = ["TokenIssuer", "TokenVerifier", "SchemaValidator", "PasswordHasher"]
