from six_cities.infrastructure.auth.jwt_token_service import JwtTokenService
from six_cities.infrastructure.auth.password_hasher import Sha256PasswordHasher

__all__ = ["JwtTokenService", "Sha256PasswordHasher"]
