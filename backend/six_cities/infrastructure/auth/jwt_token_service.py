"""
JWT token service - issues and verifies HS256 bearer tokens.

Claims:
- sub: user id
- email, type: user email and user type
- exp, iat, iss, aud: all required on verification
"""

import logging
from datetime import datetime, timedelta, timezone

import jwt

from six_cities.domain.entities.user import User
from six_cities.domain.exceptions import InvalidCredentialError
from six_cities.domain.ports.services import TokenIssuer, TokenVerifier
from six_cities.domain.value_objects.identity import Identity
from six_cities.domain.value_objects.user_type import UserType

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


class JwtTokenService(TokenVerifier, TokenIssuer):
    def __init__(
        self,
        secret: str,
        issuer: str,
        audience: str,
        expires_in: timedelta = timedelta(days=1),
    ):
        self._secret = secret
        self._issuer = issuer
        self._audience = audience
        self._expires_in = expires_in

    def issue(self, user: User) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": user.id,
            "email": user.email,
            "type": user.type.value,
            "iat": now,
            "exp": now + self._expires_in,
            "iss": self._issuer,
            "aud": self._audience,
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, credential: str) -> Identity:
        if not credential:
            raise InvalidCredentialError("Missing token")

        try:
            claims = jwt.decode(
                credential,
                self._secret,
                algorithms=[ALGORITHM],
                audience=self._audience,
                issuer=self._issuer,
                options={"require": ["exp", "iat", "aud", "iss", "sub"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise InvalidCredentialError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidCredentialError(f"Invalid token: {str(e)}") from e

        try:
            role = UserType(claims.get("type", UserType.REGULAR.value))
            return Identity(id=claims["sub"], role=role, email=claims.get("email"))
        except ValueError as e:
            raise InvalidCredentialError("Invalid token claims") from e
