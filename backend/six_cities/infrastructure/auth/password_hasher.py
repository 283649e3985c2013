"""Salted HMAC-SHA256 password digests."""

import hashlib
import hmac

from six_cities.domain.ports.services import PasswordHasher


class Sha256PasswordHasher(PasswordHasher):
    def __init__(self, salt: str):
        self._salt = salt.encode("utf-8")

    def hash(self, password: str) -> str:
        return hmac.new(self._salt, password.encode("utf-8"), hashlib.sha256).hexdigest()

    def verify(self, password: str, password_hash: str) -> bool:
        return hmac.compare_digest(self.hash(password), password_hash)
