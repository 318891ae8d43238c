"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from chat_backend.domain.users.repositories import PasswordHasher
from chat_backend.shared.errors import HashingError


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted one-way hashes in werkzeug's ``method$salt$digest`` format.

    Verification compares digests with ``hmac.compare_digest``, so the time
    taken does not depend on where a mismatch occurs.
    """

    def __init__(self, method: str = "scrypt", salt_length: int = 16) -> None:
        self._method = method
        self._salt_length = salt_length

    def hash(self, password: str) -> str:
        try:
            return str(
                generate_password_hash(
                    password, method=self._method, salt_length=self._salt_length
                )
            )
        except (ValueError, OSError, MemoryError) as exc:
            raise HashingError() from exc

    def verify(self, password: str, hashed: str) -> bool:
        if not isinstance(password, str) or not isinstance(hashed, str):
            return False
        try:
            return bool(check_password_hash(hashed, password))
        except (ValueError, TypeError):
            # unknown method or malformed parameters in the stored hash
            return False
