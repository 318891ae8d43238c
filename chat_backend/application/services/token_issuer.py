"""Stateless session tokens signed as JWTs."""

from __future__ import annotations

import math
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from chat_backend.domain.users.entities import TokenClaims
from chat_backend.domain.users.exceptions import InvalidTokenError
from chat_backend.domain.users.repositories import TokenIssuer
from chat_backend.shared.errors import SigningError


def utc_now() -> datetime:
    return datetime.now(UTC)


class JwtTokenIssuer(TokenIssuer):
    """Issues ``sub``/``iat``/``exp`` tokens with a fixed lifetime.

    There is no server-side session table, so a token stays valid until it
    expires. The injected ``clock`` is used both when issuing and when
    checking expiry in :meth:`decode`.
    """

    def __init__(
        self,
        *,
        secret: str | None,
        lifetime: timedelta,
        algorithm: str = "HS256",
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        if lifetime <= timedelta(0):
            raise ValueError("token lifetime must be positive")
        self._secret = secret
        self._lifetime = lifetime
        self._algorithm = algorithm
        self._clock = clock

    @property
    def lifetime(self) -> timedelta:
        return self._lifetime

    def issue(self, subject: str) -> str:
        if not self._secret:
            raise SigningError()

        issued_at = int(self._clock().timestamp())
        payload = {
            "sub": subject,
            "iat": issued_at,
            "exp": issued_at + math.ceil(self._lifetime.total_seconds()),
        }
        try:
            return jwt.encode(payload, self._secret, algorithm=self._algorithm)
        except (jwt.PyJWTError, NotImplementedError, TypeError, ValueError) as exc:
            raise SigningError() from exc

    def decode(self, token: str) -> TokenClaims:
        if not self._secret:
            raise SigningError()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={
                    "require": ["sub", "iat", "exp"],
                    # expiry is checked below against the injected clock
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
        except jwt.PyJWTError as exc:
            raise InvalidTokenError(context={"reason": type(exc).__name__}) from exc

        subject = payload["sub"]
        try:
            issued_at = datetime.fromtimestamp(int(payload["iat"]), UTC)
            expires_at = datetime.fromtimestamp(int(payload["exp"]), UTC)
        except (TypeError, ValueError, OverflowError) as exc:
            raise InvalidTokenError(context={"reason": "bad_timestamp"}) from exc

        if not isinstance(subject, str) or not subject:
            raise InvalidTokenError(context={"reason": "bad_subject"})
        if self._clock() >= expires_at:
            raise InvalidTokenError(context={"reason": "expired"})

        return TokenClaims(subject=subject, issued_at=issued_at, expires_at=expires_at)
