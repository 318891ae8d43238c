from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from chat_backend.application.services.token_issuer import JwtTokenIssuer
from chat_backend.domain.users.exceptions import InvalidTokenError
from chat_backend.shared.errors import SigningError

SECRET = "unit-test-secret-0123456789abcdef0123456789"


class FakeClock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(datetime(2030, 1, 1, 12, 0, tzinfo=UTC))


@pytest.fixture()
def issuer(clock: FakeClock) -> JwtTokenIssuer:
    return JwtTokenIssuer(secret=SECRET, lifetime=timedelta(hours=1), clock=clock)


def test_issued_token_decodes_to_subject_and_expiry(
    issuer: JwtTokenIssuer, clock: FakeClock
) -> None:
    token = issuer.issue("alice")

    claims = issuer.decode(token)

    assert claims.subject == "alice"
    assert claims.issued_at == clock.now
    assert claims.expires_at == clock.now + timedelta(hours=1)
    assert claims.expires_at > claims.issued_at


def test_token_is_a_standard_hs256_jwt(issuer: JwtTokenIssuer) -> None:
    token = issuer.issue("alice")

    header = jwt.get_unverified_header(token)
    payload = jwt.decode(token, SECRET, algorithms=["HS256"], options={"verify_exp": False})

    assert header["alg"] == "HS256"
    assert payload["sub"] == "alice"
    assert payload["exp"] - payload["iat"] == 3600


def test_token_valid_until_lifetime_elapses(issuer: JwtTokenIssuer, clock: FakeClock) -> None:
    token = issuer.issue("alice")

    clock.advance(timedelta(minutes=59, seconds=59))
    assert issuer.decode(token).subject == "alice"

    clock.advance(timedelta(seconds=1))
    with pytest.raises(InvalidTokenError) as excinfo:
        issuer.decode(token)
    assert excinfo.value.context == {"reason": "expired"}


def test_tampered_token_is_rejected(issuer: JwtTokenIssuer) -> None:
    header, payload, signature = issuer.issue("alice").split(".")
    forged_signature = ("A" if signature[0] != "A" else "B") + signature[1:]

    with pytest.raises(InvalidTokenError):
        issuer.decode(".".join([header, payload, forged_signature]))


def test_token_signed_with_other_key_is_rejected(clock: FakeClock) -> None:
    other = JwtTokenIssuer(
        secret="another-secret-0123456789abcdef0123456789",
        lifetime=timedelta(hours=1),
        clock=clock,
    )
    issuer = JwtTokenIssuer(secret=SECRET, lifetime=timedelta(hours=1), clock=clock)

    with pytest.raises(InvalidTokenError):
        issuer.decode(other.issue("alice"))


def test_garbage_token_is_rejected(issuer: JwtTokenIssuer) -> None:
    with pytest.raises(InvalidTokenError):
        issuer.decode("not.a.token")


@pytest.mark.parametrize("secret", ["", None])
def test_missing_signing_key_raises_signing_error(clock: FakeClock, secret: str | None) -> None:
    issuer = JwtTokenIssuer(secret=secret, lifetime=timedelta(hours=1), clock=clock)

    with pytest.raises(SigningError) as excinfo:
        issuer.issue("alice")

    assert excinfo.value.code == "signing_failed"


def test_unsupported_algorithm_raises_signing_error(clock: FakeClock) -> None:
    issuer = JwtTokenIssuer(
        secret=SECRET, lifetime=timedelta(hours=1), algorithm="HS999", clock=clock
    )

    with pytest.raises(SigningError):
        issuer.issue("alice")


def test_non_positive_lifetime_is_rejected() -> None:
    with pytest.raises(ValueError):
        JwtTokenIssuer(secret=SECRET, lifetime=timedelta(0))
