from __future__ import annotations

from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from chat_backend.application.use_cases.users.login_user import LoginUserUseCase
from chat_backend.application.use_cases.users.register_user import RegisterUserUseCase
from chat_backend.domain.users.entities import Credential
from chat_backend.domain.users.exceptions import InvalidCredentialsError, UserAlreadyExistsError
from chat_backend.interfaces.http.controllers.auth_controller import AuthController
from chat_backend.shared.errors import CredentialStoreError, HashingError, SigningError
from chat_backend.shared.errors import http as error_http
from chat_backend.shared.middleware.error_handler import configure_error_handling


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    return app


def _mount(
    app: Flask,
    *,
    register: object | None = None,
    login: object | None = None,
) -> None:
    controller = AuthController(
        register_use_case=cast(RegisterUserUseCase, register or MagicMock()),
        login_use_case=cast(LoginUserUseCase, login or MagicMock()),
    )
    app.register_blueprint(controller.as_blueprint())


def test_register_endpoint_returns_created(flask_app: Flask) -> None:
    register_called: dict[str, tuple[str, str]] = {}

    class StubRegister:
        def execute(self, username: str, password: str) -> Credential:
            register_called["args"] = (username, password)
            return Credential(username=username, password_hash="hash")

    _mount(flask_app, register=StubRegister())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/register", json={"username": "alice", "password": "p@ss"}
        )

    assert response.status_code == 201
    assert response.get_json() == {"message": "User registered successfully!"}
    assert register_called["args"] == ("alice", "p@ss")
    assert "hash" not in response.get_data(as_text=True)


def test_register_conflict_returns_409(flask_app: Flask) -> None:
    register = MagicMock()
    register.execute.side_effect = UserAlreadyExistsError()
    _mount(flask_app, register=register)

    with flask_app.test_client() as client:
        response = client.post(
            "/api/register", json={"username": "alice", "password": "p@ss"}
        )

    assert response.status_code == 409
    assert response.get_json() == {"error": "user_already_exists"}


@pytest.mark.parametrize("error", [HashingError(), CredentialStoreError()])
def test_register_internal_failures_return_500(flask_app: Flask, error: Exception) -> None:
    register = MagicMock()
    register.execute.side_effect = error
    _mount(flask_app, register=register)

    with flask_app.test_client() as client:
        response = client.post(
            "/api/register", json={"username": "alice", "password": "p@ss"}
        )

    assert response.status_code == 500
    assert response.get_json()["error"] in {"hashing_failed", "credential_store_error"}


@pytest.mark.parametrize(
    "kwargs",
    [
        {"json": {"username": "alice"}},
        {"json": {"username": 42, "password": "p@ss"}},
        {"json": {"username": "", "password": "p@ss"}},
        {"json": ["alice", "p@ss"]},
        {"data": "{not json", "content_type": "application/json"},
        {},
    ],
)
def test_register_malformed_body_returns_400_without_side_effects(
    flask_app: Flask, kwargs: dict
) -> None:
    register = MagicMock()
    _mount(flask_app, register=register)

    with flask_app.test_client() as client:
        response = client.post("/api/register", **kwargs)

    assert response.status_code == 400
    assert response.get_json()["error"] == "validation_error"
    register.execute.assert_not_called()


def test_login_returns_token(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.return_value = "jwt-token"
    _mount(flask_app, login=login)

    with flask_app.test_client() as client:
        response = client.post("/api/login", json={"username": "alice", "password": "p@ss"})

    assert response.status_code == 200
    assert response.get_json() == {"token": "jwt-token"}
    login.execute.assert_called_once_with("alice", "p@ss")


def test_login_invalid_credentials_returns_401(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = InvalidCredentialsError()
    _mount(flask_app, login=login)

    with flask_app.test_client() as client:
        response = client.post("/api/login", json={"username": "bob", "password": "x"})

    assert response.status_code == 401
    assert response.get_json() == {"error": "invalid_credentials"}


def test_login_signing_failure_returns_500(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = SigningError()
    _mount(flask_app, login=login)

    with flask_app.test_client() as client:
        response = client.post("/api/login", json={"username": "alice", "password": "p@ss"})

    assert response.status_code == 500
    assert response.get_json() == {"error": "signing_failed"}


def test_login_invalid_payload_returns_400(flask_app: Flask) -> None:
    login = MagicMock()
    _mount(flask_app, login=login)

    with flask_app.test_client() as client:
        response = client.post("/api/login", json={"username": "alice"})

    assert response.status_code == 400
    payload = response.get_json()
    assert payload["error"] == "validation_error"
    assert payload["context"]["fields"] == ["password"]
    login.execute.assert_not_called()


def test_unexpected_error_returns_generic_500(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = RuntimeError("database exploded")
    _mount(flask_app, login=login)

    with flask_app.test_client() as client:
        response = client.post("/api/login", json={"username": "alice", "password": "p@ss"})

    assert response.status_code == 500
    assert response.get_json() == {"error": "internal_error"}


@pytest.mark.parametrize(
    "kwargs",
    [
        {"json": ["alice", "p@ss"]},
        {"data": "{not json", "content_type": "application/json"},
        {},
    ],
)
def test_non_object_body_is_rejected_as_a_whole(flask_app: Flask, kwargs: dict) -> None:
    _mount(flask_app)

    with flask_app.test_client() as client:
        response = client.post("/api/login", **kwargs)

    assert response.status_code == 400
    assert response.get_json()["context"] == {
        "fields": [],
        "errors": [{"field": "body", "type": "model_type"}],
    }


@pytest.mark.parametrize("debug_mode", [True, False])
def test_unexpected_error_logging_follows_debug_flag(
    monkeypatch: pytest.MonkeyPatch, debug_mode: bool
) -> None:
    fake_logger = MagicMock()
    monkeypatch.setattr(error_http, "logger", fake_logger)
    monkeypatch.setenv("DEBUG_LOGGING", "false" if debug_mode else "true")
    app = Flask(__name__)
    configure_error_handling(app, debug_mode=debug_mode)

    @app.get("/explode")
    def _explode():
        raise RuntimeError("boom")

    with app.test_client() as client:
        response = client.get("/explode")

    assert response.status_code == 500
    assert fake_logger.exception.called is debug_mode
    assert fake_logger.error.called is not debug_mode
