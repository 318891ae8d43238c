from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CredentialsDTO(BaseModel):
    model_config = ConfigDict(strict=True)

    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1, max_length=128)


class RegisterRequestDTO(CredentialsDTO):
    pass


class LoginRequestDTO(CredentialsDTO):
    pass


class RegisterSuccessDTO(BaseModel):
    message: str = "User registered successfully!"


class TokenDTO(BaseModel):
    token: str
