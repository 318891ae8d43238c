from .base import (
    AppError,
    CredentialStoreError,
    DomainError,
    HashingError,
    InfrastructureError,
    MessageStoreError,
    SigningError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "CredentialStoreError",
    "DomainError",
    "HashingError",
    "InfrastructureError",
    "MessageStoreError",
    "SigningError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
