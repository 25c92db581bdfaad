"""Authentication use cases."""

from .complete_login import CompleteLoginUseCase
from .login import LoginUseCase
from .logout import LogoutUseCase
from .session import LoginState, SessionContext

__all__ = [
    "CompleteLoginUseCase",
    "LoginUseCase",
    "LoginState",
    "LogoutUseCase",
    "SessionContext",
]
