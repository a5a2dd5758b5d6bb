"""
Use Cases

Organized into domain folders:
- auth/: Authentication flows
"""

from .auth import (
    SignupUseCase,
    SignupCommand,
    SignupResponse,
    LoginUseCase,
    LoadCurrentUserUseCase,
    LogoutUseCase,
)

__all__ = [
    "SignupUseCase",
    "SignupCommand",
    "SignupResponse",
    "LoginUseCase",
    "LoadCurrentUserUseCase",
    "LogoutUseCase",
]
