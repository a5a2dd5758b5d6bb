"""
Authentication Use Cases

All authentication-related business logic.
"""

from .signup_use_case import SignupUseCase
from .signup_dto import SignupCommand, SignupResponse
from .login_use_case import LoginUseCase
from .load_current_user_use_case import LoadCurrentUserUseCase
from .logout_use_case import LogoutUseCase
from .dtos import (
    LoginResponse,
    LoginResult,
    LogoutResponse,
    UserProfileResponse,
)

__all__ = [
    # Use Cases
    "SignupUseCase",
    "LoginUseCase",
    "LoadCurrentUserUseCase",
    "LogoutUseCase",
    # DTOs - Commands
    "SignupCommand",
    # DTOs - Responses
    "SignupResponse",
    "LoginResult",
    "LoginResponse",
    "LogoutResponse",
    "UserProfileResponse",
]
