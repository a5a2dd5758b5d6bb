from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from config import ApplicationConfig
from src.api.error import ClientError, ServerError, unauthorized
from src.api.utils.cookies import (
    SessionCookieSettings,
    clear_session_cookie,
    set_session_cookie,
)
from src.app.services.password_hasher import PasswordHasher
from src.app.services.session_manager import SessionManager
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    LoadCurrentUserUseCase,
    LoginResponse,
    LoginUseCase,
    LogoutResponse,
    LogoutUseCase,
    SignupCommand,
    SignupResponse,
    SignupUseCase,
    UserProfileResponse,
)
from src.depends import (
    get_cookie_settings,
    get_current_session,
    get_password_hasher,
    get_session_manager,
    get_session_token,
    get_unit_of_work,
)
from src.domain.entities import Session

router = APIRouter(prefix="/auth", tags=["Authentication"])


class SignupRequest(BaseModel):
    """
    Signup HTTP request payload

    Validates incoming HTTP request before converting to SignupCommand.
    API layer responsibility: HTTP validation and serialization.
    """

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    username: str = Field(
        ...,
        min_length=3,
        max_length=32,
        pattern=r"^[A-Za-z0-9_.-]+$",
        description="Unique login name (letters, digits, _ . -)",
    )
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(
        ...,
        min_length=ApplicationConfig.PASSWORD_MIN_LENGTH,
        description="User password (min 8 chars, max 72 bytes)",
    )

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > 72:
            raise ValueError("must be at most 72 bytes")
        return value


@router.post(
    "/signup", status_code=status.HTTP_201_CREATED, response_model=SignupResponse
)
async def signup(
    request: SignupRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    User Signup

    Creates a new user account. Does not log the user in.

    Raises:
        - 400 Bad Request: Missing or invalid fields
        - 409 Conflict: Username or email already exists
        - 500 Internal Server Error: Server error
    """
    command = SignupCommand(
        name=request.name,
        username=request.username,
        email=request.email,
        password=request.password,
    )

    use_case = SignupUseCase(uow, password_hasher)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code in (
            "USERNAME_ALREADY_EXISTS",
            "EMAIL_ALREADY_EXISTS",
            "USER_ALREADY_EXISTS",
        ):
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    The identifier is matched against both email and username.
    """

    model_config = ConfigDict(populate_by_name=True)

    email_or_username: str = Field(
        ..., alias="emailOrUsername", min_length=1, description="Email or username"
    )
    password: str = Field(..., min_length=1, description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    session_manager: SessionManager = Depends(get_session_manager),
    cookie_settings: SessionCookieSettings = Depends(get_cookie_settings),
):
    """
    User Login

    Authenticates the user and starts a session. The session token travels
    only in the httpOnly cookie, never in the body.

    Raises:
        - 400 Bad Request: Missing fields
        - 401 Unauthorized: Invalid credentials (same error for unknown user
          and wrong password)
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow, password_hasher, session_manager)
    result = await use_case.execute(request.email_or_username, request.password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    set_session_cookie(
        response,
        cookie_settings,
        result.value.session_token,
        max_age=int(session_manager.ttl.total_seconds()),
    )
    response.headers["Cache-Control"] = "no-store"

    return LoginResponse()


@router.get("/me", status_code=status.HTTP_200_OK, response_model=UserProfileResponse)
async def get_me(
    current_session: Session = Depends(get_current_session),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Current User

    Returns the public identity of the user owning the session cookie.

    Raises:
        - 401 Unauthorized: No cookie, or session unknown, revoked or expired
        - 500 Internal Server Error: Server error
    """
    use_case = LoadCurrentUserUseCase(uow)
    result = await use_case.execute(current_session.user_id)

    if result.is_err():
        if result.error.code == "USER_NOT_FOUND":
            raise unauthorized()
        raise ServerError(result.error)

    return result.value


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def logout(
    response: Response,
    session_token: Optional[str] = Depends(get_session_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
    session_manager: SessionManager = Depends(get_session_manager),
    cookie_settings: SessionCookieSettings = Depends(get_cookie_settings),
):
    """
    User Logout

    Revokes the current session and clears the cookie. Idempotent: succeeds
    when already logged out.

    Returns:
        - 200 OK: Always {"success": true}
        - 500 Internal Server Error: Server error
    """
    use_case = LogoutUseCase(uow, session_manager)
    result = await use_case.execute(session_token)

    if result.is_err():
        raise ServerError(result.error)

    clear_session_cookie(response, cookie_settings)
    return result.value
