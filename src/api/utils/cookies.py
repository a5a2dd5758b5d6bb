from dataclasses import dataclass

from fastapi import Response


@dataclass(frozen=True)
class SessionCookieSettings:
    """Name and attributes of the session cookie, taken from the app config"""

    name: str
    path: str
    secure: bool

    @classmethod
    def from_config(cls, config) -> "SessionCookieSettings":
        return cls(
            name=config.SESSION_COOKIE_NAME,
            path=config.SESSION_COOKIE_PATH,
            secure=bool(config.SESSION_COOKIE_SECURE),
        )


def set_session_cookie(
    response: Response, settings: SessionCookieSettings, token: str, max_age: int
) -> None:
    """
    Write the session token as an httpOnly cookie on the response.

    Args:
        response: FastAPI/Starlette response object
        settings: Cookie name, path and secure flag
        token: Opaque session token
        max_age: Cookie lifetime in seconds, same as the session TTL
    """
    response.set_cookie(
        settings.name,
        value=token,
        max_age=max_age,
        path=settings.path,
        httponly=True,
        samesite="lax",
        secure=settings.secure,
    )


def clear_session_cookie(response: Response, settings: SessionCookieSettings) -> None:
    """Tell the client to drop the session cookie"""
    response.delete_cookie(
        settings.name,
        path=settings.path,
        httponly=True,
        samesite="lax",
        secure=settings.secure,
    )
