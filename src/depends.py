from typing import Optional

from fastapi import Depends, Request
from fastapi.security import APIKeyCookie
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import unauthorized
from src.api.utils.cookies import SessionCookieSettings
from src.app.services.password_hasher import PasswordHasher
from src.app.services.session_manager import SessionManager
from src.domain.entities import Session

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


def build_session_cookie(cookie_name: str) -> APIKeyCookie:
    # Missing cookie yields None; get_current_session turns that into a 401
    return APIKeyCookie(name=cookie_name, auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_session_manager(request: Request) -> SessionManager:
    return request.app.state.session_manager


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_cookie_settings(request: Request) -> SessionCookieSettings:
    return request.app.state.session_cookie_settings


async def get_session_token(request: Request) -> Optional[str]:
    """Session token from the cookie named in the app config, or None"""
    return await request.app.state.session_cookie(request)


async def get_current_session(
    session_token: Optional[str] = Depends(get_session_token),
    session_manager: SessionManager = Depends(get_session_manager),
) -> Session:
    """
    Dependency resolving the session cookie to a live session.

    Args:
        session_token: Opaque token from the session cookie

    Returns:
        The active Session

    Raises:
        ClientError: 401 if the cookie is missing, unknown, revoked or expired
    """
    session = await session_manager.resolve(session_token)
    if session is None:
        raise unauthorized()
    return session
