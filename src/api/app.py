import logging
from contextlib import asynccontextmanager
from datetime import timedelta

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel

from .error import ClientError, ServerError
from .middleware import log_requests

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    if exc.details is not None:
        error_dict["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    # Only location and message: submitted values may contain the password
    details = [
        {
            "field": ".".join(str(part) for part in err["loc"][1:]) or "body",
            "message": err["msg"],
        }
        for err in exc.errors()
    ]
    logger.warning(f"Invalid input on {request.url.path}: {details}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": {
                "code": "INVALID_INPUT",
                "message": "Invalid request payload",
                "details": details,
            }
        },
    )


async def handle_store_error(request: Request, exc: SQLAlchemyError):
    logger.exception("Credential store failure")
    error_dict = {"code": "STORE_UNAVAILABLE", "message": "Internal server error"}
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


def build_session_manager(ApplicationConfig):
    from src.adapter.repositories.in_memory_session_repository import (
        InMemorySessionRepository,
    )
    from src.adapter.repositories.session_repository import SessionRepository
    from src.app.services.session_manager import SessionManager

    backend = ApplicationConfig.SESSION_BACKEND
    if backend == "memory":
        store = InMemorySessionRepository()
    elif backend == "database":
        from src.depends import engine

        store = SessionRepository(engine)
    else:
        raise ValueError(f"Unknown SESSION_BACKEND: {backend}")

    return SessionManager(
        store,
        ttl=timedelta(hours=ApplicationConfig.SESSION_TTL_HOURS),
        purge_every=ApplicationConfig.SESSION_PURGE_EVERY,
    )


def create_app(ApplicationConfig) -> FastAPI:
    from src.adapter.services.password_hasher import BcryptPasswordHasher
    from src.api.utils.cookies import SessionCookieSettings
    from src.depends import build_session_cookie

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if ApplicationConfig.CREATE_TABLES_ON_STARTUP:
            import src.domain.entities  # noqa: F401  registers the tables
            from src.depends import engine

            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
        yield

    app = FastAPI(title="Auth API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:
        app.middleware("http")(log_requests)

    app.state.password_hasher = BcryptPasswordHasher(
        rounds=ApplicationConfig.BCRYPT_ROUNDS
    )
    app.state.session_manager = build_session_manager(ApplicationConfig)
    app.state.session_cookie_settings = SessionCookieSettings.from_config(
        ApplicationConfig
    )
    app.state.session_cookie = build_session_cookie(
        ApplicationConfig.SESSION_COOKIE_NAME
    )

    from src.api.routes import auth, health_check

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(
        auth.router, prefix=ApplicationConfig.API_PREFIX, tags=["Authentication"]
    )

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(SQLAlchemyError, handle_store_error)

    return app
