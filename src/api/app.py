from contextlib import asynccontextmanager
from datetime import timedelta
import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from sqlmodel import SQLModel

from src.app.services.password_hasher import PasswordHasher
from src.app.services.reset_link_sender import ResetLinkSender
from .error import ClientError, ServerError
from .utils.jwt import TokenCodec

logger = logging.getLogger(__name__)

# Request-validation locations that are not field names
_LOCATION_PREFIXES = ("body", "query", "path", "header")


async def handle_client_error(request: Request, exc: ClientError):
    error = exc.base_error
    logger.warning(f"Client error: {error.code} on {request.method} {request.url.path}")
    if error.details is not None:
        content = {"message": error.message, **error.details}
    else:
        content = {"error": error.message}
    return JSONResponse(status_code=exc.status_code, content=content)


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    """Turn FastAPI's 422 into the 400 formErrors / fieldErrors shape"""
    form_errors = []
    field_errors = {}
    for err in exc.errors():
        loc = list(err.get("loc", ()))
        if loc and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        message = err.get("msg", "Invalid value")
        if loc:
            field_errors.setdefault(str(loc[0]), []).append(message)
        else:
            form_errors.append(message)

    logger.warning(f"Validation failed on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": "Validation failed",
            "formErrors": form_errors,
            "fieldErrors": field_errors,
        },
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    if app.state.config.CREATE_TABLES:
        from src.depends import engine

        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Database tables ready")
    yield


def create_app(ApplicationConfig, reset_link_sender: Optional[ResetLinkSender] = None) -> FastAPI:
    # Refuses to build an app without a signing secret
    token_codec = TokenCodec(
        ApplicationConfig.JWT_SECRET,
        ttl=timedelta(days=ApplicationConfig.JWT_EXPIRES_DAYS),
    )

    app = FastAPI(title="Kostentram API", version="1.0.0", lifespan=lifespan)

    app.state.config = ApplicationConfig
    app.state.token_codec = token_codec
    app.state.password_hasher = PasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)
    # Without a sender, reset links are never delivered
    app.state.reset_link_sender = reset_link_sender

    frontend_url = ApplicationConfig.FRONTEND_URL
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[frontend_url] if frontend_url else ["*"],
        allow_credentials=bool(frontend_url),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import auth, health_check, listings

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(listings.router, tags=["Iklan"])

    @app.get("/", include_in_schema=False)
    async def root():
        return RedirectResponse("/docs")

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
