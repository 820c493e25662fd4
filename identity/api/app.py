from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
import logging

from identity.app.repositories.user_repository import StoreError
from identity.domain.errors import IdentityError, TokenError, ValidationError
from .error import error_body, status_code_for

logger = logging.getLogger(__name__)


async def handle_identity_error(request: Request, exc: IdentityError):
    status_code = status_code_for(exc)
    extra = {"details": exc.details} if isinstance(exc, ValidationError) and exc.details else {}
    content = error_body(exc.code, exc.message, **extra)
    logger.warning(f"Client error: {content['error']}")
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, TokenError) else None
    return JSONResponse(status_code=status_code, content=content, headers=headers)


async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    details = {
        ".".join(str(part) for part in error["loc"][1:]) or "body": error["msg"]
        for error in exc.errors()
    }
    logger.warning(f"Validation error: {details}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder(
            error_body(ValidationError.code, "Invalid input data", details=details)
        ),
    )


async def handle_store_error(request: Request, exc: StoreError):
    logger.error(f"Store error: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("INTERNAL_ERROR", "Internal server error"),
    )


def create_app(ApplicationConfig) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if ApplicationConfig.AUTO_CREATE_TABLES:
            from identity.depends import init_db

            await init_db()
        yield

    app = FastAPI(title="User Directory Identity Service", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from identity.api.routes import auth, user

    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(user.router, tags=["User"])

    app.add_exception_handler(IdentityError, handle_identity_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StoreError, handle_store_error)

    return app
