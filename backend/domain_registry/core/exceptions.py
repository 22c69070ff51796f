# domain_registry/core/exceptions.py
import logging
from enum import Enum

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

logger = logging.getLogger("uvicorn")


class AppError(Exception):
    """Application error, reported as plain text."""

    status_code = HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    @property
    def body(self) -> str:
        if self.status_code == HTTP_500_INTERNAL_SERVER_ERROR:
            return f"server error, {self.message}"
        return self.message


class UsernameTakenError(AppError):
    status_code = HTTP_409_CONFLICT

    def __init__(self, username: str):
        super().__init__(f"username '{username}' already exists")


class WorkbookError(AppError):
    status_code = HTTP_400_BAD_REQUEST


class NotFoundError(AppError):
    status_code = HTTP_404_NOT_FOUND


class AuthErrorKind(Enum):
    WRONG_CREDENTIALS = (HTTP_401_UNAUTHORIZED, "wrong credentials")
    MISSING_CREDENTIALS = (HTTP_400_BAD_REQUEST, "missing credentials")
    INVALID_TOKEN = (HTTP_400_BAD_REQUEST, "invalid token")
    TOKEN_CREATION = (HTTP_500_INTERNAL_SERVER_ERROR, "token create error")

    @property
    def status_code(self) -> int:
        return self.value[0]

    @property
    def message(self) -> str:
        return self.value[1]


class AuthError(Exception):
    """Authentication failure, reported as ``{"error": message}``."""

    def __init__(self, kind: AuthErrorKind):
        super().__init__(kind.message)
        self.kind = kind

    @property
    def status_code(self) -> int:
        return self.kind.status_code


async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"❌ {request.method} {request.url.path}: {exc.message}")
    return PlainTextResponse(exc.body, status_code=exc.status_code)


async def auth_error_handler(request: Request, exc: AuthError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.kind.message})


async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception(f"🔥 Database error on {request.method} {request.url.path}")
    return await app_error_handler(request, AppError(type(exc).__name__))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(AuthError, auth_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
