"""Exception handlers mapping errors to JSON responses.

Every error body has the shape ``{"message": <str>}``. Storage failures get
a generic message; internal details only go to the logs.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from reactions.application.usecase.reaction import ALREADY_VOTED_MESSAGE
from reactions.domain.error import (
    AlreadyVotedError,
    InvalidRequestError,
    ModeDisabledError,
    StorageUnavailableError,
)
from reactions.interface.error import (
    AdminAccessDeniedError,
    AdminDisabledError,
    UnauthenticatedError,
)

INVALID_REQUEST_MESSAGE = "Invalid request."
MODE_DISABLED_MESSAGE = "Dislike is disabled."
STORAGE_FAILURE_MESSAGE = "Something went wrong. Please try again."


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logfire.info("Request validation failed", path=request.url.path)
    return _message(status.HTTP_400_BAD_REQUEST, INVALID_REQUEST_MESSAGE)


async def invalid_request_handler(
    request: Request, exc: InvalidRequestError
) -> JSONResponse:
    return _message(status.HTTP_400_BAD_REQUEST, f"{INVALID_REQUEST_MESSAGE} {exc}")


async def unauthenticated_handler(
    request: Request, exc: UnauthenticatedError
) -> JSONResponse:
    return _message(status.HTTP_401_UNAUTHORIZED, str(exc))


async def admin_access_denied_handler(
    request: Request, exc: AdminAccessDeniedError
) -> JSONResponse:
    logfire.warn("Admin access denied", path=request.url.path)
    return _message(status.HTTP_401_UNAUTHORIZED, str(exc))


async def admin_disabled_handler(
    request: Request, exc: AdminDisabledError
) -> JSONResponse:
    return _message(status.HTTP_403_FORBIDDEN, str(exc))


async def mode_disabled_handler(
    request: Request, exc: ModeDisabledError
) -> JSONResponse:
    return _message(status.HTTP_403_FORBIDDEN, MODE_DISABLED_MESSAGE)


async def already_voted_handler(
    request: Request, exc: AlreadyVotedError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"message": ALREADY_VOTED_MESSAGE, "already": True},
    )


async def storage_failure_handler(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Storage failure while serving request",
        path=request.url.path,
        error_type=type(exc).__name__,
    )
    return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, STORAGE_FAILURE_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the app.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(InvalidRequestError, invalid_request_handler)
    app.add_exception_handler(UnauthenticatedError, unauthenticated_handler)
    app.add_exception_handler(AdminAccessDeniedError, admin_access_denied_handler)
    app.add_exception_handler(AdminDisabledError, admin_disabled_handler)
    app.add_exception_handler(ModeDisabledError, mode_disabled_handler)
    app.add_exception_handler(AlreadyVotedError, already_voted_handler)
    app.add_exception_handler(StorageUnavailableError, storage_failure_handler)
    app.add_exception_handler(SQLAlchemyError, storage_failure_handler)
