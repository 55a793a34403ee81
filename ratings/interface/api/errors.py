"""Error translation and the standard error envelope.

Every error response has the shape ``{"error": <message>, "success": false}``.
"""

import logfire
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ratings.domain.error import (
    AuthRequiredError,
    DomainError,
    StoreError,
    ValidationError,
)


def error_body(message: str) -> dict:
    """Build the standard error envelope."""
    return {"error": message, "success": False}


def http_error_for(error: DomainError, failure_message: str) -> HTTPException:
    """Translate a domain error into an HTTPException.

    Store failures are reported with ``failure_message`` only; their detail
    stays in the logs.

    Args:
        error: Domain error raised by a use case
        failure_message: Client-facing message for server-side failures

    Returns:
        HTTPException to raise
    """
    if isinstance(error, ValidationError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    if isinstance(error, AuthRequiredError):
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Authentication required"
        )
    if isinstance(error, StoreError):
        logfire.error("Vote store error", operation=error.operation)
    else:
        logfire.error("Unexpected domain error", error=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=failure_message
    )


async def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ())[1:])
        problems.append(f"{location}: {err.get('msg')}" if location else err.get("msg"))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("; ".join(problems) or "Invalid request"),
    )


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unhandled error",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=str(exc),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error"),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Render every error in the standard envelope.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
