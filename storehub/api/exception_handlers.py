"""
Exception handlers for the FastAPI application.

Domain exceptions are rendered with the status mapping of the store
request envelope; anything unexpected becomes a 500 with a fixed message.
"""

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storehub.core.domain import DomainException, ErrorKind
from storehub.domains.store.api.envelope import INTERNAL_ERROR_MESSAGE, error_kind, error_payload

logger = logging.getLogger(__name__)

HTTP_422_UNPROCESSABLE = 422


async def domain_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render a DomainException with its mapped HTTP status and gRPC code name."""
    payload = error_payload(exc)
    kind = error_kind(exc)

    if kind == ErrorKind.INTERNAL:
        logger.error(f"Internal error on {request.method} {request.url.path}: {exc!s}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {payload.http_status} ({kind.value}): {payload.message}")

    content = {
        "error": True,
        "message": payload.message,
        "code": payload.grpc_code,
        "kind": kind.value,
        "status_code": payload.http_status,
    }
    if isinstance(exc, DomainException) and kind == ErrorKind.BAD_REQUEST and exc.details.get("field"):
        content["field"] = exc.details["field"]

    return JSONResponse(status_code=payload.http_status, content=content)


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle HTTPException with consistent response format."""
    http_exc = exc if isinstance(exc, HTTPException) else HTTPException(status_code=500, detail=str(exc))
    return JSONResponse(
        status_code=http_exc.status_code,
        content={
            "error": True,
            "message": http_exc.detail,
            "status_code": http_exc.status_code,
        },
        headers=http_exc.headers,
    )


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle request validation errors (unparseable bodies, bad query types)."""
    if not isinstance(exc, RequestValidationError):
        return JSONResponse(
            status_code=HTTP_422_UNPROCESSABLE,
            content={"error": True, "message": str(exc), "status_code": HTTP_422_UNPROCESSABLE},
        )

    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]

    logger.warning(f"Validation error on {request.url.path}: {errors}")

    return JSONResponse(
        status_code=HTTP_422_UNPROCESSABLE,
        content={
            "error": True,
            "message": "Validation error",
            "details": errors,
            "status_code": HTTP_422_UNPROCESSABLE,
        },
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle all unhandled exceptions.

    Logs the full exception with traceback and returns a safe error response.
    """
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc!s}",
        exc_info=exc,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": True,
            "message": INTERNAL_ERROR_MESSAGE,
            "code": "INTERNAL",
            "kind": ErrorKind.INTERNAL.value,
            "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    logger.info("Exception handlers registered")
