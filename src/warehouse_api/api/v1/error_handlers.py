# warehouse_api/api/v1/error_handlers.py
"""
FastAPI exception handlers that turn service errors into HTTP responses.

How to use:
    - Call `register_exception_handlers(app)` from the app factory.
    - Services raise warehouse_api.exceptions.base.* (NotFoundError, AlreadyExistsError, ...).
    - The status comes from `exc.http_status()` and the body from `exc.to_payload()`,
      always the envelope {"error": "<message>"}.

Request validation is split the way clients expect it:
    - malformed JSON, a missing body, or a path/query parameter that does not parse -> 400
    - a well-formed body with a missing or out-of-range field       -> 422
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from warehouse_api.exceptions.base import BadRequestError, InvalidValueError, ServiceError

logger = logging.getLogger(__name__)

# Locations whose parse failures are a bad request rather than a bad value.
BAD_REQUEST_LOCATIONS = {"path", "query"}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _describe(error: dict) -> str:
    """'field: reason' for the first validation error."""
    location = [str(part) for part in error.get("loc", ()) if part != "body"]
    reason = error.get("msg", "invalid value")
    return f"{'.'.join(location)}: {reason}" if location else reason


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    # services already logged the cause; only the outcome is recorded here
    logger.info(
        "http.service_error",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": exc.http_status(),
            "error_code": exc.error_code,
        },
    )
    return JSONResponse(status_code=exc.http_status(), content=exc.to_payload())


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}

    location = tuple(first.get("loc") or ())
    # whole-body failures (bad JSON, wrong top-level type) are malformed requests
    if first.get("type") == "json_invalid" or location == ("body",) or (
        location and location[0] in BAD_REQUEST_LOCATIONS
    ):
        error_cls = BadRequestError
    else:
        error_cls = InvalidValueError
    error = error_cls(_describe(first) if first else "invalid request")

    logger.info(
        "http.validation_error",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": error.http_status(),
            "error_count": len(errors),
        },
    )
    return JSONResponse(status_code=error.http_status(), content=error.to_payload())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Last resort. Keep the message generic; the traceback goes to the logs only.
    """
    logger.exception(
        "http.unhandled_error",
        extra={"method": request.method, "path": request.url.path},
    )
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
