"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to HTTP responses by error_code.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catechesis.core.config import get_settings
from catechesis.domain.exceptions import CatechesisException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status; unknown codes are 400.
_ERROR_CODE_STATUS: dict[str, int] = {
    "RESOURCE_NOT_FOUND": 404,
    "GROUP_NOT_FOUND": 404,
    "PERSON_NOT_FOUND": 404,
    "LEVEL_NOT_FOUND": 404,
    "ENROLLMENT_NOT_FOUND": 404,
    "ATTENDANCE_RECORD_NOT_FOUND": 404,
    "USER_NOT_FOUND": 404,
    "PARISH_NOT_FOUND": 404,
    "AUTHENTICATION_ERROR": 401,
    "PERMISSION_DENIED": 403,
    "ENROLLMENT_ALREADY_EXISTS": 409,
    "ATTENDANCE_ALREADY_RECORDED": 409,
    "USER_ALREADY_EXISTS": 409,
    "VALIDATION_ERROR": 400,
    "GROUP_TENANT_MISMATCH": 400,
    "ELIGIBILITY_REQUIREMENTS_NOT_MET": 400,
    "INVALID_ATTENDANCE_BATCH": 400,
    "INVALID_TRANSFER": 400,
    "PARISH_REQUIRED": 400,
    "ADMIN_CANNOT_HAVE_PARISH": 400,
    "SERVICE_UNAVAILABLE": 503,
}


def status_for_error_code(error_code: str) -> int:
    """Return the HTTP status for a domain error code."""
    return _ERROR_CODE_STATUS.get(error_code, 400)


def _catechesis_exception_handler(
    request: Request, exc: CatechesisException
) -> JSONResponse:
    """Return JSON from CatechesisException.to_dict() with appropriate status code."""
    status = status_for_error_code(exc.error_code)
    headers = {"WWW-Authenticate": "Bearer"} if status == 401 else None
    return JSONResponse(status_code=status, content=exc.to_dict(), headers=headers)


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with validation error details."""
    return JSONResponse(
        status_code=422,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": jsonable_errors(exc),
        },
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Return pydantic errors without the non-serializable ctx/input payloads."""
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP_ERROR", "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception(
        "Unhandled exception: %s %s: %s", request.method, request.url.path, exc
    )
    settings = get_settings()
    detail: Any = str(exc) if settings.debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: CatechesisException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(CatechesisException, _catechesis_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
