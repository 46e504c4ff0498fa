"""Global exception handlers producing a uniform JSON error body."""

from typing import Any, Optional

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = structlog.get_logger()

VALIDATION_FAILED = "Validation Failed"


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""

    status: int
    message: str
    errors: Optional[dict[str, str]] = None


def error_response(status_code: int, message: str, errors: Optional[dict] = None) -> JSONResponse:
    body = ErrorResponse(status=status_code, message=message, errors=errors)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def field_errors(errors: list[dict[str, Any]]) -> dict[str, str]:
    """
    Collapse Pydantic error entries into a field -> message map.

    The location prefix ("body", "query", ...) is dropped; errors that do not
    point at a named field are reported under the prefix itself. Only the
    first message per field is kept.
    """
    result: dict[str, str] = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if error.get("type") == "json_invalid" or len(loc) < 2:
            field = loc[0] if loc else "body"
        else:
            field = ".".join(loc[1:])
        result.setdefault(field, error.get("msg", "Invalid value"))
    return result


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = field_errors(exc.errors())
        logger.warning("Request validation failed", path=request.url.path, errors=errors)
        return error_response(status.HTTP_400_BAD_REQUEST, VALIDATION_FAILED, errors)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        logger.info("HTTP error", path=request.url.path, status=exc.status_code)
        message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
        return error_response(exc.status_code, message)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception", path=request.url.path, exc_info=exc)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc) or "Internal Server Error"
        )
