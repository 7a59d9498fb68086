"""
Exception handlers that render every error as {"error": <message>}.
"""

# Standard library imports
import logging
from typing import Any, Dict, List

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from .middleware import SECURITY_HEADERS

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str, headers: Any = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def format_validation_errors(errors: List[Dict[str, Any]]) -> str:
    """
    Flatten pydantic errors into one message
    
    Example: [{"loc": ("body", "lat"), "msg": "Input should be a valid number"}]
    becomes 'lat: Input should be a valid number'.
    """
    messages = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "Invalid value")
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages) or "Invalid request body"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} -> {exc.status_code}: {message}")
    else:
        logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {message}")
    return _error_response(exc.status_code, message, headers=getattr(exc, "headers", None))


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = format_validation_errors(exc.errors())
    logger.warning(f"{request.method} {request.url.path} -> 400: {message}")
    return _error_response(status.HTTP_400_BAD_REQUEST, message)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    # Rendered by ServerErrorMiddleware, outside SecurityHeadersMiddleware
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal Server Error",
        headers=dict(SECURITY_HEADERS),
    )


def register_exception_handlers(application: FastAPI) -> None:
    """Install the {"error": ...} envelope for framework and application errors"""
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)
