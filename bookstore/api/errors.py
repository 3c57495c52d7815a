"""
Exception handlers mapping domain errors to structured HTTP responses
"""
import logging
from datetime import datetime
from http import HTTPStatus
from typing import Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookstore.exceptions import InvalidArgumentError, ResourceNotFoundError
from bookstore.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)


def error_response(
    request: Request,
    status_code: int,
    message: str,
    details: Optional[List[str]] = None,
    headers: Optional[Dict[str, str]] = None
) -> JSONResponse:
    """Build the error body shared by all handlers"""
    body = ErrorResponse(
        timestamp=datetime.utcnow(),
        status=status_code,
        error=HTTPStatus(status_code).phrase,
        message=message,
        path=request.url.path,
        details=details
    )
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body, exclude_none=True),
        headers=headers
    )


async def resource_not_found_handler(request: Request, exc: ResourceNotFoundError):
    return error_response(request, status.HTTP_404_NOT_FOUND, str(exc))


async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
    return error_response(request, status.HTTP_400_BAD_REQUEST, str(exc))


async def validation_error_handler(request: Request, exc: RequestValidationError):
    details = []
    for error in exc.errors():
        # Drop the "body"/"query"/"path" prefix
        field = ".".join(str(part) for part in error["loc"][1:]) or str(error["loc"][0])
        details.append(f"{field}: {error['msg']}")
    return error_response(request, status.HTTP_400_BAD_REQUEST, "Validation failed", details)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # Unknown routes, wrong methods and any HTTPException raised by a route
    return error_response(request, exc.status_code, str(exc.detail), headers=exc.headers)


async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred"
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install all handlers on the application"""
    app.add_exception_handler(ResourceNotFoundError, resource_not_found_handler)
    app.add_exception_handler(InvalidArgumentError, invalid_argument_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
