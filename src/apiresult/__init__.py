"""Typed HTTP errors and a uniform result type for FastAPI handlers."""

from apiresult.errors import (
    ApiError,
    BadRequest,
    Conflict,
    Forbidden,
    GatewayTimeout,
    InternalServerError,
    NotFound,
    Other,
    ServiceUnavailable,
    TooManyRequests,
    Unauthorized,
    error_response,
    from_status,
    parse_status_code,
    status_and_body,
)
from apiresult.handlers import api_handler, install_exception_handlers, openapi_responses
from apiresult.response import (
    ApiResponse,
    Failure,
    Success,
    UnwrapError,
    error,
    into_response,
    success,
)

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "ApiResponse",
    "BadRequest",
    "Conflict",
    "Failure",
    "Forbidden",
    "GatewayTimeout",
    "InternalServerError",
    "NotFound",
    "Other",
    "ServiceUnavailable",
    "Success",
    "TooManyRequests",
    "Unauthorized",
    "UnwrapError",
    "api_handler",
    "error",
    "error_response",
    "from_status",
    "install_exception_handlers",
    "into_response",
    "openapi_responses",
    "parse_status_code",
    "status_and_body",
    "success",
]
