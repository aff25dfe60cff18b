"""HTTP error model returned by handlers.

Each variant is one failure category with an optional human-readable
message. Handlers return a variant (wrapped by ``error()``) and the boundary
turns it into a plain-text response:

    NotFound("User profile not found")  -> 404 "User profile not found"
    Unauthorized()                      -> 401 "Unauthorized"
    Other(418, "I'm a teapot")          -> 418 "I'm a teapot"
"""

from dataclasses import dataclass

from fastapi import status
from fastapi.responses import PlainTextResponse

OTHER_DEFAULT_MESSAGE = "Other Error"


@dataclass(frozen=True, slots=True)
class BadRequest:
    message: str | None = None


@dataclass(frozen=True, slots=True)
class NotFound:
    message: str | None = None


@dataclass(frozen=True, slots=True)
class InternalServerError:
    message: str | None = None


@dataclass(frozen=True, slots=True)
class Unauthorized:
    message: str | None = None


@dataclass(frozen=True, slots=True)
class Forbidden:
    message: str | None = None


@dataclass(frozen=True, slots=True)
class Conflict:
    message: str | None = None


@dataclass(frozen=True, slots=True)
class TooManyRequests:
    message: str | None = None


@dataclass(frozen=True, slots=True)
class ServiceUnavailable:
    message: str | None = None


@dataclass(frozen=True, slots=True)
class GatewayTimeout:
    message: str | None = None


@dataclass(frozen=True, slots=True)
class Other:
    """Error with a caller-supplied status code.

    The code is not checked here. An invalid code is replaced by 500 when
    the error is converted (see ``status_and_body``).
    """

    code: int
    message: str | None = None


ApiError = (
    BadRequest
    | NotFound
    | InternalServerError
    | Unauthorized
    | Forbidden
    | Conflict
    | TooManyRequests
    | ServiceUnavailable
    | GatewayTimeout
    | Other
)

_VARIANTS_BY_STATUS: dict[int, type[ApiError]] = {
    status.HTTP_400_BAD_REQUEST: BadRequest,
    status.HTTP_401_UNAUTHORIZED: Unauthorized,
    status.HTTP_403_FORBIDDEN: Forbidden,
    status.HTTP_404_NOT_FOUND: NotFound,
    status.HTTP_409_CONFLICT: Conflict,
    status.HTTP_429_TOO_MANY_REQUESTS: TooManyRequests,
    status.HTTP_500_INTERNAL_SERVER_ERROR: InternalServerError,
    status.HTTP_503_SERVICE_UNAVAILABLE: ServiceUnavailable,
    status.HTTP_504_GATEWAY_TIMEOUT: GatewayTimeout,
}


def parse_status_code(code: object) -> int | None:
    """Return ``code`` if it can be the status of a final response, else None.

    Any integer in 200-999 is accepted, registered or not. 1xx codes are
    informational and cannot end a request, so they are rejected.
    """
    if isinstance(code, bool) or not isinstance(code, int):
        return None
    if 200 <= code <= 999:
        return code
    return None


def status_and_body(err: ApiError) -> tuple[int, str]:
    """Resolve an error to its ``(status_code, body_text)`` pair.

    The carried message is used verbatim when present, otherwise the
    variant's default message. Pure: no logging, no I/O.

    Raises:
        TypeError: if ``err`` is not one of the ApiError variants.
    """
    match err:
        case BadRequest(message):
            code, default = status.HTTP_400_BAD_REQUEST, "Bad Request"
        case NotFound(message):
            code, default = status.HTTP_404_NOT_FOUND, "Not Found"
        case InternalServerError(message):
            code, default = status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error"
        case Unauthorized(message):
            code, default = status.HTTP_401_UNAUTHORIZED, "Unauthorized"
        case Forbidden(message):
            code, default = status.HTTP_403_FORBIDDEN, "Forbidden"
        case Conflict(message):
            code, default = status.HTTP_409_CONFLICT, "Conflict"
        case TooManyRequests(message):
            code, default = status.HTTP_429_TOO_MANY_REQUESTS, "Too Many Requests"
        case ServiceUnavailable(message):
            code, default = status.HTTP_503_SERVICE_UNAVAILABLE, "Service Unavailable"
        case GatewayTimeout(message):
            code, default = status.HTTP_504_GATEWAY_TIMEOUT, "Gateway Timeout"
        case Other(raw_code, message):
            parsed = parse_status_code(raw_code)
            code = status.HTTP_500_INTERNAL_SERVER_ERROR if parsed is None else parsed
            default = OTHER_DEFAULT_MESSAGE
        case _:
            raise TypeError(f"expected an ApiError variant, got {type(err).__name__}")

    return code, default if message is None else message


def error_response(err: ApiError) -> PlainTextResponse:
    """Render an error as a plain-text HTTP response."""
    code, body = status_and_body(err)
    return PlainTextResponse(content=body, status_code=code)


def from_status(code: int, message: str | None = None) -> ApiError:
    """Build the variant that matches a status code.

    Codes without a dedicated variant become ``Other(code, message)``.
    """
    variant = _VARIANTS_BY_STATUS.get(code)
    if variant is None:
        return Other(code, message)
    return variant(message)  # type: ignore[call-arg]
