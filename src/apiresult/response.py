"""Uniform handler return type.

Handlers are annotated ``-> ApiResponse[T]`` and return ``success(data)`` or
``error(variant)``. ``into_response`` is the single place where either case
becomes an HTTP response: JSON for the success case, the error model's
plain-text rendering for the failure case.
"""

from dataclasses import dataclass
from typing import Any, NoReturn

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.responses import Response

from apiresult.errors import ApiError, error_response


class UnwrapError(Exception):
    """Raised when unwrapping the wrong case of an ApiResponse."""


@dataclass(frozen=True)
class Success[T]:
    """Success case. ``data`` is encoded to JSON at the boundary."""

    data: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.data

    def unwrap_error(self) -> NoReturn:
        raise UnwrapError(f"called unwrap_error() on a success: {self.data!r}")


@dataclass(frozen=True)
class Failure:
    """Failure case carrying one of the ApiError variants."""

    error: ApiError

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise UnwrapError(f"called unwrap() on a failure: {self.error!r}")

    def unwrap_error(self) -> ApiError:
        return self.error


type ApiResponse[T] = Success[T] | Failure


def success[T](data: T) -> ApiResponse[T]:
    """Wrap ``data`` as a successful handler result.

    Example:
        async def greet() -> ApiResponse[str]:
            return success("Hello, world!")
    """
    return Success(data)


def error[T](err: ApiError) -> ApiResponse[T]:
    """Wrap ``err`` as a failed handler result.

    ``T`` is never constructed; it comes from the handler's annotation.

    Example:
        async def get_user(user_id: int) -> ApiResponse[User]:
            return error(NotFound(f"User {user_id} not found"))
    """
    return Failure(err)


def into_response(result: ApiResponse[Any]) -> Response:
    """Turn a handler result into the HTTP response sent to the client.

    Raises:
        TypeError: if ``result`` is neither a Success nor a Failure.
    """
    match result:
        case Success(data):
            return JSONResponse(content=jsonable_encoder(data))
        case Failure(err):
            return error_response(err)
        case _:
            raise TypeError(
                f"handler must return success(...) or error(...), got {type(result).__name__}"
            )
