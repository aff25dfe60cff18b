"""FastAPI integration for handlers that return ApiResponse.

    app = FastAPI()
    install_exception_handlers(app)

    @app.get("/users/{user_id}", responses=openapi_responses(NotFound()))
    @api_handler
    async def get_user(user_id: int) -> ApiResponse[User]:
        ...
"""

import functools
import inspect
from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import FastAPI, Request
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from apiresult.config import Settings
from apiresult.config import settings as default_settings
from apiresult.errors import (
    ApiError,
    InternalServerError,
    error_response,
    from_status,
    status_and_body,
)
from apiresult.logging import configure_logging, get_logger
from apiresult.response import ApiResponse, into_response

logger = get_logger(__name__)

# Statuses that must not carry a body
_BODYLESS_STATUSES = frozenset({204, 304})


def api_handler[**P, T](
    func: Callable[P, Awaitable[ApiResponse[T]]] | Callable[P, ApiResponse[T]],
) -> Callable[P, Awaitable[Response]]:
    """Adapt a handler returning ApiResponse[T] into a FastAPI endpoint.

    The endpoint keeps the handler's parameters, so path/query parameters and
    Depends() keep working. Its return annotation is replaced with Response so
    FastAPI does not try to build a response model from ApiResponse[T].
    Sync handlers run in the threadpool, like FastAPI's own sync endpoints.

    Apply it below the route decorator:

        @router.get("/greeting")
        @api_handler
        def greeting() -> ApiResponse[str]:
            return success("Hello, world!")
    """
    signature = inspect.signature(func, eval_str=True)
    is_async = inspect.iscoroutinefunction(func)

    @functools.wraps(func)
    async def endpoint(*args: P.args, **kwargs: P.kwargs) -> Response:
        if is_async:
            result = await func(*args, **kwargs)  # type: ignore[misc]
        else:
            result = await run_in_threadpool(func, *args, **kwargs)
        return into_response(result)

    # FastAPI must see the endpoint's own signature, not the handler's
    del endpoint.__wrapped__  # type: ignore[attr-defined]
    endpoint.__signature__ = signature.replace(  # type: ignore[attr-defined]
        return_annotation=Response
    )
    endpoint.__annotations__ = {
        **{
            name: param.annotation
            for name, param in signature.parameters.items()
            if param.annotation is not inspect.Parameter.empty
        },
        "return": Response,
    }
    return endpoint


def install_exception_handlers(app: FastAPI, settings: Settings | None = None) -> None:
    """Route framework exceptions through the error model.

    - HTTPException (raised by FastAPI itself or by dependencies) is mapped to
      the matching variant and rendered as plain text, keeping its headers.
    - Any other exception is logged with its traceback and answered with
      InternalServerError. The exception text reaches the client only when
      ``settings.expose_error_details`` is set.

    With ``settings.configure_logging`` set, JSON logging is configured here
    at ``settings.log_level``.
    """
    settings = settings or default_settings
    if settings.configure_logging:
        configure_logging(settings.log_level)

    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
        if exc.status_code >= 500:
            logger.warning("http_exception", status_code=exc.status_code, path=request.url.path)
        else:
            logger.debug("http_exception", status_code=exc.status_code, path=request.url.path)

        if exc.status_code in _BODYLESS_STATUSES:
            return Response(status_code=exc.status_code, headers=exc.headers)

        message = exc.detail if isinstance(exc.detail, str) else None
        response = error_response(from_status(exc.status_code, message))
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    async def unhandled_exception_handler(request: Request, exc: Exception) -> Response:
        logger.exception("unhandled_exception", path=request.url.path, method=request.method)
        message = str(exc) if settings.expose_error_details else None
        return error_response(InternalServerError(message))

    app.add_exception_handler(
        StarletteHTTPException, http_exception_handler  # type: ignore[arg-type]
    )
    app.add_exception_handler(Exception, unhandled_exception_handler)


def openapi_responses(*errors: ApiError) -> dict[int | str, dict[str, Any]]:
    """Document error responses for a route's ``responses=`` argument.

    Each error appears under its resolved status as a text/plain response
    with its resolved body as the example. When two errors share a status,
    the last one wins.
    """
    responses: dict[int | str, dict[str, Any]] = {}
    for err in errors:
        code, body = status_and_body(err)
        responses[code] = {
            "description": body,
            "content": {"text/plain": {"schema": {"type": "string"}, "example": body}},
        }
    return responses
