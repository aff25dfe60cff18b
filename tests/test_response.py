"""Unit tests for the success/error result convention."""

import json
from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from apiresult.errors import NotFound, Other, TooManyRequests
from apiresult.response import (
    ApiResponse,
    Failure,
    Success,
    UnwrapError,
    error,
    into_response,
    success,
)


class Profile(BaseModel):
    id: int
    name: str


@dataclass
class Point:
    x: int
    y: int


def test_success_wraps_data_unchanged() -> None:
    data = {"items": [1, 2, 3]}
    result = success(data)
    assert isinstance(result, Success)
    assert result.is_success()
    assert not result.is_failure()
    assert result.unwrap() is data


def test_error_wraps_error_unchanged() -> None:
    result: ApiResponse[str] = error(NotFound("Test error"))
    assert isinstance(result, Failure)
    assert result.is_failure()
    assert not result.is_success()
    assert result.unwrap_error() == NotFound("Test error")


def test_failure_can_be_matched() -> None:
    result: ApiResponse[str] = error(NotFound("Test error"))
    match result:
        case Failure(NotFound(message)):
            assert message == "Test error"
        case _:
            pytest.fail("expected a NotFound failure")


def test_unwrap_on_failure_raises() -> None:
    with pytest.raises(UnwrapError, match="NotFound"):
        error(NotFound()).unwrap()


def test_unwrap_error_on_success_raises() -> None:
    with pytest.raises(UnwrapError, match="success"):
        success("ok").unwrap_error()


def test_success_of_none_is_still_success() -> None:
    result = success(None)
    assert result.is_success()
    assert result.unwrap() is None


# ---------------------------------------------------------------------------
# into_response
# ---------------------------------------------------------------------------
def test_into_response_success_is_json_string() -> None:
    response = into_response(success("Hello, world!"))
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert json.loads(response.body) == "Hello, world!"


@pytest.mark.parametrize(
    "data, expected",
    [
        (Profile(id=1, name="Alice"), {"id": 1, "name": "Alice"}),
        (Point(x=1, y=2), {"x": 1, "y": 2}),
        ([1, "two", None], [1, "two", None]),
        (None, None),
    ],
    ids=["pydantic_model", "dataclass", "list", "none"],
)
def test_into_response_success_encodes_data(data: object, expected: object) -> None:
    response = into_response(success(data))
    assert json.loads(response.body) == expected


def test_into_response_failure_is_plain_text() -> None:
    response = into_response(error(TooManyRequests()))
    assert response.status_code == 429
    assert response.body == b"Too Many Requests"
    assert response.headers["content-type"].startswith("text/plain")


def test_into_response_failure_with_invalid_other_code() -> None:
    response = into_response(error(Other(99, "I'm a teapot")))
    assert response.status_code == 500
    assert response.body == b"I'm a teapot"


def test_into_response_rejects_unwrapped_values() -> None:
    with pytest.raises(TypeError, match="success"):
        into_response("Hello, world!")  # type: ignore[arg-type]
