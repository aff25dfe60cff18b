from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from apiresult.config import Settings
from tests.sample_app import build_app


@pytest.fixture
def app() -> FastAPI:
    return build_app()


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """HTTP client for the sample app.

    raise_app_exceptions=False: Starlette re-raises unhandled exceptions after
    the error handler has sent its response; we want that response.
    """
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as client:
        yield client


@pytest_asyncio.fixture
async def detailed_client() -> AsyncIterator[AsyncClient]:
    """Client for an app that echoes unhandled exception text."""
    app = build_app(Settings(expose_error_details=True))
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as client:
        yield client
