"""
Shared fixtures for the DigiPIN test suite.

This conftest provides:
- Known code vectors (reference code, a surveyed landmark)
- Test client (httpx.AsyncClient) over a bare app with the routers
"""
from __future__ import annotations

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

# ---------------------------------------------------------------------------
# Known vectors
# ---------------------------------------------------------------------------
REFERENCE_CODE = "4P3-JM8-K4L6"

# Dak Bhawan, New Delhi.
DAK_BHAWAN = (28.622788, 77.213033)
DAK_BHAWAN_CODE = "39J-49L-L8T4"

# Full-depth cell edge length in degrees (36° / 4**10).
CELL_DEG = 36.0 / 4 ** 10


def make_router_app(*routers) -> FastAPI:
    """A lifespan-free app with the given routers under /api."""
    app = FastAPI()
    for router in routers:
        app.include_router(router, prefix="/api")
    return app


def make_client(app: FastAPI) -> AsyncClient:
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://testserver")


@pytest.fixture()
def reference_code() -> str:
    return REFERENCE_CODE
