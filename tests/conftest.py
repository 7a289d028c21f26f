"""
Shared fixtures for http_stream tests.
"""
import pytest
import pytest_asyncio

import httpx
import respx

from http_stream.config import AdapterConfig
from http_stream.core.request import new_request
from http_stream.factory import reset_default_adapter


BASE_URL = "http://localhost:4000"


@pytest.fixture
def base_url():
    """Base URL with an explicit, non-default port."""
    return BASE_URL


@pytest.fixture
def sample_request():
    """Sample GET request with a query."""
    return new_request("GET", f"{BASE_URL}/files/report.csv", query=[("id", 1)])


@pytest.fixture
def sample_post_request():
    """Sample POST request with headers and a body."""
    return new_request(
        "POST",
        f"{BASE_URL}/uploads",
        headers=[("authorization", "Bearer supersecrettoken123")],
        body={"id": 1, "filter": True},
    )


@pytest.fixture
def router():
    """respx router used as an httpx transport handler."""
    return respx.MockRouter()


@pytest.fixture
def sync_client(router):
    """httpx.Client routed through the respx router."""
    client = httpx.Client(transport=httpx.MockTransport(router.handler))
    yield client
    client.close()


@pytest_asyncio.fixture
async def async_client(router):
    """httpx.AsyncClient routed through the respx router."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(router.async_handler))
    yield client
    await client.aclose()


@pytest.fixture
def adapter_config():
    """Default adapter configuration."""
    return AdapterConfig()


@pytest.fixture(autouse=True)
def clean_default_adapter():
    """Make sure no test leaks the process-wide adapter."""
    reset_default_adapter()
    yield
    reset_default_adapter()
