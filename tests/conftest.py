"""Root conftest — fake VTEX credentials, fake upstream, ASGI test client.

Invariants:
    - Environment is populated before catalog_gateway.main is imported
      (settings are read at import time)
    - Every test gets a fresh FakeVtex; nothing reaches the network
    - get_upstream_client is overridden, so lifespan never runs in tests
"""

import os

os.environ.setdefault("VTEX_API_URL", "https://vtex.test")
os.environ.setdefault("VTEX_API_APP_KEY", "test-app-key")
os.environ.setdefault("VTEX_API_APP_TOKEN", "test-app-token")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from catalog_gateway.api.dependencies import get_upstream_client  # noqa: E402
from catalog_gateway.core.domain_types import UpstreamCredentials  # noqa: E402
from catalog_gateway.infrastructure.upstream_client import UpstreamClient  # noqa: E402
from catalog_gateway.main import app  # noqa: E402

from tests.fake_vtex import FakeVtex  # noqa: E402

TEST_CREDENTIALS = UpstreamCredentials(
    base_url="https://vtex.test",
    app_key="test-app-key",
    app_token="test-app-token",
)


@pytest.fixture
def vtex():
    return FakeVtex()


@pytest.fixture
async def upstream(vtex):
    """UpstreamClient wired to the fake VTEX transport."""
    client = UpstreamClient(TEST_CREDENTIALS, transport=vtex.transport)
    yield client
    await client.aclose()


@pytest.fixture
async def client(upstream):
    """FastAPI test client with the upstream dependency overridden."""
    app.dependency_overrides[get_upstream_client] = lambda: upstream
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
