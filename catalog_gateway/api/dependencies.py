"""FastAPI dependencies — process-wide objects handed to routes.

Invariants:
    - The UpstreamClient lives on app.state (set by lifespan); routes never build one
"""

from fastapi import Request

from catalog_gateway.infrastructure.upstream_client import UpstreamClient


def get_upstream_client(request: Request) -> UpstreamClient:
    client = getattr(request.app.state, "upstream_client", None)
    if client is None:
        raise RuntimeError("Upstream client not initialized")
    return client
