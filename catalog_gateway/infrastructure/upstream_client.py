"""VTEX Upstream Client — authenticated JSON GET/POST over a shared httpx.AsyncClient.

Invariants:
    - Every request carries X-VTEX-API-AppKey and X-VTEX-API-AppToken
    - Non-2xx status, network failure and non-JSON bodies all raise UpstreamError
    - Every failure is logged with the upstream body before it is raised
    - No retries, no caching, httpx default timeout

Design Decisions:
    - One AsyncClient per process (created in lifespan): connection pooling across requests
    - Transport is injectable so tests swap in httpx.MockTransport
    - Relative paths resolve against the VTEX API URL; absolute URLs bypass it
"""

import logging
from typing import Any

import httpx

from catalog_gateway.core.domain_types import JSONValue, UpstreamCredentials
from catalog_gateway.core.errors import UpstreamError

logger = logging.getLogger(__name__)


class UpstreamClient:
    """Wraps httpx.AsyncClient with VTEX credentials and error mapping."""

    def __init__(
        self,
        credentials: UpstreamCredentials,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.credentials = credentials
        self.client = httpx.AsyncClient(
            base_url=credentials.base_url,
            headers={"Accept": "application/json", **credentials.headers()},
            transport=transport,
        )

    async def get_json(
        self, url: str, headers: dict[str, str] | None = None,
    ) -> JSONValue:
        """GET url and return the parsed JSON body."""
        response = await self._send("GET", url, headers=headers)
        return self._parse(response, "GET", url)

    async def post_json(
        self, url: str, body: Any, headers: dict[str, str] | None = None,
    ) -> tuple[int, JSONValue]:
        """POST a JSON body; returns (upstream status, parsed JSON body)."""
        response = await self._send("POST", url, headers=headers, json=body)
        return response.status_code, self._parse(response, "POST", url)

    async def aclose(self) -> None:
        await self.client.aclose()

    async def _send(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            response = await self.client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error(
                f"Error fetching data from VTEX API: {e}",
                extra={"upstream_url": url, "upstream_method": method},
            )
            raise UpstreamError(
                f"VTEX request failed: {e}", url, method,
            ) from e

        if response.is_success:
            return response

        body = self._body_for_log(response)
        logger.error(
            f"VTEX API returned {response.status_code} for {method} {url}",
            extra={
                "upstream_url": url,
                "upstream_method": method,
                "upstream_status": response.status_code,
                "upstream_body": body,
            },
        )
        raise UpstreamError(
            f"VTEX API error: {response.status_code} {response.reason_phrase}",
            url, method, response.status_code, body,
        )

    def _parse(self, response: httpx.Response, method: str, url: str) -> JSONValue:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.error(
                f"VTEX API returned a non-JSON body for {method} {url}",
                extra={
                    "upstream_url": url,
                    "upstream_status": response.status_code,
                    "upstream_body": response.text[:500],
                },
            )
            raise UpstreamError(
                "VTEX API returned a non-JSON body",
                url, method, response.status_code, response.text[:500],
            ) from e

    @staticmethod
    def _body_for_log(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return response.text[:500] or "No response data"
