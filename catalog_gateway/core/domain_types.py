"""Domain Types — immutable values shared across layers.

Invariants:
    - UpstreamCredentials is frozen: built once at startup, read-only afterwards
    - Credential headers are derived, never stored separately
"""

from dataclasses import dataclass
from typing import Any, TypeAlias

# Any JSON value returned by VTEX (object, array or scalar)
JSONValue: TypeAlias = Any

APP_KEY_HEADER = "X-VTEX-API-AppKey"
APP_TOKEN_HEADER = "X-VTEX-API-AppToken"


@dataclass(frozen=True)
class UpstreamCredentials:
    """Static VTEX credentials plus the API base URL."""
    base_url: str
    app_key: str
    app_token: str

    def headers(self) -> dict[str, str]:
        return {
            APP_KEY_HEADER: self.app_key,
            APP_TOKEN_HEADER: self.app_token,
        }

    def __repr__(self) -> str:
        # app_token stays out of logs and tracebacks
        return f"UpstreamCredentials(base_url={self.base_url!r}, app_key={self.app_key!r})"
