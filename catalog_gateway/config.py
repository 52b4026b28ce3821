"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - VTEX URL, app key and app token come from the environment (never hardcoded)
    - Missing or blank credentials make get_settings() raise: the process refuses to start
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Credentials leave this module only as a frozen UpstreamCredentials value
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from catalog_gateway.core.domain_types import UpstreamCredentials


class Settings(BaseSettings):
    """Gateway settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # VTEX (required)
    vtex_api_url: str
    vtex_api_app_key: str
    vtex_api_app_token: str

    @field_validator(
        "vtex_api_url", "vtex_api_app_key", "vtex_api_app_token", mode="before",
    )
    @classmethod
    def reject_blank(cls, v):
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("must not be blank")
        return v

    @field_validator("vtex_api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # Account segment of the pricing API path
    vtex_account: str = "iamtechiepartneruae"
    collection_search_url: str = (
        "https://iamtechiepartneruae.vtexcommercestable.com.br"
        "/api/catalog_system/pvt/collection/search"
    )

    # Server
    host: str = "0.0.0.0"  # nosec B104
    port: int = 3000

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    def upstream_credentials(self) -> UpstreamCredentials:
        return UpstreamCredentials(
            base_url=self.vtex_api_url,
            app_key=self.vtex_api_app_key,
            app_token=self.vtex_api_app_token,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
