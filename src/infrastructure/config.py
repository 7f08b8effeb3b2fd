"""API client settings, async HTTP client factory, and dependency."""

from collections.abc import AsyncGenerator

import httpx
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    api_base_url: str = "https://electriborne.net/api"
    api_timeout: float = 10.0
    api_token: str | None = None


settings = Settings()


def create_client(config: Settings | None = None, **kwargs) -> httpx.AsyncClient:
    """Build an AsyncClient bound to the platform API.

    Extra keyword arguments are passed to httpx.AsyncClient (tests use
    transport=httpx.MockTransport(...)).
    """
    config = config or settings
    headers = {"Accept": "application/json"}
    if config.api_token:
        headers["Authorization"] = f"Bearer {config.api_token}"
    return httpx.AsyncClient(
        base_url=config.api_base_url,
        timeout=config.api_timeout,
        headers=headers,
        **kwargs,
    )


async def get_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    """Dependency that yields a configured client and closes it afterwards."""
    async with create_client() as client:
        yield client
