"""Environment-driven settings."""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from .session import ShopifySession
from .transport import Transport


class ShopifySettings(BaseSettings):
    """Credentials and knobs read from ``SHOPIFY_*`` variables or a ``.env`` file."""

    model_config = SettingsConfigDict(
        env_prefix="SHOPIFY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = Field(..., min_length=1, description="Store URL, e.g. https://shop.myshopify.com")
    api_key: str = Field(..., min_length=1)
    password: SecretStr
    api_version: str = "2025-01"
    timeout: float = Field(default=30.0, gt=0, description="Per-request timeout (seconds).")
    retries: int = Field(
        default=2,
        ge=0,
        le=10,
        description="Caller-side retries for retry-worthy failures (CLI only).",
    )
    log_level: str = "WARNING"

    @classmethod
    def from_env_file(cls, env_file: Union[str, Path, None]) -> "ShopifySettings":
        """Load settings, reading ``env_file`` instead of the default ``.env``."""
        return cls(_env_file=env_file)

    def session(self, transport: Optional[Transport] = None) -> ShopifySession:
        kwargs = {"transport": transport} if transport is not None else {}
        return ShopifySession(
            self.base_url,
            self.api_key,
            self.password.get_secret_value(),
            api_version=self.api_version,
            timeout=self.timeout,
            **kwargs,
        )
