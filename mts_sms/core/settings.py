"""Library configuration using pydantic-settings.

Environment variables are the only source. `get_settings()` returns a cached
instance; call `get_settings.cache_clear()` after changing the environment
(tests do this through a fixture).
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SEND_ENDPOINT = "https://api.mts.ru/client-omni-adapter_production/1.0.2/mcom/messageManagement/messages"
DEFAULT_STATUS_ENDPOINT_TEMPLATE = (
    "https://api.mts.ru/client-omni-adapter_production/1.0.2/mcom/messageManagement/messages/status?messageIDs=%s"
)


class Settings(BaseSettings):
    # Gateway
    MTS_SEND_ENDPOINT: str = Field(DEFAULT_SEND_ENDPOINT, description="POST endpoint for message batches")
    MTS_STATUS_ENDPOINT_TEMPLATE: str = Field(
        DEFAULT_STATUS_ENDPOINT_TEMPLATE,
        description="GET endpoint for statuses; %s is replaced with comma-joined message IDs",
    )
    MTS_TIMEOUT_SECONDS: float = Field(10.0, gt=0, description="Per-call HTTP timeout")
    MTS_API_TOKEN: Optional[str] = Field(None, description="Bearer token used when a call does not pass one")
    MTS_DEFAULT_NAMING: str = Field("", description="Campaign label for single sends")

    # Provider selection
    SMS_PROVIDER: str = Field("mts", description="mts | noop")

    model_config = SettingsConfigDict(env_file=None, case_sensitive=False, extra="ignore")

    @field_validator("MTS_STATUS_ENDPOINT_TEMPLATE")
    @classmethod
    def _template_has_placeholder(cls, v: str) -> str:
        if v.count("%s") != 1:
            raise ValueError("MTS_STATUS_ENDPOINT_TEMPLATE must contain exactly one %s placeholder")
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton settings instance."""
    return Settings()


__all__ = ["Settings", "get_settings", "DEFAULT_SEND_ENDPOINT", "DEFAULT_STATUS_ENDPOINT_TEMPLATE"]
