"""
Keep-alive configuration settings.

Controls the background pinger that keeps idle hosting instances awake.

Dependencies: pydantic_settings
System role: Keep-alive scheduler configuration
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class KeepAliveSettings(BaseSettings):
    """Background health-ping settings."""

    model_config = SettingsConfigDict(
        env_prefix="KEEP_ALIVE_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    enabled: bool = Field(
        default=False,
        description="Force the pinger on outside production",
    )
    interval_minutes: float = Field(
        default=14,
        description="Minutes between pings (one less than the host idle timeout)",
    )
    initial_delay_seconds: float = Field(
        default=60,
        description="Delay before the first ping",
    )
    health_endpoint: str = Field(default="/health", description="Path that is pinged")
    # First set variable wins; RENDER_EXTERNAL_URL is provided by Render.
    server_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("KEEP_ALIVE_SERVER_URL", "RENDER_EXTERNAL_URL", "SERVER_URL"),
        description="Public base URL of this service",
    )
    timeout_seconds: float = Field(default=30, description="Per-ping HTTP timeout")
