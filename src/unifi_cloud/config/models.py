"""Pydantic models for client configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from unifi_cloud.config.constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT


class ClientProfile(BaseModel):
    """A named set of credentials and connection settings."""

    model_config = ConfigDict(validate_assignment=True)

    name: str = "default"
    api_key: str = Field(min_length=1, description="UniFi Site Manager API key")
    base_url: str = Field(
        default=DEFAULT_BASE_URL, description="API base URL, e.g. https://api.ui.com",
    )
    timeout: int = Field(
        default=DEFAULT_TIMEOUT, gt=0, description="Request timeout in seconds",
    )
    debug: bool = Field(default=False, description="Trace transport activity to stderr")

    @field_validator("base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")


class CLIConfig(BaseModel):
    """Root configuration model."""

    default_profile: str | None = None
    default_format: str = "table"
    profiles: dict[str, ClientProfile] = Field(default_factory=dict)
