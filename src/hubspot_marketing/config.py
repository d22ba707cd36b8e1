"""
Client configuration.

Values come from explicit arguments or from environment variables:

    HUBSPOT_ACCESS_TOKEN   private app / OAuth access token (required)
    HUBSPOT_API_BASE       API host, defaults to https://api.hubapi.com
    HUBSPOT_API_VERSION    version segment used in resource paths (v3)
    HUBSPOT_TIMEOUT        request timeout in seconds (30)
"""

import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

HUBSPOT_API_BASE = "https://api.hubapi.com"
HSFORMS_API_BASE = "https://api.hsforms.com"
DEFAULT_API_VERSION = "v3"
DEFAULT_TIMEOUT = 30.0


class ClientConfig(BaseModel):
    """
    Immutable transport settings.

    Derive variants with ``model_copy(update=...)`` instead of mutating a
    shared instance.
    """

    access_token: str = Field(repr=False, description="Bearer token sent on every request")
    base_url: str = Field(default=HUBSPOT_API_BASE, description="Scheme and host of the API")
    api_version: str = Field(default=DEFAULT_API_VERSION)
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)

    model_config = ConfigDict(frozen=True)

    @field_validator("access_token")
    @classmethod
    def require_token(cls, v):
        if not v:
            raise ValueError("HubSpot access token is required")
        return v

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v):
        return v.rstrip("/")

    @classmethod
    def from_env(cls, access_token: Optional[str] = None) -> "ClientConfig":
        """
        Build a config from environment variables.

        Args:
            access_token: Overrides HUBSPOT_ACCESS_TOKEN when given.

        Raises:
            ValueError: If no access token is available
        """
        token = access_token or os.environ.get("HUBSPOT_ACCESS_TOKEN")
        if not token:
            raise ValueError("HubSpot access token is required")

        return cls(
            access_token=token,
            base_url=os.environ.get("HUBSPOT_API_BASE", HUBSPOT_API_BASE),
            api_version=os.environ.get("HUBSPOT_API_VERSION", DEFAULT_API_VERSION),
            timeout=float(os.environ.get("HUBSPOT_TIMEOUT", DEFAULT_TIMEOUT)),
        )
