"""Client configuration for the Rentdesk API client."""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ============================================
# Backend Endpoint
# ============================================
RENTDESK_API_BASE_URL = 'RENTDESK_API_BASE_URL'
DEFAULT_RENTDESK_API_BASE_URL = ''

# ============================================
# Transport
# ============================================
RENTDESK_API_TIMEOUT = 'RENTDESK_API_TIMEOUT'
DEFAULT_RENTDESK_API_TIMEOUT = 30.0

DEFAULT_HEADERS: dict[str, str] = {
    "Content-Type": "application/json",
}

# ============================================
# Credential Headers
# ============================================
HEADER_AUTHORIZATION = "Authorization"
HEADER_AUTHORIZATION_UID = "authorization-uid"


class ClientConfig(BaseModel):
    """
    Immutable settings shared by every request a client sends.

    Build it once at process start, usually with ``from_env()``, and hand the
    same instance to the client.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_RENTDESK_API_BASE_URL
    headers: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_HEADERS))
    timeout: float = DEFAULT_RENTDESK_API_TIMEOUT

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientConfig":
        """
        Resolve configuration from environment variables.

        A missing base URL is not an error here; requests against an empty
        base URL fail at the transport.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Returns:
            Frozen client configuration
        """
        env = os.environ if environ is None else environ
        timeout = env.get(RENTDESK_API_TIMEOUT)
        return cls(
            base_url=env.get(RENTDESK_API_BASE_URL, DEFAULT_RENTDESK_API_BASE_URL),
            timeout=float(timeout) if timeout else DEFAULT_RENTDESK_API_TIMEOUT,
        )
