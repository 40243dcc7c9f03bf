"""
Configuration management for Gemini client.

Loads settings from environment variables with validation.
"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


PRODUCTION_API_URL = "https://api.gemini.com"
SANDBOX_API_URL = "https://api.sandbox.gemini.com"
API_VERSION = "1"

# Authenticated request headers
HEADER_API_KEY = "X-GEMINI-APIKEY"
HEADER_PAYLOAD = "X-GEMINI-PAYLOAD"
HEADER_SIGNATURE = "X-GEMINI-SIGNATURE"


class GeminiSettings(BaseSettings):
    """
    Gemini client settings.

    Loads from environment variables with GEMINI_ prefix.
    """
    model_config = SettingsConfigDict(
        env_prefix="GEMINI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # API URLs
    api_url: str = Field(default=PRODUCTION_API_URL, description="Production REST URL")
    sandbox_api_url: str = Field(default=SANDBOX_API_URL, description="Sandbox REST URL")
    api_version: str = Field(default=API_VERSION, description="API version segment")
    use_sandbox: bool = Field(default=False, description="Route requests to sandbox")

    # Default credentials (sessions override these per account)
    api_key: Optional[str] = Field(None, description="Default API key")
    api_secret: Optional[str] = Field(None, description="Default API secret")
    authenticated_api_support: bool = Field(
        default=True,
        description="Allow authenticated requests"
    )

    # Timeouts (enforced by the transport only)
    request_timeout: float = Field(default=30.0, ge=1.0, description="Request timeout (seconds)")
    connect_timeout: float = Field(default=10.0, ge=1.0, description="Connection timeout (seconds)")

    # Connection pooling
    pool_connections: int = Field(default=10, ge=1, le=200,
                                  description="HTTP connection pool size")
    pool_maxsize: int = Field(default=20, ge=1, le=500,
                              description="Max connections per pool")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_requests: bool = Field(default=False, description="Log signed payloads and raw responses")

    # Metrics
    enable_metrics: bool = Field(default=False, description="Enable Prometheus metrics")
    metrics_port: Optional[int] = Field(None, ge=1024, le=65535,
                                        description="Metrics server port (no server if unset)")

    @property
    def base_url(self) -> str:
        """URL selected by use_sandbox."""
        return self.sandbox_api_url if self.use_sandbox else self.api_url

    def __repr__(self) -> str:
        """Safe repr without sensitive data."""
        return (
            f"GeminiSettings("
            f"api_url={self.base_url}, "
            f"api_version={self.api_version}, "
            f"has_credentials={bool(self.api_key and self.api_secret)}"
            ")"
        )


# Advisory rate limits. Nothing in this package enforces them; they are
# exposed for a caller-supplied throttle.
# Source: https://docs.gemini.com/rest-api/#rate-limits
RATE_LIMITS = {
    "public": {"limit": 120, "window": 60, "per_second": 1},
    "private": {"limit": 600, "window": 60, "per_second": 5},
}

# Too many requests returns this
RATE_LIMIT_STATUS_CODE = 429


def get_settings() -> GeminiSettings:
    """
    Get Gemini settings.

    Returns:
        Validated settings instance
    """
    return GeminiSettings()


def get_rate_limit(scope: str) -> dict:
    """
    Get advisory rate limit configuration.

    Args:
        scope: "public" or "private"

    Returns:
        Rate limit config dict (public limits for unknown scopes)
    """
    return RATE_LIMITS.get(scope, RATE_LIMITS["public"])
