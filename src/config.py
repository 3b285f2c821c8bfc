"""
Application configuration management using Pydantic Settings.
Handles environment variables and default values for the service.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="API host address")
    api_port: int = Field(default=8000, description="API port")
    api_debug: bool = Field(default=False, description="Enable debug mode")
    api_reload: bool = Field(default=False, description="Enable auto-reload")

    # Zonneplan API Configuration
    zonneplan_api_base_url: Optional[str] = Field(
        default=None,
        description="Base URL for the Zonneplan API"
    )
    zonneplan_api_secret: Optional[str] = Field(
        default=None,
        description="Shared secret sent as the 'secret' query parameter"
    )
    electricity_endpoint: str = Field(
        default="/energy-prices/electricity/upcoming",
        description="Endpoint path for electricity prices"
    )
    gas_endpoint: str = Field(
        default="/energy-prices/gas/upcoming",
        description="Endpoint path for gas prices"
    )

    # Upstream request policy
    upstream_timeout_seconds: float = Field(default=10.0, description="Timeout per upstream attempt")
    upstream_max_attempts: int = Field(default=3, ge=1, description="Attempts before giving up")
    upstream_backoff_seconds: float = Field(default=1.0, ge=0, description="First retry delay, doubled each retry")

    # Cache Configuration
    data_dir: str = Field(default="data", description="Directory holding the per-date JSON cache files")
    timezone: str = Field(default="Europe/Amsterdam", description="Timezone used to resolve today/tomorrow")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Log format (json/text)")


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process."""
    return Settings()
