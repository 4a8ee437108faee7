"""
Module: settings.py
Description: Client configuration using pydantic-settings.

Loads credentials, the target cloud and transport tuning from IRON_*
environment variables with validation and defaults. Supports .env files
for local development.
"""

from functools import lru_cache
from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Cloud(BaseModel):
    """
    Network target of the queue service.

    Attributes:
        scheme: URL scheme (http or https)
        host: Service hostname
        port: Service port
    """

    model_config = ConfigDict(frozen=True)

    scheme: str = Field(default="https", pattern=r"^https?$")
    host: str = Field(..., min_length=1)
    port: int = Field(default=443, ge=1, le=65535)

    IRON_AWS_US_EAST: ClassVar["Cloud"]
    IRON_RACKSPACE_DFW: ClassVar["Cloud"]


Cloud.IRON_AWS_US_EAST = Cloud(scheme="https", host="mq-aws-us-east-1.iron.io", port=443)
Cloud.IRON_RACKSPACE_DFW = Cloud(scheme="https", host="mq-rackspace-dfw.iron.io", port=443)


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="IRON_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Credentials
    project_id: Optional[str] = Field(default=None, description="IronMQ project identifier")
    token: Optional[str] = Field(default=None, description="OAuth token")

    # Cloud target
    scheme: str = Field(default="https", pattern=r"^https?$", description="URL scheme")
    host: str = Field(default="mq-aws-us-east-1.iron.io", description="Service hostname")
    port: int = Field(default=443, ge=1, le=65535, description="Service port")
    api_version: str = Field(default="1", description="API version path segment")

    # Transport settings
    user_agent: str = Field(default="IronMQ Python Client", description="User-Agent header value")
    request_timeout: float = Field(
        default=60.0,
        gt=0,
        description="Socket deadline in seconds for a single HTTP exchange"
    )
    max_retries: int = Field(
        default=5,
        ge=0,
        le=10,
        description="Maximum number of retries on HTTP 503"
    )

    # Queue settings
    body_encoding: str = Field(
        default="deflate",
        description="Message body encoding used by queues (deflate or plain)"
    )

    log_level: str = Field(default="WARNING", description="Logging level")

    @field_validator('body_encoding')
    @classmethod
    def validate_body_encoding(cls, v: str) -> str:
        """Validate body encoding is a known strategy name."""
        valid_encodings = ['deflate', 'plain']
        if v.lower() not in valid_encodings:
            raise ValueError(f"body_encoding must be one of: {', '.join(valid_encodings)}")
        return v.lower()

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid logging level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {', '.join(valid_levels)}")
        return v.upper()

    @property
    def cloud(self) -> Cloud:
        """Cloud target assembled from scheme, host and port."""
        return Cloud(scheme=self.scheme, host=self.host, port=self.port)


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Settings loaded from the environment on first use."""
    return Settings()
