"""Application configuration from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Cluster
    opensearch_url: str = Field(
        default="http://localhost:9200",
        description="OpenSearch / OpenDistro cluster URL",
    )
    opensearch_username: str = Field(default="", description="Basic auth username")
    opensearch_password: str = Field(default="", description="Basic auth password")
    opensearch_verify_certs: bool = Field(default=True, description="Verify TLS certificates")
    opensearch_ca_certs: str = Field(default="", description="Path to CA bundle")
    opensearch_timeout: float = Field(default=30.0, description="Request timeout in seconds")
    opensearch_version: str = Field(
        default="",
        description=(
            'Cluster version override, e.g. "opensearch:2.11.0" or "7.10.2"; '
            "a bare version below 6 means OpenSearch. Skips detection"
        ),
    )

    # Provider API
    api_host: str = Field(default="127.0.0.1", description="Provider API bind host")
    api_port: int = Field(default=8000, description="Provider API port")

    # Application
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Environment name",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
