"""Centralized configuration using Pydantic BaseSettings."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Hosts file consulted before the network
    hosts_file: str = "/etc/hosts"
    hosts_ttl: int = 86400

    # Overrides for the resolver library's own timers (None keeps its defaults)
    resolver_timeout: Optional[float] = None
    resolver_lifetime: Optional[float] = None

    # EDNS0 payload advertised when DNSSEC is requested
    edns_payload: int = 1232

    # HTTP boundary
    api_host: str = "0.0.0.0"
    api_port: int = 8053

    log_level: str = "INFO"

    # Sentry configuration (optional)
    sentry_dsn: Optional[str] = None
    sentry_environment: str = "production"
    sentry_traces_sample_rate: float = 1.0

    @property
    def use_sentry(self) -> bool:
        """Check if Sentry is configured."""
        return bool(self.sentry_dsn)

    @property
    def log_level_name(self) -> str:
        """Return the log level normalized for the logging module."""
        return self.log_level.strip().upper() or "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
