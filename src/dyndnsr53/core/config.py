"""Centralized configuration using Pydantic BaseSettings."""

from functools import lru_cache
from typing import Optional, Tuple

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PORT = 8080


def _split_listen(listen: str) -> Tuple[str, int]:
    """Split a ``host:port`` listen address; an empty host means all interfaces."""
    listen = listen.strip()

    if not listen:
        return "0.0.0.0", DEFAULT_PORT

    host, sep, port = listen.rpartition(":")

    if not sep:
        # Bare host, no port
        return listen, DEFAULT_PORT

    host = host.strip("[]") or "0.0.0.0"

    return host, int(port) if port else DEFAULT_PORT


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # HTTP server
    listen: str = ":8080"
    log_level: str = "INFO"

    # Record provider
    provider: str = "none"  # none, route53
    zone_id: Optional[str] = None
    aws_region: Optional[str] = None
    provider_timeout: float = 10.0
    record_ttl: int = 60

    # DynDNS client policy
    dyndns_username: str = ""
    dyndns_password: SecretStr = SecretStr("")
    user_agent_token: str = "dyndnsr53-client"

    # Sentry configuration (optional)
    sentry_dsn: Optional[str] = None
    sentry_environment: str = "production"
    sentry_traces_sample_rate: float = 1.0

    @property
    def listen_host(self) -> str:
        """Return the interface to bind."""
        return _split_listen(self.listen)[0]

    @property
    def listen_port(self) -> int:
        """Return the TCP port to bind."""
        return _split_listen(self.listen)[1]

    @property
    def provider_kind(self) -> str:
        """Return the normalized provider kind."""
        return (self.provider or "none").strip().lower()

    @property
    def uses_route53(self) -> bool:
        """Check if the Route 53 provider is selected."""
        return self.provider_kind == "route53"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
