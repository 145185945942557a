"""Shared configuration base classes.

Common settings groups reused by every tracker service so that environment
variable names stay consistent between deployments.
"""

from pydantic_settings import BaseSettings


class BaseLoggingConfig(BaseSettings):
    """Common logging configuration for all services."""

    app_log_level: str = "INFO"
    app_log_redaction_patterns: list[str] = [
        "password",
        "token",
        "secret",
        "authorization",
        "cookie",
        "session",
    ]
    app_environment: str = "production"


class BaseRedisConfig(BaseSettings):
    """Connection settings for the Redis instance holding tracker counters."""

    redis_host: str = "redis"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: str | None = None
    redis_connect_retries: int = 6


class BaseServiceConfig(BaseLoggingConfig, BaseRedisConfig):
    """Base configuration combining logging and Redis settings.

    The otel_service_name should be overridden by each service.
    """

    otel_service_name: str = "unknown"  # Should be overridden by service


__all__ = ["BaseLoggingConfig", "BaseRedisConfig", "BaseServiceConfig"]
