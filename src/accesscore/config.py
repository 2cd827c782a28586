"""Configuration contract for accesscore.

Pydantic-validated settings for logging, landing-route selection,
navigation-config integrity checking and session snapshot persistence.

All settings MUST come through this model. Direct os.environ/os.getenv
usage is confined to :func:`load_access_config_from_env`.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigurationError


_TRUTHY = ("true", "1", "yes", "on")


class LogLevel(str, Enum):
    """Standard log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LandingStrategy(str, Enum):
    """How the default landing route is picked when the policy names none.

    - ROUTE_ORDER: first accessible key in route-tree traversal order.
    - MENU_ORDER: first route key of the filtered menu tree.
    """

    ROUTE_ORDER = "route_order"
    MENU_ORDER = "menu_order"


class AccessConfig(BaseModel):
    """Settings for access resolution and the session container.

    Environment variables:
        LOG_LEVEL                 — DEBUG | INFO | WARNING | ERROR | CRITICAL
        LOG_JSON                  — JSON log format (true/false)
        SERVICE_NAME              — logger identification
        ACCESS_LANDING_STRATEGY   — route_order | menu_order
        ACCESS_FORBIDDEN_PATH     — path used when nothing is accessible
        ACCESS_STRICT_NAVIGATION  — raise on route/menu integrity issues
        REDIS_URL                 — snapshot store (optional)
        ACCESS_SNAPSHOT_PREFIX    — Redis key prefix for snapshots
        ACCESS_SNAPSHOT_TTL       — snapshot TTL in seconds
    """

    # Logging
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level",
    )
    log_json: bool = Field(
        default=False,
        description="Use JSON log format (default: plain text)",
    )
    service_name: Optional[str] = Field(
        default=None,
        description="Service name for logger identification",
    )

    # Resolution
    landing_strategy: LandingStrategy = Field(
        default=LandingStrategy.ROUTE_ORDER,
        description="Fallback landing selection when the policy names no landing route",
    )
    forbidden_path: str = Field(
        default="/forbidden",
        description="Path to route to when no landing route is accessible",
    )
    strict_navigation_config: bool = Field(
        default=False,
        description="Raise NavigationConfigError on route/menu integrity issues instead of logging",
    )

    # Snapshot persistence
    redis_url: Optional[str] = Field(
        default=None,
        description="Redis connection URL for session snapshots (e.g., redis://localhost:6379/0)",
    )
    snapshot_key_prefix: str = Field(
        default="accesscore:session",
        description="Key prefix for persisted session snapshots",
    )
    snapshot_ttl_seconds: Optional[int] = Field(
        default=None,
        description="Snapshot TTL in seconds (None = no expiry)",
    )

    @field_validator("redis_url")
    @classmethod
    def validate_redis_url(cls, v: Optional[str]) -> Optional[str]:
        """Validate Redis URL format."""
        if v is None:
            return v
        if not v.startswith(("redis://", "rediss://", "unix://")):
            raise ValueError("Redis URL must start with redis://, rediss://, or unix://")
        return v

    @field_validator("forbidden_path")
    @classmethod
    def validate_forbidden_path(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError("forbidden_path must be an absolute path starting with '/'")
        return v

    @field_validator("snapshot_ttl_seconds")
    @classmethod
    def validate_snapshot_ttl(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v <= 0:
            raise ValueError("snapshot_ttl_seconds must be positive")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | LogLevel) -> LogLevel:
        """Convert string to LogLevel enum."""
        if isinstance(v, LogLevel):
            return v
        if isinstance(v, str):
            try:
                return LogLevel[v.upper()]
            except KeyError:
                raise ValueError(f"Invalid log level: {v}. Must be one of {[e.value for e in LogLevel]}")
        raise ValueError(f"Log level must be string or LogLevel enum, got {type(v)}")

    @field_validator("landing_strategy", mode="before")
    @classmethod
    def validate_landing_strategy(cls, v: str | LandingStrategy) -> LandingStrategy:
        if isinstance(v, LandingStrategy):
            return v
        if isinstance(v, str):
            try:
                return LandingStrategy(v.lower())
            except ValueError:
                raise ValueError(
                    f"Invalid landing strategy: {v}. Must be one of {[e.value for e in LandingStrategy]}"
                )
        raise ValueError(f"Landing strategy must be string or LandingStrategy enum, got {type(v)}")

    model_config = {
        "use_enum_values": True,
        "extra": "forbid",  # Prevent accidental extra fields
    }


def load_access_config_from_env() -> AccessConfig:
    """Load configuration from environment variables.

    This is the ONLY place where os.getenv is allowed.

    Returns:
        AccessConfig instance with values from environment or defaults.

    Raises:
        ConfigurationError: if any variable holds an invalid value.
    """
    import os

    ttl_raw = os.getenv("ACCESS_SNAPSHOT_TTL", "").strip()
    try:
        ttl = int(ttl_raw) if ttl_raw else None
    except ValueError as e:
        raise ConfigurationError(
            f"ACCESS_SNAPSHOT_TTL must be an integer, got {ttl_raw!r}",
            variable="ACCESS_SNAPSHOT_TTL",
        ) from e

    try:
        return AccessConfig(
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_json=os.getenv("LOG_JSON", "false").lower() in _TRUTHY,
            service_name=os.getenv("SERVICE_NAME"),
            landing_strategy=os.getenv("ACCESS_LANDING_STRATEGY", "route_order"),
            forbidden_path=os.getenv("ACCESS_FORBIDDEN_PATH", "/forbidden"),
            strict_navigation_config=os.getenv("ACCESS_STRICT_NAVIGATION", "false").lower() in _TRUTHY,
            redis_url=os.getenv("REDIS_URL"),
            snapshot_key_prefix=os.getenv("ACCESS_SNAPSHOT_PREFIX", "accesscore:session"),
            snapshot_ttl_seconds=ttl,
        )
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid access configuration in environment",
            errors=e.errors(include_url=False),
        ) from e


__all__ = [
    "AccessConfig",
    "LandingStrategy",
    "LogLevel",
    "load_access_config_from_env",
]
