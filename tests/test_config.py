"""Tests for AccessConfig."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from accesscore import AccessConfig, ConfigurationError, LandingStrategy, LogLevel, load_access_config_from_env


class TestAccessConfig:
    """Tests for AccessConfig model."""

    def test_create_default_config(self) -> None:
        """Test creating an AccessConfig with defaults."""
        config = AccessConfig()
        assert config.log_level == LogLevel.INFO
        assert config.log_json is False
        assert config.service_name is None
        assert config.landing_strategy == LandingStrategy.ROUTE_ORDER
        assert config.forbidden_path == "/forbidden"
        assert config.strict_navigation_config is False
        assert config.redis_url is None
        assert config.snapshot_key_prefix == "accesscore:session"
        assert config.snapshot_ttl_seconds is None

    def test_create_custom_config(self) -> None:
        config = AccessConfig(
            log_level=LogLevel.DEBUG,
            log_json=True,
            service_name="portal",
            landing_strategy=LandingStrategy.MENU_ORDER,
            forbidden_path="/no-access",
            strict_navigation_config=True,
            redis_url="redis://localhost:6379/0",
            snapshot_key_prefix="portal:auth",
            snapshot_ttl_seconds=3600,
        )
        assert config.log_level == LogLevel.DEBUG
        assert config.landing_strategy == LandingStrategy.MENU_ORDER
        assert config.forbidden_path == "/no-access"
        assert config.snapshot_ttl_seconds == 3600

    def test_log_level_from_string(self) -> None:
        """Log level strings are case-insensitive."""
        assert AccessConfig(log_level="debug").log_level == LogLevel.DEBUG

    def test_log_level_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid log level"):
            AccessConfig(log_level="INVALID")

    def test_landing_strategy_from_string(self) -> None:
        assert AccessConfig(landing_strategy="MENU_ORDER").landing_strategy == LandingStrategy.MENU_ORDER

    def test_landing_strategy_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid landing strategy"):
            AccessConfig(landing_strategy="alphabetical")

    def test_forbidden_path_must_be_absolute(self) -> None:
        with pytest.raises(ValueError, match="forbidden_path"):
            AccessConfig(forbidden_path="forbidden")

    def test_snapshot_ttl_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="snapshot_ttl_seconds"):
            AccessConfig(snapshot_ttl_seconds=0)

    def test_redis_url_validation_valid(self) -> None:
        for url in ("redis://localhost:6379/0", "rediss://localhost:6379/0", "unix:///tmp/redis.sock"):
            assert AccessConfig(redis_url=url).redis_url == url

    def test_redis_url_validation_invalid(self) -> None:
        for url in ("http://localhost:6379", "localhost:6379"):
            with pytest.raises(ValueError, match="Redis URL must start with"):
                AccessConfig(redis_url=url)

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(Exception):  # Pydantic validation error
            AccessConfig(tenant_id="t-1")  # type: ignore[call-arg]


class TestLoadAccessConfigFromEnv:
    """Tests for load_access_config_from_env function."""

    @patch.dict(os.environ, {}, clear=True)
    def test_load_defaults(self) -> None:
        config = load_access_config_from_env()
        assert config == AccessConfig()

    @patch.dict(
        os.environ,
        {
            "LOG_LEVEL": "WARNING",
            "LOG_JSON": "true",
            "SERVICE_NAME": "portal",
            "ACCESS_LANDING_STRATEGY": "menu_order",
            "ACCESS_FORBIDDEN_PATH": "/403",
            "ACCESS_STRICT_NAVIGATION": "yes",
            "REDIS_URL": "redis://localhost:6379/1",
            "ACCESS_SNAPSHOT_PREFIX": "portal:session",
            "ACCESS_SNAPSHOT_TTL": "900",
        },
        clear=True,
    )
    def test_load_from_env(self) -> None:
        config = load_access_config_from_env()
        assert config.log_level == LogLevel.WARNING
        assert config.log_json is True
        assert config.service_name == "portal"
        assert config.landing_strategy == LandingStrategy.MENU_ORDER
        assert config.forbidden_path == "/403"
        assert config.strict_navigation_config is True
        assert config.redis_url == "redis://localhost:6379/1"
        assert config.snapshot_key_prefix == "portal:session"
        assert config.snapshot_ttl_seconds == 900

    def test_strict_navigation_variants(self) -> None:
        for value in ("true", "1", "yes", "on", "TRUE"):
            with patch.dict(os.environ, {"ACCESS_STRICT_NAVIGATION": value}, clear=True):
                assert load_access_config_from_env().strict_navigation_config is True
        with patch.dict(os.environ, {"ACCESS_STRICT_NAVIGATION": "off"}, clear=True):
            assert load_access_config_from_env().strict_navigation_config is False

    @patch.dict(os.environ, {"ACCESS_SNAPSHOT_TTL": "  "}, clear=True)
    def test_blank_ttl_means_no_expiry(self) -> None:
        assert load_access_config_from_env().snapshot_ttl_seconds is None

    @patch.dict(os.environ, {"ACCESS_SNAPSHOT_TTL": "soon"}, clear=True)
    def test_non_integer_ttl_raises_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError, match="ACCESS_SNAPSHOT_TTL") as exc_info:
            load_access_config_from_env()
        assert exc_info.value.code == "CONFIGURATION_ERROR"
        assert exc_info.value.details["variable"] == "ACCESS_SNAPSHOT_TTL"

    @patch.dict(os.environ, {"LOG_LEVEL": "LOUD"}, clear=True)
    def test_invalid_log_level_raises_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            load_access_config_from_env()
        assert exc_info.value.details["errors"]

    @patch.dict(os.environ, {"ACCESS_SNAPSHOT_TTL": "-5"}, clear=True)
    def test_negative_ttl_raises_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError, match="Invalid access configuration"):
            load_access_config_from_env()
