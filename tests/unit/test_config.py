"""Unit tests for configuration management."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from fake_braspag.config import Settings
from fake_braspag.infrastructure import InMemoryKeyValueStore, RedisKeyValueStore, create_store


def test_settings_default_values():
    """Test that Settings loads with default values."""
    with patch.dict(os.environ, {}, clear=True):
        settings = Settings(_env_file=None)

    assert settings.store_backend == "memory"
    assert settings.redis_url == "redis://localhost:6379/0"
    assert settings.order_key_prefix == "fake-braspag.order."
    assert settings.log_level == "INFO"
    assert settings.environment == "development"
    assert settings.service_name == "fake-braspag"
    assert settings.port == 9292


def test_settings_from_environment():
    """Test that Settings can be overridden by environment variables."""
    env_vars = {
        "STORE_BACKEND": "redis",
        "REDIS_URL": "redis://cache:6379/2",
        "LOG_LEVEL": "DEBUG",
        "ENVIRONMENT": "test",
        "PORT": "8080",
    }

    with patch.dict(os.environ, env_vars, clear=False):
        settings = Settings()

    assert settings.store_backend == "redis"
    assert settings.redis_url == "redis://cache:6379/2"
    assert settings.log_level == "DEBUG"
    assert settings.environment == "test"
    assert settings.port == 8080


def test_settings_rejects_unknown_backend():
    with pytest.raises(ValidationError):
        Settings(store_backend="postgres")


def test_settings_normalizes_backend_case():
    assert Settings(store_backend=" Redis ").store_backend == "redis"


def test_settings_backend_case_from_environment():
    with patch.dict(os.environ, {"STORE_BACKEND": "REDIS"}, clear=True):
        settings = Settings(_env_file=None)

    assert settings.store_backend == "redis"


class TestCreateStore:
    def test_memory_backend(self):
        store = create_store(Settings(store_backend="memory"))

        assert isinstance(store, InMemoryKeyValueStore)

    def test_redis_backend(self):
        # from_url does not connect until the first command
        store = create_store(Settings(store_backend="redis", redis_url="redis://localhost:6379/0"))

        assert isinstance(store, RedisKeyValueStore)

    def test_mixed_case_backend_selects_redis(self):
        store = create_store(Settings(store_backend="Redis", redis_url="redis://localhost:6379/0"))

        assert isinstance(store, RedisKeyValueStore)
