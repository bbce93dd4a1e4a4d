"""Tests for configuration dataclasses."""

from moto_data.config import (
    DataLayerConfig,
    HealthConfig,
    PostgresConfig,
    RedisConfig,
)
from moto_api.config import WebAppConfig


def test_redis_config_defaults():
    config = RedisConfig()
    assert config.host == "localhost"
    assert config.port == 6379
    assert config.db == 0
    assert config.password is None


def test_redis_config_url():
    config = RedisConfig(host="cache.internal", port=6380, db=2)
    assert config.url == "redis://cache.internal:6380/2"


def test_postgres_config_defaults():
    config = PostgresConfig()
    assert config.host == "localhost"
    assert config.port == 5432
    assert config.database == "moto_transport"
    assert config.user == "admin"
    assert config.ssl is False
    assert config.min_connections == 2
    assert config.max_connections == 10


def test_health_config_defaults():
    assert HealthConfig().timeout == 3.0


def test_data_layer_config():
    config = DataLayerConfig()
    assert config.redis.host == "localhost"
    assert config.postgres.database == "moto_transport"
    assert config.health.timeout == 3.0


def test_config_override():
    config = RedisConfig(host="redis.prod.internal", port=6380, password="secret")
    assert config.host == "redis.prod.internal"
    assert config.port == 6380
    assert config.password == "secret"


def test_webapp_config_defaults():
    config = WebAppConfig()
    assert config.port == 3000
    assert config.docs_url == "/api/docs"
    assert config.cors_origins is None
