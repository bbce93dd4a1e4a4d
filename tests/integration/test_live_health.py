"""Integration tests for health checks against real backends.

Run against local Postgres and Redis:
    docker run -d -p 5432:5432 -e POSTGRES_USER=admin -e POSTGRES_PASSWORD=admin \
        -e POSTGRES_DB=moto_transport postgres:16
    docker run -d -p 6379:6379 redis:7
    pytest -m integration tests/integration/ -v
"""

import pytest
from fastapi.testclient import TestClient

from moto_api import create_app
from moto_data import DataLayer, DataLayerConfig, PostgresConfig, RedisConfig

# Mark all tests in this module as integration tests
pytestmark = pytest.mark.integration


@pytest.fixture
def config() -> DataLayerConfig:
    return DataLayerConfig(postgres=PostgresConfig(), redis=RedisConfig())


@pytest.fixture
async def data_layer(config: DataLayerConfig):
    async with DataLayer(config) as data:
        yield data


async def test_live_health_ok(data_layer: DataLayer):
    health = await data_layer.health()

    assert health.ok, health.as_dict()
    assert set(health.details) == {"database", "redis"}


async def test_unreachable_redis_is_down(config: DataLayerConfig):
    config.redis.port = 1  # nothing listens here
    async with DataLayer(config) as data:
        health = await data.health()

    assert not health.ok
    assert health.details["redis"].status == "down"
    assert health.details["database"].status == "up"


def test_health_endpoint(config: DataLayerConfig):
    app = create_app(data_layer_config=config)

    with TestClient(app) as client:
        response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
