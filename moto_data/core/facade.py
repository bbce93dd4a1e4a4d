"""DataLayer façade - unified access to Postgres and Redis."""

import logging
from types import TracebackType
from typing import Optional, Self

import redis.asyncio as redis_lib
import asyncpg

from moto_data.config import DataLayerConfig
from moto_data.core.aggregator import HealthAggregator
from moto_data.core.health import Health
from moto_data.core.probes import Probe, postgres_probe, redis_probe

logger = logging.getLogger(__name__)


class DataLayer:
    """Unified façade - lifecycle + access to all backends."""

    def __init__(self, config: DataLayerConfig) -> None:
        self._config = config
        self._redis: Optional[redis_lib.Redis] = None
        self._postgres: Optional[asyncpg.Pool] = None

    @property
    def config(self) -> DataLayerConfig:
        return self._config

    @property
    def redis(self) -> redis_lib.Redis:
        """Native redis-py async client."""
        if self._redis is None:
            raise RuntimeError("DataLayer not started. Call start() first.")
        return self._redis

    @property
    def postgres(self) -> asyncpg.Pool:
        """Native asyncpg pool."""
        if self._postgres is None:
            raise RuntimeError("DataLayer not started. Call start() first.")
        return self._postgres

    async def _connect_redis(self) -> None:
        cfg = self._config.redis
        self._redis = redis_lib.Redis.from_url(cfg.url, password=cfg.password)
        logger.info("Redis client configured for %s:%s", cfg.host, cfg.port)

    async def _connect_postgres(self) -> None:
        cfg = self._config.postgres
        self._postgres = await asyncpg.create_pool(
            host=cfg.host,
            port=cfg.port,
            database=cfg.database,
            user=cfg.user,
            password=cfg.password,
            ssl="require" if cfg.ssl else None,
            min_size=cfg.min_connections,
            max_size=cfg.max_connections,
        )
        logger.info("Postgres pool connected to %s:%s/%s", cfg.host, cfg.port, cfg.database)

    async def _disconnect_redis(self) -> None:
        if self._redis:
            await self._redis.aclose()
            self._redis = None

    async def _disconnect_postgres(self) -> None:
        if self._postgres:
            await self._postgres.close()
            self._postgres = None

    async def start(self) -> None:
        """Connect all backends; on failure, close whatever was opened."""
        try:
            await self._connect_redis()
            await self._connect_postgres()
        except BaseException:
            await self.stop()
            raise

    async def stop(self) -> None:
        """Graceful shutdown."""
        await self._disconnect_redis()
        await self._disconnect_postgres()
        logger.info("DataLayer stopped")

    def probes(self) -> list[Probe]:
        """Probes for the critical dependencies, bound to the current clients."""
        return [
            postgres_probe(self._postgres, name="database"),
            redis_probe(self._redis, name="redis"),
        ]

    @property
    def aggregator(self) -> HealthAggregator:
        return HealthAggregator(self.probes(), timeout=self._config.health.timeout)

    async def health(self) -> Health:
        """Aggregate health check across all backends."""
        return await self.aggregator.check_health()

    async def __aenter__(self) -> Self:
        await self.start()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        await self.stop()
