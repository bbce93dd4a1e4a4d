"""Configuration dataclasses for data layer backends."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RedisConfig:
    """Redis connection configuration."""

    host: str = "localhost"
    port: int = 6379
    db: int = 0
    password: Optional[str] = None

    @property
    def url(self) -> str:
        return f"redis://{self.host}:{self.port}/{self.db}"


@dataclass
class PostgresConfig:
    """Postgres connection configuration."""

    host: str = "localhost"
    port: int = 5432
    database: str = "moto_transport"
    user: str = "admin"
    password: Optional[str] = "admin"
    ssl: bool = False
    min_connections: int = 2
    max_connections: int = 10


@dataclass
class HealthConfig:
    """Health check configuration."""

    timeout: float = 3.0  # seconds, per probe


@dataclass
class DataLayerConfig:
    """Aggregate configuration for all data layer backends."""

    postgres: PostgresConfig = field(default_factory=PostgresConfig)
    redis: RedisConfig = field(default_factory=RedisConfig)
    health: HealthConfig = field(default_factory=HealthConfig)
