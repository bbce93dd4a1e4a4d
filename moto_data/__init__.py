"""Data layer for Postgres and Redis, with dependency health checks."""

from moto_data.config import (
    DataLayerConfig,
    HealthConfig,
    PostgresConfig,
    RedisConfig,
)
from moto_data.core import (
    DataLayer,
    Health,
    HealthAggregator,
    HealthStatus,
    Probe,
    ProbeFailure,
    ProbeResult,
    ProbeStatus,
)

__all__ = [
    # Façade
    "DataLayer",
    # Config
    "DataLayerConfig",
    "HealthConfig",
    "PostgresConfig",
    "RedisConfig",
    # Health
    "Health",
    "HealthAggregator",
    "HealthStatus",
    "Probe",
    "ProbeFailure",
    "ProbeResult",
    "ProbeStatus",
]
