"""Core components for data layer."""

from moto_data.core.aggregator import HealthAggregator
from moto_data.core.facade import DataLayer
from moto_data.core.health import Health, HealthStatus, ProbeResult, ProbeStatus
from moto_data.core.probes import PONG, Probe, ProbeFailure, postgres_probe, redis_probe

__all__ = [
    "DataLayer",
    "Health",
    "HealthStatus",
    "HealthAggregator",
    "ProbeResult",
    "ProbeStatus",
    "Probe",
    "ProbeFailure",
    "PONG",
    "postgres_probe",
    "redis_probe",
]
