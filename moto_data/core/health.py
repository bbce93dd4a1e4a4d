"""Health check types."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional


class ProbeStatus(str, Enum):
    UP = "up"
    DOWN = "down"


class HealthStatus(str, Enum):
    OK = "ok"
    ERROR = "error"


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of one probe execution."""

    name: str
    status: ProbeStatus
    detail: Optional[str] = None
    latency_ms: float = 0.0

    @property
    def up(self) -> bool:
        return self.status is ProbeStatus.UP

    def as_dict(self) -> dict[str, Any]:
        entry: dict[str, Any] = {"status": self.status.value, "latency_ms": self.latency_ms}
        if self.detail:
            entry["message"] = self.detail
        return entry


@dataclass(frozen=True)
class Health:
    """Aggregate health status across all registered probes.

    ``status`` is ``error`` if and only if at least one result is down.
    Results are keyed by probe name.
    """

    results: Mapping[str, ProbeResult] = field(default_factory=dict)

    @property
    def status(self) -> HealthStatus:
        if all(result.up for result in self.results.values()):
            return HealthStatus.OK
        return HealthStatus.ERROR

    @property
    def ok(self) -> bool:
        return self.status is HealthStatus.OK

    @property
    def info(self) -> dict[str, ProbeResult]:
        return {name: r for name, r in self.results.items() if r.up}

    @property
    def error(self) -> dict[str, ProbeResult]:
        return {name: r for name, r in self.results.items() if not r.up}

    @property
    def details(self) -> Mapping[str, ProbeResult]:
        return self.results

    def as_dict(self) -> dict[str, Any]:
        """Serialize in the ``status/info/error/details`` health-check shape."""
        return {
            "status": self.status.value,
            "info": {name: r.as_dict() for name, r in self.info.items()},
            "error": {name: r.as_dict() for name, r in self.error.items()},
            "details": {name: r.as_dict() for name, r in self.details.items()},
        }
