"""Concurrent health aggregation over registered probes."""

import asyncio
import logging
import time
from typing import Iterable

from moto_data.core.health import Health, ProbeResult, ProbeStatus
from moto_data.core.probes import Probe

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 3.0


class HealthAggregator:
    """Runs every registered probe concurrently and combines the outcomes.

    A probe that raises, times out or fails validation is reported as down.
    Nothing a probe does propagates out of :meth:`check_health`, apart from
    cancellation of the caller itself.
    """

    def __init__(self, probes: Iterable[Probe], timeout: float = DEFAULT_TIMEOUT) -> None:
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout}")
        self._probes = list(probes)
        names = [probe.name for probe in self._probes]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate probe names: {', '.join(duplicates)}")
        self._timeout = timeout

    @property
    def probes(self) -> list[Probe]:
        return list(self._probes)

    @property
    def timeout(self) -> float:
        return self._timeout

    async def _run(self, probe: Probe) -> ProbeResult:
        t0 = time.perf_counter()
        deadline = asyncio.timeout(self._timeout)
        try:
            async with deadline:
                detail = await probe.execute()
        except TimeoutError as e:
            if deadline.expired():
                detail = f"timed out after {self._timeout:g}s"
            else:
                # raised by the probe itself, before our deadline
                detail = str(e) or type(e).__name__
            status = ProbeStatus.DOWN
        except Exception as e:
            status, detail = ProbeStatus.DOWN, str(e) or type(e).__name__
        else:
            status = ProbeStatus.UP
        latency = round((time.perf_counter() - t0) * 1000, 1)

        if status is ProbeStatus.DOWN:
            logger.warning("Health probe %s is down: %s", probe.name, detail)
        return ProbeResult(name=probe.name, status=status, detail=detail, latency_ms=latency)

    async def check_health(self) -> Health:
        """Run all probes and return the aggregate report."""
        outcomes = await asyncio.gather(*(self._run(probe) for probe in self._probes))
        # gather preserves argument order, so results follow registration order
        health = Health(results={result.name: result for result in outcomes})
        logger.debug("Health check finished: %s", health.status.value)
        return health
