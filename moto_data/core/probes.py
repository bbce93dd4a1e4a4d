"""Dependency probes checked by the health aggregator."""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

import asyncpg
import redis.asyncio as redis_lib

# Keep-alive reply expected from a Redis PING.
PONG = "PONG"

# Zero-argument coroutine function; raises on failure, may return a detail.
ProbeCall = Callable[[], Awaitable[Optional[str]]]


class ProbeFailure(Exception):
    """A dependency answered, but not with what the probe expected."""


@dataclass(frozen=True)
class Probe:
    """A named, asynchronous dependency check."""

    name: str
    execute: ProbeCall


def _reply_text(reply: Any) -> str:
    # redis-py folds a PONG reply into True
    if reply is True:
        return PONG
    if isinstance(reply, bytes):
        return reply.decode("utf-8", errors="replace")
    return str(reply)


def postgres_probe(
    pool: Optional[asyncpg.Pool],
    name: str = "database",
) -> Probe:
    """Probe that runs ``SELECT 1`` on the pool; only an error counts as down."""

    async def execute() -> Optional[str]:
        if pool is None:
            raise ProbeFailure("not connected")
        await pool.fetchval("SELECT 1")
        return None

    return Probe(name=name, execute=execute)


def redis_probe(
    client: Optional[redis_lib.Redis],
    name: str = "redis",
    expected: str = PONG,
) -> Probe:
    """Probe that PINGs Redis and checks the reply against ``expected``."""

    async def execute() -> Optional[str]:
        if client is None:
            raise ProbeFailure("not connected")
        reply = await client.ping()
        if _reply_text(reply) != expected:
            raise ProbeFailure(
                f"Unexpected PING reply: {reply!r} (expected {expected!r})"
            )
        return None

    return Probe(name=name, execute=execute)
