"""Pytest configuration and shared fixtures."""

import asyncio
from typing import Optional

import pytest

from moto_data.core.probes import Probe, ProbeFailure


def make_probe(name: str, outcome: object = None, delay: float = 0.0) -> Probe:
    """Probe stub: returns after ``delay``, raising ``outcome`` if it is an exception."""

    async def execute() -> Optional[str]:
        if delay:
            await asyncio.sleep(delay)
        if isinstance(outcome, BaseException):
            raise outcome
        return None

    return Probe(name=name, execute=execute)


@pytest.fixture
def healthy_probes() -> list[Probe]:
    return [make_probe("database"), make_probe("redis")]


@pytest.fixture
def db_refused_probes() -> list[Probe]:
    return [
        make_probe("database", ConnectionRefusedError("Connection refused")),
        make_probe("redis"),
    ]


@pytest.fixture
def bad_pong_probes() -> list[Probe]:
    return [
        make_probe("database"),
        make_probe("redis", ProbeFailure("Unexpected PING reply: 'NOPE' (expected 'PONG')")),
    ]


@pytest.fixture
def probe_factory():
    return make_probe
