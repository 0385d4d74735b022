"""Shared test fixtures."""

import asyncio

import pytest
from ethph_academy.config import Config, PlaygroundConfig
from ethph_academy.core.playground import MockCompiler


async def no_sleep(delay: float) -> None:
    """Sleep replacement that returns immediately."""


class GatedSleep:
    """Sleep replacement that blocks until released.

    Lets tests observe a playground while its compile is still pending.
    """

    def __init__(self) -> None:
        self.delays: list[float] = []
        self._gate = asyncio.Event()

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)
        await self._gate.wait()

    def release(self) -> None:
        self._gate.set()


@pytest.fixture
def test_config() -> Config:
    """Create a configuration with a deterministic playground."""
    return Config(playground=PlaygroundConfig(compile_delay=1.5, failure_rate=0.0))


@pytest.fixture
def compiler() -> MockCompiler:
    """Compiler that never fails at random and never waits."""
    return MockCompiler(delay=1.5, failure_rate=0.1, rng=lambda: 0.99, sleep=no_sleep)


@pytest.fixture
def gate() -> GatedSleep:
    return GatedSleep()


@pytest.fixture
def gated_compiler(gate: GatedSleep) -> MockCompiler:
    """Compiler whose compiles stay pending until ``gate.release()``."""
    return MockCompiler(delay=1.5, failure_rate=0.0, sleep=gate)
