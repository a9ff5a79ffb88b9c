"""
Pytest configuration and fixtures for omnidecision tests.

Shared randomness sources for deterministic decision tests.
"""

import random
from collections.abc import Iterable

import pytest

# =========================================================================
# Randomness Sources
# =========================================================================


class ScriptedSource:
    """Randomness source replaying a fixed sequence of fractions in [0, 1)."""

    def __init__(self, fractions: Iterable[float]) -> None:
        self._fractions = list(fractions)
        self.calls = 0

    def random(self) -> float:
        value = self._fractions[self.calls]
        self.calls += 1
        return value


class FailingSource:
    """Randomness source whose every draw raises."""

    def random(self) -> float:
        raise OSError("entropy pool unavailable")


@pytest.fixture
def seeded_source() -> random.Random:
    """Provide a deterministic random.Random."""
    return random.Random(1234)


@pytest.fixture
def failing_source() -> FailingSource:
    return FailingSource()


@pytest.fixture
def scripted_source_factory():
    """Build a ScriptedSource from draws expressed in [0, 100)."""

    def _factory(*draws: float) -> ScriptedSource:
        return ScriptedSource(d / 100.0 for d in draws)

    return _factory
