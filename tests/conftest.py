"""Shared test fixtures."""

from dataclasses import dataclass, field
from typing import NamedTuple

import pytest

from choreograph import Hold, Phrase, RampTo, Sequence


class Vec2(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class RecordingPhrase(Phrase[float]):
    """Linear phrase that records every time it is queried at."""

    calls: list = field(default_factory=list, compare=False)

    def value(self, at_time: float) -> float:
        self.calls.append(at_time)
        t = self.progress(at_time)
        return self.start_value + (self.end_value - self.start_value) * t


@dataclass
class StubSource:
    """Minimal third-party Source: a line from 0 to 10 over [1, 3]."""

    start_time: float = 1.0
    end_time: float = 3.0
    start_value: float = 0.0
    end_value: float = 10.0

    def value(self, at_time: float) -> float:
        t = min(max((at_time - self.start_time) / (self.end_time - self.start_time), 0.0), 1.0)
        return self.start_value + (self.end_value - self.start_value) * t


@pytest.fixture
def empty_sequence() -> Sequence[float]:
    return Sequence(0.0)


@pytest.fixture
def ramp_sequence() -> Sequence[float]:
    """0 -> 1 over two seconds."""
    return Sequence(0.0).then(1.0, 2.0, RampTo)


@pytest.fixture
def chained_sequence() -> Sequence[float]:
    """0 -> 1 over 2s, hold 1 for 1s, 1 -> 3 over 2s (ends at t=5)."""
    return (
        Sequence(0.0)
        .then(1.0, 2.0, RampTo)
        .then(1.0, 1.0, Hold)
        .then(3.0, 2.0, RampTo)
    )
