"""Source protocol and the built-in phrase kinds."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Generic, Protocol, Self, TypeVar, runtime_checkable

from .easing import EaseFn, linear
from .interpolate import LerpFn, lerp

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Source(Protocol[T_co]):
    """Anything that produces a value over a bounded span of time."""

    @property
    def start_time(self) -> float: ...

    @property
    def end_time(self) -> float: ...

    @property
    def start_value(self) -> T_co: ...

    @property
    def end_value(self) -> T_co: ...

    def value(self, at_time: float) -> T_co: ...


@dataclass(frozen=True)
class Phrase(ABC, Generic[T]):
    """One immutable motion between two values over ``[start_time, end_time]``.

    Subclasses implement ``value``. A sequence only ever queries a phrase
    inside its own interval, so behaviour outside it is up to the kind.
    """

    start_time: float
    end_time: float
    start_value: T
    end_value: T

    def __post_init__(self) -> None:
        if math.isnan(self.start_time) or math.isnan(self.end_time):
            raise ValueError("Phrase times must not be NaN")
        if self.end_time < self.start_time:
            raise ValueError(
                f"Phrase ends before it starts ({self.end_time} < {self.start_time})"
            )

    @property
    def duration(self) -> float:
        return self.end_time - self.start_time

    def progress(self, at_time: float) -> float:
        """Normalized time within the phrase, clamped to ``[0, 1]``.

        Zero-duration phrases have already completed at their start time.
        """
        if at_time < self.start_time:
            return 0.0
        if at_time >= self.end_time:
            return 1.0
        return (at_time - self.start_time) / self.duration

    def retimed(self, start_time: float, end_time: float) -> Self:
        """Return a copy of this phrase spanning ``[start_time, end_time]``."""
        return replace(self, start_time=start_time, end_time=end_time)

    def shifted(self, offset: float) -> Self:
        """Return a copy of this phrase moved *offset* seconds along the timeline."""
        return self.retimed(self.start_time + offset, self.end_time + offset)

    @abstractmethod
    def value(self, at_time: float) -> T: ...


@dataclass(frozen=True)
class Hold(Phrase[T]):
    """Jumps to ``end_value`` at its start and stays there."""

    def value(self, at_time: float) -> T:
        return self.end_value


@dataclass(frozen=True)
class RampTo(Phrase[T]):
    """Blends from ``start_value`` to ``end_value`` along an easing curve."""

    ease_fn: EaseFn = field(default=linear)
    lerp_fn: LerpFn = field(default=lerp)

    def value(self, at_time: float) -> T:
        t = self.progress(at_time)
        if t >= 1.0:
            return self.end_value
        return self.lerp_fn(self.start_value, self.end_value, self.ease_fn(t))


@dataclass(frozen=True)
class Procedural(Phrase[T]):
    """Computes its value with ``fn(start_value, end_value, progress)``.

    ``fn`` should return ``end_value`` at progress 1 to keep the sequence
    continuous at the phrase's end.
    """

    fn: Callable[[T, T, float], T] = field(default=lerp)

    def value(self, at_time: float) -> T:
        return self.fn(self.start_value, self.end_value, self.progress(at_time))


@dataclass(frozen=True)
class Nested(Phrase[T]):
    """Plays a whole source, shifted so it starts at ``start_time``.

    Lets one sequence's output act as a single phrase of another.
    """

    source: Source[T]

    @classmethod
    def place(cls, source: Source[T], at_time: float) -> Nested[T]:
        """Wrap *source* so that its start lands on *at_time*."""
        return cls(
            start_time=at_time,
            end_time=at_time + (source.end_time - source.start_time),
            start_value=source.start_value,
            end_value=source.end_value,
            source=source,
        )

    def value(self, at_time: float) -> T:
        return self.source.value(at_time - self.start_time + self.source.start_time)


class _FnPhrase(Phrase[T]):
    def __init__(self, start_time, end_time, start_value, end_value, value_fn, *args, **kwargs):
        super().__init__(start_time, end_time, start_value, end_value)
        object.__setattr__(self, "_value_fn", value_fn)
        object.__setattr__(self, "_args", args)
        object.__setattr__(self, "_kwargs", kwargs)

    def retimed(self, start_time, end_time):
        return _FnPhrase(
            start_time,
            end_time,
            self.start_value,
            self.end_value,
            self._value_fn,
            *self._args,
            **self._kwargs,
        )

    def value(self, at_time):
        return self._value_fn(self, at_time, *self._args, **self._kwargs)


def phrase(value_fn: Callable[..., Any]) -> Callable[..., Phrase]:
    """Turn a plain function into a phrase kind usable with ``Sequence.then``.

    *value_fn* is called as ``value_fn(phrase, at_time, *extra)``, where
    *extra* are the additional arguments given to ``then``.

    >>> from choreograph import Sequence
    >>> wobble = phrase(lambda p, t, amount: p.end_value + amount * (1.0 - p.progress(t)))
    >>> Sequence(0.0).then(1.0, 2.0, wobble, 0.5).value(1.0)
    1.25
    """
    def factory(start_time, end_time, start_value, end_value, *args, **kwargs):
        return _FnPhrase(start_time, end_time, start_value, end_value, value_fn, *args, **kwargs)

    factory.__name__ = getattr(value_fn, "__name__", "phrase")
    return factory
