"""Sequences: phrases chained end to end on one timeline."""

from __future__ import annotations

import bisect
import logging
import math
from dataclasses import dataclass, field, replace
from typing import Any, Generic, Self, TypeVar

from .phrase import Hold, Nested, Phrase, RampTo, Source
from .registry import PhraseKind, registry

log = logging.getLogger(__name__)

T = TypeVar("T")

# Absolute tolerance when validating that externally built phrases are contiguous.
_CHAIN_TOLERANCE = 1e-9


def _check_chain(start_time: float, phrases: list[Phrase]) -> None:
    expected = start_time
    for i, p in enumerate(phrases):
        if not math.isclose(p.start_time, expected, rel_tol=0.0, abs_tol=_CHAIN_TOLERANCE):
            raise ValueError(
                f"Phrase {i} starts at {p.start_time}, expected {expected}; "
                "phrases must be contiguous"
            )
        expected = p.end_time


@dataclass
class Sequence(Generic[T]):
    """An ordered, gapless chain of phrases describing one animated value.

    Before ``start_time`` the sequence holds ``initial_value``; from
    ``end_time`` on it holds the last phrase's end value. Phrases are only
    ever appended, never rewritten.

    >>> s = Sequence(0.0).then(1.0, 2.0)
    >>> s.value(1.0), s.value(5.0)
    (0.5, 1.0)
    """

    initial_value: T
    phrases: list[Phrase[T]] = field(default_factory=list)
    start_time: float = 0.0

    def __post_init__(self) -> None:
        _check_chain(self.start_time, self.phrases)

    @classmethod
    def from_phrases(cls, phrases: list[Phrase[T]]) -> Sequence[T]:
        """Build a sequence from an existing, non-empty chain of phrases."""
        if not phrases:
            raise ValueError("Cannot build a Sequence from an empty phrase list")
        first = phrases[0]
        return cls(
            initial_value=first.start_value,
            phrases=list(phrases),
            start_time=first.start_time,
        )

    @property
    def end_time(self) -> float:
        if not self.phrases:
            return self.start_time
        return self.phrases[-1].end_time

    @property
    def duration(self) -> float:
        return self.end_time - self.start_time

    @property
    def start_value(self) -> T:
        return self.initial_value

    @property
    def end_value(self) -> T:
        if not self.phrases:
            return self.initial_value
        return self.phrases[-1].end_value

    @property
    def phrase_count(self) -> int:
        return len(self.phrases)

    def set(self, value: T) -> Self:
        """Set the current value instantly.

        Replaces the initial value while the sequence is empty; afterwards
        appends a zero-duration hold so earlier phrases stay untouched.
        """
        if not self.phrases:
            self.initial_value = value
        else:
            self.then(value, 0.0, Hold)
        return self

    def then(
        self,
        value: T,
        duration: float,
        kind: PhraseKind | str = RampTo,
        *args: Any,
        **kwargs: Any,
    ) -> Self:
        """Append a phrase moving from the current end value to *value*.

        *kind* is a phrase class, a factory with the same signature, or the
        name of a registered kind. It is called as
        ``kind(start_time, end_time, start_value, value, *args, **kwargs)``.
        """
        if not duration >= 0:
            raise ValueError(f"Phrase duration must be >= 0, got {duration}")
        if isinstance(kind, str):
            kind = registry.get(kind)
        start = self.end_time
        self.phrases.append(kind(start, start + duration, self.end_value, value, *args, **kwargs))
        return self

    def embed(self, source: Source[T]) -> Self:
        """Append a whole source (e.g. another sequence) as a single phrase.

        The source starts playing at the current end time. Sources with a
        ``copy`` method are copied so later changes to them don't leak in.
        """
        copy_fn = getattr(source, "copy", None)
        if callable(copy_fn):
            source = copy_fn()
        self.phrases.append(Nested.place(source, self.end_time))
        return self

    def value(self, at_time: float) -> T:
        """Return the value of the sequence at *at_time*.

        Times outside the timeline clamp to the initial or final value.
        """
        if at_time < self.start_time:
            return self.initial_value
        if at_time >= self.end_time:
            return self.end_value

        # First phrase ending after at_time; skips zero-duration phrases.
        i = bisect.bisect_right(self.phrases, at_time, key=lambda p: p.end_time)
        if i < len(self.phrases):
            return self.phrases[i].value(at_time)
        # Only NaN gets here; it fails both bounds checks above.
        return self.end_value

    def copy(self) -> Sequence[T]:
        """Return a sequence with its own phrase list, useful as a base to branch from."""
        return replace(self, phrases=list(self.phrases))

    @staticmethod
    def concatenate(first: Sequence[T], second: Sequence[T], *more: Sequence[T]) -> Sequence[T]:
        """Join sequences end to end into a new sequence.

        Each following sequence is shifted so it starts where the previous
        one ends, keeping its internal timing. The result keeps the first
        sequence's initial value; the others' initial values are dropped.
        Phrase values are kept as they are, so a sequence whose first phrase
        doesn't start at the previous end value jumps at the seam.
        """
        result = _concatenate_pair(first, second)
        for nxt in more:
            result = _concatenate_pair(result, nxt)
        return result


def _concatenate_pair(first: Sequence[T], second: Sequence[T]) -> Sequence[T]:
    result = first.copy()
    if not second.phrases:
        return result
    offset = first.end_time - second.start_time
    log.debug(
        "Concatenating %d phrases at t=%.3f (seam %r -> %r)",
        second.phrase_count, first.end_time, first.end_value, second.phrases[0].start_value,
    )
    # Chain from the running end so the shifted phrases stay exactly contiguous.
    start = first.end_time
    for p in second.phrases:
        end = start if p.duration == 0 else max(start, p.end_time + offset)
        result.phrases.append(p.retimed(start, end))
        start = end
    return result
