"""Keypoint collection for previewing and checking sequences."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .phrase import Nested, Phrase
from .registry import registry
from .sequence import Sequence


@dataclass
class Keypoint:
    time: float
    value: Any
    phrase_index: int
    edge: str  # "start" or "end"
    label: str


def _build_label(index: int, p: Phrase) -> str:
    """Build a human-readable label, preferring the registered kind name."""
    name = registry.find_name(type(p)) or type(p).__name__
    return f"{name}[{index}]"


def collect_keypoints(sequence: Sequence, _offset: float = 0.0) -> list[Keypoint]:
    """Collect start/end keypoints for every phrase of *sequence*.

    Start points carry the value the phrase takes at its start time, so a
    hold shows its new value there. Zero-duration phrases only contribute
    their start edge. Returns points sorted by time, with starts before ends
    at the same time. Recurses into nested sequences, offsetting their
    points by where they were placed.
    """
    points: list[tuple[float, int, Keypoint]] = []

    for i, p in enumerate(sequence.phrases):
        label = _build_label(i, p)
        start = p.start_time + _offset

        points.append((start, 0, Keypoint(
            time=start,
            value=p.value(p.start_time),
            phrase_index=i,
            edge="start",
            label=f"{label} (start)",
        )))

        if p.duration > 0:
            end = p.end_time + _offset
            points.append((end, 1, Keypoint(
                time=end,
                value=p.end_value,
                phrase_index=i,
                edge="end",
                label=f"{label} (end)",
            )))

        if isinstance(p, Nested) and isinstance(p.source, Sequence):
            inner_offset = start - p.source.start_time
            for kp in collect_keypoints(p.source, _offset=inner_offset):
                points.append((kp.time, 0 if kp.edge == "start" else 1, kp))

    points.sort(key=lambda pt: (pt[0], pt[1]))
    return [kp for _, _, kp in points]
