"""Common easing curves for ramp phrases.

Every curve maps normalized progress in ``[0, 1]`` to eased progress,
with ``f(0) == 0`` and ``f(1) == 1``.
"""

from __future__ import annotations

import math
from typing import Callable

EaseFn = Callable[[float], float]


def linear(t: float) -> float:
    """No easing. Progress passes through unchanged."""
    return t


def ease_in_quad(t: float) -> float:
    return t * t


def ease_out_quad(t: float) -> float:
    return t * (2.0 - t)


def ease_in_out_quad(t: float) -> float:
    if t < 0.5:
        return 2.0 * t * t
    return -1.0 + (4.0 - 2.0 * t) * t


def ease_in_cubic(t: float) -> float:
    return t * t * t


def ease_out_cubic(t: float) -> float:
    u = t - 1.0
    return u * u * u + 1.0


def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4.0 * t * t * t
    u = 2.0 * t - 2.0
    return 0.5 * u * u * u + 1.0


def ease_in_out_sine(t: float) -> float:
    return 0.5 * (1.0 - math.cos(math.pi * t))


def smoothstep(t: float) -> float:
    """Cubic Hermite with zero tangents at both ends."""
    return t * t * (3.0 - 2.0 * t)
