"""Generic blending between two values of the same shape."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

T = TypeVar("T")

LerpFn = Callable[[T, T, float], T]


def _lerp_scalar(a, b, t: float):
    # a * (1 - t) + b * t is exact at both ends, unlike a + (b - a) * t.
    return a * (1.0 - t) + b * t


def lerp(a: T, b: T, t: float) -> T:
    """Blend *a* toward *b* by progress *t*.

    Numbers and anything supporting ``*`` by a float and ``+`` blend
    directly. Tuples, named tuples, lists and dicts blend element-wise,
    recursing into nested containers.

    >>> lerp(0.0, 10.0, 0.25)
    2.5
    >>> lerp((0.0, 1.0), (1.0, 3.0), 0.5)
    (0.5, 2.0)
    """
    if isinstance(a, dict):
        if not isinstance(b, dict) or a.keys() != b.keys():
            raise ValueError("Cannot blend dicts with different keys")
        return {key: lerp(a[key], b[key], t) for key in a}  # type: ignore[return-value]
    if isinstance(a, (tuple, list)):
        if not isinstance(b, (tuple, list)) or len(a) != len(b):
            raise ValueError(f"Cannot blend sequences of length {len(a)} and {_length(b)}")
        items = [lerp(x, y, t) for x, y in zip(a, b)]
        if hasattr(a, "_fields"):
            return type(a)(*items)  # type: ignore[return-value]
        return type(a)(items)  # type: ignore[return-value]
    return _lerp_scalar(a, b, t)


def _length(value: Any) -> str:
    try:
        return str(len(value))
    except TypeError:
        return type(value).__name__


def step(a: T, b: T, t: float) -> T:
    """Step blend: *a* until progress reaches 1, then *b*."""
    return b if t >= 1.0 else a
