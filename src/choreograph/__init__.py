"""Phrase and sequence engine for time-varying values."""

from .easing import (
    EaseFn,
    ease_in_cubic,
    ease_in_out_cubic,
    ease_in_out_quad,
    ease_in_out_sine,
    ease_in_quad,
    ease_out_cubic,
    ease_out_quad,
    linear,
    smoothstep,
)
from .interpolate import LerpFn, lerp, step
from .keypoints import Keypoint, collect_keypoints
from .phrase import Hold, Nested, Phrase, Procedural, RampTo, Source, phrase
from .registry import PhraseRegistry, registry
from .sequence import Sequence

__all__ = [
    "collect_keypoints",
    "EaseFn",
    "ease_in_cubic",
    "ease_in_out_cubic",
    "ease_in_out_quad",
    "ease_in_out_sine",
    "ease_in_quad",
    "ease_out_cubic",
    "ease_out_quad",
    "Hold",
    "Keypoint",
    "lerp",
    "LerpFn",
    "linear",
    "Nested",
    "Phrase",
    "phrase",
    "PhraseRegistry",
    "Procedural",
    "RampTo",
    "registry",
    "Sequence",
    "smoothstep",
    "Source",
    "step",
]

__version__ = "0.1.0"
