"""Procedural palette synthesis for particle swarms."""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Tuple

Channels = Tuple[bool, bool, bool]


@dataclass(frozen=True)
class Color:
    """Normalized RGBA colour, every channel in ``[0, 1]``."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)

    def to_rgb255(self) -> Tuple[int, int, int]:
        return (
            int(round(self.r * 255)),
            int(round(self.g * 255)),
            int(round(self.b * 255)),
        )


WHITE = Color(1.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0)


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def generate_palette(
    count: int,
    main_range: Tuple[float, float],
    secondary_scale: float,
    channel_assignment: Channels,
    rng: random.Random,
) -> Tuple[Color, ...]:
    """Return ``count`` opaque colours dominated by the flagged channels.

    The dominant intensity is drawn from ``main_range`` and the remaining
    channels receive a dimmer value drawn from ``(0, dominant * secondary_scale)``.
    Both are normalised by the upper bound of ``main_range``.
    """

    lo, hi = main_range
    colors = []
    for _ in range(count):
        raw_main = rng.uniform(lo, hi)
        raw_other = rng.uniform(0.0, raw_main * secondary_scale)
        if hi > 0.0:
            main = _clamp01(raw_main / hi)
            other = _clamp01(raw_other / hi)
        else:
            # No positive intensity to normalise against.
            main = other = 0.0
        r, g, b = (main if dominant else other for dominant in channel_assignment)
        colors.append(Color(r, g, b, 1.0))
    return tuple(colors)
