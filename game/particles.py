"""Drifting particle field shared by every scene."""
from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

import constants
from .colors import Color

Size = Tuple[float, float]


class ParticleKind(Enum):
    AMBIENT = "ambient"
    ROTATING = "rotating"


@dataclass
class Particle:
    """Single sprite instance; ``rotation`` is set only for rotating particles."""

    kind: ParticleKind
    x: float
    y: float
    color: Color
    rotation: Optional[float] = None

    def __post_init__(self) -> None:
        if self.kind is ParticleKind.ROTATING:
            if self.rotation is None:
                self.rotation = 0.0
        elif self.rotation is not None:
            raise ValueError("Ambient particles carry no rotation")

    @property
    def rotates(self) -> bool:
        return self.kind is ParticleKind.ROTATING

    @property
    def angle(self) -> float:
        """Draw angle in radians; ambient particles are always upright."""

        return self.rotation if self.rotation is not None else 0.0


def spawn(
    viewport_size: Size,
    palette: Sequence[Color],
    kind: ParticleKind,
    rng: random.Random,
) -> List[Particle]:
    """Scatter one particle per palette entry across the viewport."""

    width, height = viewport_size
    particles: List[Particle] = []
    for color in palette:
        x = _uniform_below(rng, width)
        y = _uniform_below(rng, height)
        rotation = None
        if kind is ParticleKind.ROTATING:
            rotation = _uniform_below(rng, constants.FULL_TURN)
        particles.append(Particle(kind=kind, x=x, y=y, color=color, rotation=rotation))
    return particles


def advance(
    particles: Sequence[Particle],
    particle_extent: float,
    viewport_size: Size,
    rng: random.Random,
) -> None:
    """Move every particle one frame forward, wrapping at the viewport edges."""

    width, height = viewport_size
    drift_lo, drift_hi = constants.PARTICLE_DRIFT_Y_RANGE
    spin_lo, spin_hi = constants.PARTICLE_ROTATION_STEP_RANGE
    for particle in particles:
        new_x = particle.x + constants.PARTICLE_DRIFT_X
        new_y = particle.y + rng.uniform(drift_lo, drift_hi)

        # Re-enter one full sprite off-screen.
        if new_x > width:
            new_x = -particle_extent
        if new_y > height:
            new_y = -particle_extent

        particle.x = new_x
        particle.y = new_y

        if particle.rotates:
            rotation = particle.rotation + rng.uniform(spin_lo, spin_hi)
            if rotation >= constants.FULL_TURN:
                rotation = 0.0
            particle.rotation = rotation


def _uniform_below(rng: random.Random, upper: float) -> float:
    """Sample ``[0, upper)``; ``random.uniform`` may return the upper bound."""

    if upper <= 0.0:
        return 0.0
    value = rng.random() * upper
    return value if value < upper else 0.0
