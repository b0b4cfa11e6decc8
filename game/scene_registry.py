"""Canonical scene sequence for Heartdrift."""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterator, Mapping, Sequence, Tuple

from .colors import BLACK, WHITE, Channels, Color, generate_palette
from .particles import ParticleKind

Size = Tuple[float, float]


@dataclass(frozen=True)
class SceneSpec:
    """Declarative row a :class:`SceneDescriptor` is generated from."""

    name: str
    background: Color
    focal_image: str
    caption: Tuple[str, ...]
    particle_kind: ParticleKind
    particle_count: int = 100
    main_range: Tuple[float, float] = (500.0, 1000.0)
    secondary_scale: float = 0.2
    channel_assignment: Channels = (False, True, False)
    text_color: Color = WHITE
    outline_color: Color = BLACK


@dataclass(frozen=True)
class SceneDescriptor:
    """Immutable data describing one stage of the sequence."""

    name: str
    background: Color
    focal_image: str
    caption: Tuple[str, ...]
    text_color: Color
    outline_color: Color
    particle_kind: ParticleKind
    palette: Tuple[Color, ...]

    @property
    def particle_count(self) -> int:
        return len(self.palette)


SCENE_SPECS: Tuple[SceneSpec, ...] = (
    SceneSpec(
        name="meadow",
        background=Color(0.1, 0.2, 0.1),
        focal_image="flower",
        caption=("Hello there!", "this one is for you", "click the flower"),
        particle_kind=ParticleKind.AMBIENT,
        channel_assignment=(False, True, False),
    ),
    SceneSpec(
        name="rose_garden",
        background=Color(0.22, 0.06, 0.1),
        focal_image="rose",
        caption=("Every petal", "is a small wish", "spin it once more"),
        particle_kind=ParticleKind.ROTATING,
        particle_count=80,
        channel_assignment=(True, False, False),
        text_color=Color(1.0, 0.9, 0.92),
        outline_color=Color(0.35, 0.0, 0.08),
    ),
    SceneSpec(
        name="dusk",
        background=Color(0.08, 0.05, 0.2),
        focal_image="moon",
        caption=("When the day ends", "the sky keeps glowing"),
        particle_kind=ParticleKind.AMBIENT,
        particle_count=140,
        main_range=(600.0, 1000.0),
        secondary_scale=0.35,
        channel_assignment=(False, False, True),
        text_color=Color(0.92, 0.9, 1.0),
        outline_color=Color(0.1, 0.05, 0.3),
    ),
    SceneSpec(
        name="sunrise",
        background=Color(0.3, 0.15, 0.05),
        focal_image="sun",
        caption=("and in the morning", "it starts all over again"),
        particle_kind=ParticleKind.ROTATING,
        particle_count=120,
        main_range=(700.0, 1000.0),
        secondary_scale=0.6,
        channel_assignment=(True, True, False),
        outline_color=Color(0.4, 0.15, 0.0),
    ),
    SceneSpec(
        name="finale",
        background=Color(0.18, 0.02, 0.12),
        focal_image="heart",
        caption=("Thank you", "for being here", "always"),
        particle_kind=ParticleKind.AMBIENT,
        particle_count=200,
        channel_assignment=(True, False, True),
        text_color=Color(1.0, 0.85, 0.95),
        outline_color=Color(0.25, 0.0, 0.15),
    ),
)


class SceneCatalog:
    """Fixed, ordered sequence of scenes; the last one is terminal."""

    def __init__(self, scenes: Sequence[SceneDescriptor]) -> None:
        if not scenes:
            raise ValueError("A scene catalog needs at least one scene")
        self._scenes: Tuple[SceneDescriptor, ...] = tuple(scenes)

    def __len__(self) -> int:
        return len(self._scenes)

    def __iter__(self) -> Iterator[SceneDescriptor]:
        return iter(self._scenes)

    @property
    def last_index(self) -> int:
        return len(self._scenes) - 1

    def get(self, index: int) -> SceneDescriptor:
        """Look up a scene by position; negative indices are not accepted."""

        if not 0 <= index < len(self._scenes):
            raise IndexError(f"Scene index out of range: {index}")
        return self._scenes[index]

    def is_terminal(self, index: int) -> bool:
        return index >= self.last_index

    def validate(self, image_sizes: Mapping[str, Size]) -> None:
        """Ensure every focal image referenced by the catalog was loaded."""

        for scene in self._scenes:
            if scene.focal_image not in image_sizes:
                raise KeyError(
                    f"Scene '{scene.name}' references unknown image: {scene.focal_image}"
                )


def build_scene(spec: SceneSpec, rng: random.Random) -> SceneDescriptor:
    palette = generate_palette(
        spec.particle_count,
        spec.main_range,
        spec.secondary_scale,
        spec.channel_assignment,
        rng,
    )
    return SceneDescriptor(
        name=spec.name,
        background=spec.background,
        focal_image=spec.focal_image,
        caption=tuple(spec.caption),
        text_color=spec.text_color,
        outline_color=spec.outline_color,
        particle_kind=spec.particle_kind,
        palette=palette,
    )


def build_catalog(
    rng: random.Random, specs: Sequence[SceneSpec] = SCENE_SPECS
) -> SceneCatalog:
    """Generate palettes for every row of ``specs`` and freeze the result."""

    return SceneCatalog([build_scene(spec, rng) for spec in specs])


def focal_image_keys(specs: Sequence[SceneSpec] = SCENE_SPECS) -> Tuple[str, ...]:
    """Return the distinct focal image keys in first-use order."""

    seen: dict[str, None] = {}
    for spec in specs:
        seen.setdefault(spec.focal_image, None)
    return tuple(seen)
