"""Procedural sprite generation for focal images and particles.

Every sprite is rasterised from an implicit shape on a supersampled numpy grid
so edges come out anti-aliased without any image files on disk. Particle
sprites are white so the renderer can tint them per particle; focal images
carry their own colours.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, Mapping, Optional, Tuple

import numpy as np
import pygame

from game.particles import ParticleKind

logger = logging.getLogger("heartdrift")

RGB = Tuple[int, int, int]
ShapeFn = Callable[[np.ndarray, np.ndarray], np.ndarray]

FOCAL_SPRITE_SIZE = 160
SUPERSAMPLE = 3

PARTICLE_SPRITE_KEYS: Dict[ParticleKind, str] = {
    ParticleKind.AMBIENT: "heart_particle",
    ParticleKind.ROTATING: "petal_particle",
}


def _coverage(size: int, shape: ShapeFn) -> np.ndarray:
    """Fraction of each pixel covered by ``shape`` over ``[-1, 1]`` square coordinates."""

    samples = size * SUPERSAMPLE
    axis = (np.arange(samples, dtype=np.float32) + 0.5) / samples * 2.0 - 1.0
    xs, ys = np.meshgrid(axis, axis)
    mask = shape(xs, ys).astype(np.float32)
    return mask.reshape(size, SUPERSAMPLE, size, SUPERSAMPLE).mean(axis=(1, 3))


def _heart(xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
    x = xs * 1.25
    y = -ys * 1.25 + 0.15
    return (x * x + y * y - 1.0) ** 3 - x * x * y ** 3 <= 0.0


def _petal(xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
    return (xs / 0.55) ** 2 + (ys / 0.95) ** 2 <= 1.0


def _polar(xs: np.ndarray, ys: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    return np.hypot(xs, ys), np.arctan2(ys, xs)


def _flower_petals(xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
    radius, angle = _polar(xs, ys)
    return radius <= 0.45 + 0.5 * np.abs(np.cos(2.5 * angle))


def _rose_petals(xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
    radius, angle = _polar(xs, ys)
    return radius <= 0.7 + 0.25 * np.abs(np.cos(2.5 * angle))


def _rose_swirl(xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
    radius, angle = _polar(xs, ys)
    swirl = np.sin(radius * 18.0 - angle * 2.0)
    return (radius <= 0.55) & (swirl > 0.2)


def _disk(radius: float, cx: float = 0.0, cy: float = 0.0) -> ShapeFn:
    def shape(xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        return np.hypot(xs - cx, ys - cy) <= radius

    return shape


def _crescent(xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
    return _disk(0.85)(xs, ys) & ~_disk(0.7, 0.38, -0.2)(xs, ys)


def _sun_rays(xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
    radius, angle = _polar(xs, ys)
    return (radius <= 0.95) & (np.cos(angle * 12.0) > 0.55 - radius * 0.3)


def _compose(size: int, layers) -> pygame.Surface:
    """Paint ``(shape, rgb)`` layers back to front into an RGBA surface."""

    rgb = np.zeros((size, size, 3), dtype=np.float32)
    alpha = np.zeros((size, size), dtype=np.float32)
    for shape, color in layers:
        cover = _coverage(size, shape)
        rgb = rgb * (1.0 - cover[..., None]) + np.asarray(color, dtype=np.float32) * cover[..., None]
        alpha = alpha + cover * (1.0 - alpha)
    pixels = np.dstack([rgb, alpha * 255.0]).clip(0, 255).astype(np.uint8)
    surface = pygame.image.frombuffer(pixels.tobytes(), (size, size), "RGBA")
    return surface.copy()


def create_heart_particle(size: int) -> pygame.Surface:
    return _compose(size, [(_heart, (255, 255, 255))])


def create_petal_particle(size: int) -> pygame.Surface:
    return _compose(size, [(_petal, (255, 255, 255))])


def create_flower(size: int) -> pygame.Surface:
    return _compose(
        size,
        [
            (_flower_petals, (250, 240, 250)),
            (_disk(0.3), (250, 200, 40)),
            (_disk(0.16), (220, 140, 20)),
        ],
    )


def create_rose(size: int) -> pygame.Surface:
    return _compose(
        size,
        [
            (_rose_petals, (200, 20, 50)),
            (_disk(0.55), (170, 10, 40)),
            (_rose_swirl, (235, 60, 90)),
        ],
    )


def create_moon(size: int) -> pygame.Surface:
    return _compose(size, [(_crescent, (240, 235, 200))])


def create_sun(size: int) -> pygame.Surface:
    return _compose(
        size,
        [
            (_sun_rays, (255, 190, 60)),
            (_disk(0.55), (255, 220, 90)),
        ],
    )


def create_heart(size: int) -> pygame.Surface:
    return _compose(size, [(_heart, (235, 40, 90))])


_FOCAL_FACTORIES: Dict[str, Callable[[int], pygame.Surface]] = {
    "flower": create_flower,
    "rose": create_rose,
    "moon": create_moon,
    "sun": create_sun,
    "heart": create_heart,
}


def load_sprites(
    particle_size: int,
    focal_size: int = FOCAL_SPRITE_SIZE,
    image_paths: Optional[Mapping[str, str]] = None,
) -> Dict[str, pygame.Surface]:
    """Build every sprite the scenes use, keyed by sprite name.

    ``image_paths`` replaces individual procedural sprites with image files.
    Loading files needs an active display because of ``convert_alpha``.
    """

    sprites: Dict[str, pygame.Surface] = {
        PARTICLE_SPRITE_KEYS[ParticleKind.AMBIENT]: create_heart_particle(particle_size),
        PARTICLE_SPRITE_KEYS[ParticleKind.ROTATING]: create_petal_particle(particle_size),
    }
    for key, factory in _FOCAL_FACTORIES.items():
        sprites[key] = factory(focal_size)

    for key, path in (image_paths or {}).items():
        logger.info(f"Loading sprite '{key}' from {path}")
        sprites[key] = pygame.image.load(path).convert_alpha()
    return sprites


def sprite_sizes(sprites: Mapping[str, pygame.Surface]) -> Dict[str, Tuple[int, int]]:
    return {key: surface.get_size() for key, surface in sprites.items()}
