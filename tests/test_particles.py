import math
import random

import pytest

from game.colors import Color
from game.particles import Particle, ParticleKind, advance, spawn

EXTENT = 32.0


def _palette(count):
    return [Color(0.1, 0.8, 0.1)] * count


@pytest.mark.parametrize("kind", list(ParticleKind))
@pytest.mark.parametrize("viewport", [(1000, 1000), (800, 600), (1, 1)])
def test_spawn_places_one_particle_per_color_inside_viewport(kind, viewport):
    particles = spawn(viewport, _palette(250), kind, random.Random(7))
    width, height = viewport
    assert len(particles) == 250
    for particle in particles:
        assert particle.kind is kind
        assert 0.0 <= particle.x < width
        assert 0.0 <= particle.y < height


def test_spawn_seeds_rotation_only_for_rotating_kind():
    rotating = spawn((500, 500), _palette(100), ParticleKind.ROTATING, random.Random(8))
    ambient = spawn((500, 500), _palette(100), ParticleKind.AMBIENT, random.Random(8))
    assert all(0.0 <= p.rotation < 2 * math.pi for p in rotating)
    assert any(p.rotation > 0.0 for p in rotating)
    assert all(p.rotation is None for p in ambient)


def test_spawn_keeps_palette_order():
    palette = [Color(i / 10, 0.0, 0.0) for i in range(10)]
    particles = spawn((100, 100), palette, ParticleKind.AMBIENT, random.Random(9))
    assert [p.color for p in particles] == palette


def test_advance_keeps_positions_within_margin():
    rng = random.Random(10)
    viewport = (300, 200)
    particles = spawn(viewport, _palette(60), ParticleKind.ROTATING, rng)
    for _ in range(2000):
        advance(particles, EXTENT, viewport, rng)
        for particle in particles:
            assert -EXTENT <= particle.x <= viewport[0]
            assert -EXTENT <= particle.y <= viewport[1]
            assert 0.0 <= particle.rotation < 2 * math.pi


def test_advance_drifts_right_and_down():
    particle = Particle(ParticleKind.AMBIENT, x=10.0, y=10.0, color=Color(1, 1, 1))
    advance([particle], EXTENT, (100, 100), random.Random(11))
    assert particle.x == pytest.approx(10.1)
    assert 10.0 <= particle.y < 15.0


def test_advance_wraps_to_negative_extent():
    particle = Particle(ParticleKind.AMBIENT, x=99.95, y=99.999, color=Color(1, 1, 1))
    rng = random.Random(12)
    advance([particle], EXTENT, (100, 100), rng)
    assert particle.x == -EXTENT
    # Vertical drift may be zero, so keep stepping until the wrap shows up.
    while particle.y != -EXTENT:
        assert particle.y <= 100
        advance([particle], EXTENT, (100, 100), rng)
    assert particle.y == -EXTENT


def test_rotation_resets_to_zero_at_full_turn():
    particle = Particle(
        ParticleKind.ROTATING, x=0.0, y=0.0, color=Color(1, 1, 1), rotation=2 * math.pi - 1e-9
    )
    rng = random.Random(13)
    while particle.rotation != 0.0:
        advance([particle], EXTENT, (100, 100), rng)
        assert particle.rotation < 2 * math.pi
    assert particle.rotation == 0.0


def test_ambient_particles_never_rotate():
    rng = random.Random(14)
    particles = spawn((100, 100), _palette(20), ParticleKind.AMBIENT, rng)
    for _ in range(100):
        advance(particles, EXTENT, (100, 100), rng)
    assert all(p.rotation is None for p in particles)
    assert all(p.angle == 0.0 for p in particles)


def test_rotation_payload_only_on_rotating_kind():
    rotating = Particle(ParticleKind.ROTATING, x=0.0, y=0.0, color=Color(1, 1, 1))
    assert rotating.rotation == 0.0
    with pytest.raises(ValueError):
        Particle(ParticleKind.AMBIENT, x=0.0, y=0.0, color=Color(1, 1, 1), rotation=1.0)
