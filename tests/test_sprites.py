from game.particles import ParticleKind
from game.scene_registry import focal_image_keys
from rendering.sprites import PARTICLE_SPRITE_KEYS, create_heart_particle, load_sprites, sprite_sizes


def test_load_sprites_covers_catalog_and_particles():
    sprites = load_sprites(particle_size=16, focal_size=48)
    for key in focal_image_keys():
        assert key in sprites
    for kind in ParticleKind:
        assert PARTICLE_SPRITE_KEYS[kind] in sprites
    sizes = sprite_sizes(sprites)
    assert sizes["heart_particle"] == (16, 16)
    assert sizes["flower"] == (48, 48)


def test_particle_sprite_is_white_with_transparent_corners():
    surface = create_heart_particle(32)
    assert surface.get_at((0, 0)).a == 0
    center = surface.get_at((16, 16))
    assert center.a == 255
    assert (center.r, center.g, center.b) == (255, 255, 255)
