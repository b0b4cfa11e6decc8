import random

import pytest

from game.colors import Color
from game.particles import ParticleKind
from game.scene_registry import (
    SCENE_SPECS,
    SceneCatalog,
    SceneSpec,
    build_catalog,
    focal_image_keys,
)


def test_catalog_follows_spec_order():
    catalog = build_catalog(random.Random(1))
    assert [scene.name for scene in catalog] == [spec.name for spec in SCENE_SPECS]
    assert len(catalog) == len(SCENE_SPECS)


def test_palette_length_matches_particle_count():
    catalog = build_catalog(random.Random(2))
    for scene, spec in zip(catalog, SCENE_SPECS):
        assert scene.particle_count == spec.particle_count
        assert scene.particle_kind is spec.particle_kind


def test_shipped_catalog_uses_both_particle_kinds():
    kinds = {spec.particle_kind for spec in SCENE_SPECS}
    assert kinds == {ParticleKind.AMBIENT, ParticleKind.ROTATING}


def test_terminal_is_last_index():
    catalog = build_catalog(random.Random(3))
    assert catalog.is_terminal(catalog.last_index)
    assert not catalog.is_terminal(0)


@pytest.mark.parametrize("index", [-1, len(SCENE_SPECS)])
def test_get_out_of_range_raises(index):
    catalog = build_catalog(random.Random(4))
    with pytest.raises(IndexError):
        catalog.get(index)


def test_empty_catalog_rejected():
    with pytest.raises(ValueError):
        SceneCatalog([])


def test_validate_reports_missing_image():
    catalog = build_catalog(random.Random(5))
    sizes = {key: (10, 10) for key in focal_image_keys()}
    catalog.validate(sizes)
    del sizes["moon"]
    with pytest.raises(KeyError):
        catalog.validate(sizes)


def test_custom_specs():
    specs = (
        SceneSpec(
            name="only",
            background=Color(0, 0, 0),
            focal_image="dot",
            caption=("hi",),
            particle_kind=ParticleKind.ROTATING,
            particle_count=3,
        ),
    )
    catalog = build_catalog(random.Random(6), specs)
    assert len(catalog) == 1
    assert catalog.is_terminal(0)
    assert catalog.get(0).particle_count == 3
    assert focal_image_keys(specs) == ("dot",)


def test_descriptors_are_immutable():
    scene = build_catalog(random.Random(7)).get(0)
    with pytest.raises(AttributeError):
        scene.name = "other"
