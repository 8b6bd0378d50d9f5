import numpy as np
import pytest

from shapegen.examples.presets import PRESETS, build_preset


def test_cornell_scene_counts() -> None:
    mesh = build_preset("cornell")
    # room 20 + box 24 + sphere 2+7*18 + tube 43*18+2*20 + cylinder 2+4*18
    assert mesh.vertex_count == 20 + 24 + 128 + 814 + 74
    assert mesh.has_colors
    assert mesh.indices.max() < mesh.vertex_count


def test_cornell_geometry_stays_inside_room() -> None:
    mesh = build_preset("Cornell")
    lo = mesh.positions.min(axis=0)
    hi = mesh.positions.max(axis=0)
    assert np.all(lo >= -1.5 - 1e-5)
    assert np.all(hi <= 1.5 + 1e-5)


def test_cornell_objects_default_to_white() -> None:
    mesh = build_preset("cornell")
    np.testing.assert_allclose(mesh.colors[20:], 1.0)


@pytest.mark.parametrize("name", sorted(PRESETS))
def test_presets_are_well_formed(name: str) -> None:
    mesh = build_preset(name)
    assert len(mesh.indices) % 3 == 0
    np.testing.assert_allclose(np.linalg.norm(mesh.normals, axis=1), 1.0, atol=1e-5)


def test_unknown_preset_raises() -> None:
    with pytest.raises(ValueError, match="Unknown scene preset"):
        build_preset("nope")
