from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from shapegen.config import SceneConfig, load_config
from shapegen.config.schema import SphereConfig, TubeConfig
from shapegen.runtime.builders import build_part, build_parts, format_for_path


def _dump(path: Path, data: dict) -> Path:
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f)
    return path


def test_load_config_parses_parts_and_resolves_output(tmp_path: Path) -> None:
    cfg_path = _dump(
        tmp_path / "scene.yaml",
        {
            "parts": [
                {"kind": "box", "width": 1.0, "height": 1.0, "depth": 1.0},
                {"kind": "sphere", "radius": 0.5, "translate": [1.0, 0.0, 0.0]},
                {"kind": "tube", "radius": 0.1, "control_points": [[0, 0, 0], [1, 1, 0], [2, 0, 0]]},
            ],
            "output": {"path": "out/scene.obj", "format": "obj"},
        },
    )
    cfg = load_config(cfg_path)
    assert [p.kind for p in cfg.parts] == ["box", "sphere", "tube"]
    assert isinstance(cfg.parts[1], SphereConfig)
    assert cfg.parts[1].longitude_segments == 18
    assert cfg.parts[1].latitude_segments == 8
    assert isinstance(cfg.parts[2], TubeConfig)
    assert cfg.parts[2].bezier_segments == 32
    assert cfg.output.path == (tmp_path / "out" / "scene.obj").resolve()


def test_scene_requires_exactly_one_source() -> None:
    with pytest.raises(ValidationError):
        SceneConfig.model_validate({"output": {"path": "x.ply"}})
    with pytest.raises(ValidationError):
        SceneConfig.model_validate(
            {
                "preset": "cornell",
                "parts": [{"kind": "box", "width": 1, "height": 1, "depth": 1}],
                "output": {"path": "x.ply"},
            }
        )


@pytest.mark.parametrize(
    "part",
    [
        {"kind": "cylinder", "segments": 2, "height": 1.0, "radius": 1.0},
        {"kind": "sphere", "latitude_segments": 1, "radius": 1.0},
        {"kind": "box", "width": 0.0, "height": 1.0, "depth": 1.0},
        {"kind": "tube", "radius": 0.1, "control_points": [[0, 0, 0]]},
        {"kind": "cone", "radius": 1.0},
        {"kind": "box", "width": 1.0, "height": 1.0, "depth": 1.0, "scale": 0.0},
    ],
)
def test_invalid_parts_are_rejected(part: dict) -> None:
    with pytest.raises(ValidationError):
        SceneConfig.model_validate({"parts": [part], "output": {"path": "x.ply"}})


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError, match="mapping"):
        load_config(path)


def test_build_part_applies_placement() -> None:
    cfg = SceneConfig.model_validate(
        {
            "parts": [
                {"kind": "box", "width": 2.0, "height": 2.0, "depth": 2.0, "translate": [10.0, 0.0, 0.0], "scale": 0.5}
            ],
            "output": {"path": "x.ply"},
        }
    )
    mesh = build_part(cfg.parts[0])
    lo_x, hi_x = mesh.bounds()[:2]
    assert lo_x == pytest.approx(9.5)
    assert hi_x == pytest.approx(10.5)


def test_build_parts_from_preset() -> None:
    cfg = SceneConfig.model_validate({"preset": "cornell", "output": {"path": "x.ply"}})
    parts = build_parts(cfg)
    assert len(parts) == 1
    assert parts[0].vertex_count == 1060


def test_format_for_path() -> None:
    assert format_for_path(Path("a/b.PLY")) == "ply"
    assert format_for_path(Path("mesh.npz")) == "npz"
    with pytest.raises(ValueError):
        format_for_path(Path("mesh.stl"))
