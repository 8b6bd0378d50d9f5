from __future__ import annotations

from pathlib import Path

import numpy as np
import yaml

from shapegen.config import load_config
from shapegen.sdk import build_from_config


def _write_config(path: Path, output_name: str) -> None:
    config = {
        "parts": [
            {"kind": "room", "width": 3.0, "height": 3.0, "depth": 3.0},
            {"kind": "cylinder", "segments": 12, "height": 1.0, "radius": 0.2, "translate": [-0.5, 0.0, 0.0]},
            {
                "kind": "tube",
                "segments": 8,
                "bezier_segments": 10,
                "radius": 0.1,
                "control_points": [[0.0, 0.0, 0.0], [0.5, 1.0, 0.0], [1.0, 0.0, 0.0]],
            },
        ],
        "output": {"path": output_name, "format": "npz"},
    }
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(config, f)


def test_build_from_config_path(tmp_path: Path) -> None:
    cfg_path = tmp_path / "scene.yaml"
    _write_config(cfg_path, "scene.npz")

    result = build_from_config(cfg_path)

    expected_vertices = 20 + (2 + 4 * 12) + (11 * 8 + 2 * 10)
    assert result.stats == {"parts": 3, "vertices": expected_vertices, "triangles": 10 + 48 + (2 * 10 * 8 + 16)}
    assert result.output_path == (tmp_path / "scene.npz").resolve()
    assert result.output_path.exists()
    with np.load(result.output_path) as data:
        assert data["positions"].shape == (expected_vertices, 3)
        assert data["colors"].shape == (expected_vertices, 3)


def test_build_from_config_object_with_override(tmp_path: Path) -> None:
    cfg_path = tmp_path / "scene.yaml"
    _write_config(cfg_path, "scene.npz")
    cfg = load_config(cfg_path)

    override = tmp_path / "override.obj"
    result = build_from_config(cfg, output=override)

    assert result.output_path == override.resolve()
    assert result.config.output.format == "obj"
    # caller's config is left untouched
    assert cfg.output.format == "npz"
    assert not (tmp_path / "scene.npz").exists()
    with open(override, "r", encoding="utf-8") as f:
        assert f.readline().startswith("#")


def test_build_from_config_preset(tmp_path: Path) -> None:
    cfg_path = tmp_path / "cornell.yaml"
    with open(cfg_path, "w", encoding="utf-8") as f:
        yaml.safe_dump({"preset": "cornell", "output": {"path": "cornell.ply"}}, f)

    result = build_from_config(cfg_path)
    assert result.stats["vertices"] == 1060
    with open(result.output_path, "r", encoding="utf-8") as f:
        assert f.readline().strip() == "ply"
