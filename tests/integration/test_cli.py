from __future__ import annotations

from pathlib import Path

import numpy as np
import yaml
from typer.testing import CliRunner

from shapegen.cli.main import app


def test_cli_build_from_config(tmp_path: Path) -> None:
    config = {
        "parts": [
            {"kind": "box", "width": 1.0, "height": 1.0, "depth": 1.0, "rotate_deg": [0.0, 45.0, 0.0]},
            {"kind": "sphere", "radius": 0.5, "translate": [2.0, 0.0, 0.0]},
        ],
        "output": {"path": "out_scene.npz", "format": "npz"},
    }
    cfg_path = tmp_path / "config.yaml"
    with open(cfg_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(config, f)

    runner = CliRunner()
    result = runner.invoke(app, ["build", str(cfg_path)])
    assert result.exit_code == 0, result.stdout
    assert "Built 2 part(s)" in result.stdout

    data = np.load(tmp_path / "out_scene.npz")
    assert data["positions"].shape == (24 + 2 + 7 * 18, 3)


def test_cli_build_with_output_override(tmp_path: Path) -> None:
    cfg_path = tmp_path / "config.yaml"
    with open(cfg_path, "w", encoding="utf-8") as f:
        yaml.safe_dump({"preset": "primitives", "output": {"path": "unused.npz"}}, f)

    override = tmp_path / "custom.ply"
    runner = CliRunner()
    result = runner.invoke(app, ["build", str(cfg_path), "--output", str(override), "--log-level", "DEBUG"])
    assert result.exit_code == 0, result.stdout
    assert override.exists()
    with open(override, "r", encoding="utf-8") as f:
        assert f.readline().strip() == "ply"
        assert f.readline().strip() == "format ascii 1.0"


def test_cli_box_command(tmp_path: Path) -> None:
    output = tmp_path / "box.obj"
    runner = CliRunner()
    result = runner.invoke(app, ["box", str(output), "--width", "2", "--height", "1", "--depth", "0.5"])
    assert result.exit_code == 0, result.stdout
    assert "Wrote 24 vertices / 12 triangles" in result.stdout
    with open(output, "r", encoding="utf-8") as f:
        assert sum(line.startswith("f ") for line in f) == 12


def test_cli_tube_command(tmp_path: Path) -> None:
    output = tmp_path / "tube.npz"
    runner = CliRunner()
    result = runner.invoke(
        app,
        [
            "tube",
            str(output),
            "-p", "0,0,0",
            "-p", "1,2,0",
            "-p", "2,0,0",
            "--segments", "6",
            "--bezier-segments", "5",
            "--radius", "0.1",
        ],
    )
    assert result.exit_code == 0, result.stdout
    data = np.load(output)
    assert data["positions"].shape == (6 * 6 + 2 * 8, 3)
    assert data["indices"].shape == (3 * (2 * 5 * 6 + 2 * 6),)


def test_cli_tube_rejects_malformed_point(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["tube", str(tmp_path / "t.ply"), "-p", "0,0", "-p", "1,1,1"])
    assert result.exit_code != 0
    assert not (tmp_path / "t.ply").exists()


def test_cli_sphere_rejects_invalid_segments(tmp_path: Path) -> None:
    output = tmp_path / "sphere.ply"
    runner = CliRunner()
    result = runner.invoke(app, ["sphere", str(output), "--longitude", "2"])
    assert result.exit_code != 0
    assert "longitude" in result.output
    assert not output.exists()


def test_cli_rejects_unknown_extension(tmp_path: Path) -> None:
    output = tmp_path / "cyl.stl"
    runner = CliRunner()
    result = runner.invoke(app, ["cylinder", str(output)])
    assert result.exit_code != 0
    assert not output.exists()


def test_cli_preset_command(tmp_path: Path) -> None:
    output = tmp_path / "cornell.ply"
    runner = CliRunner()
    result = runner.invoke(app, ["preset", "cornell", str(output)])
    assert result.exit_code == 0, result.stdout
    with open(output, "r", encoding="utf-8") as f:
        lines = [line.strip() for line in f]
    assert "element vertex 1060" in lines
    assert "property uchar red" in lines


def test_cli_room_command(tmp_path: Path) -> None:
    output = tmp_path / "room.ply"
    runner = CliRunner()
    result = runner.invoke(app, ["room", str(output), "--width", "2", "--height", "2", "--depth", "2"])
    assert result.exit_code == 0, result.stdout
    assert "Wrote 20 vertices / 10 triangles" in result.stdout
    with open(output, "r", encoding="utf-8") as f:
        lines = [line.strip() for line in f]
    assert "property uchar red" in lines


def test_cli_cylinder_command(tmp_path: Path) -> None:
    output = tmp_path / "cylinder.npz"
    runner = CliRunner()
    result = runner.invoke(app, ["cylinder", str(output), "--segments", "8", "--height", "1", "--radius", "0.5"])
    assert result.exit_code == 0, result.stdout
    assert "Wrote 34 vertices / 32 triangles" in result.stdout
    data = np.load(output)
    assert data["positions"].shape == (34, 3)
    assert data["indices"].shape == (96,)
