from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer

from ..core.meshdata import MeshData
from ..examples.presets import build_preset
from ..primitives import box_mesh, cylinder_mesh, room_mesh, sphere_mesh, tube_mesh
from ..runtime.builders import format_for_path
from ..core.exporter import WRITERS
from ..sdk import build_from_config

app = typer.Typer(help="Procedural triangle-mesh primitives")


def _configure_logging(level: str) -> None:
    numeric = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=numeric, format="[%(levelname)s] %(message)s")
    logging.getLogger("shapegen").setLevel(numeric)


def _write(mesh: MeshData, output: Path) -> Path:
    out = output.resolve()
    try:
        fmt = format_for_path(out)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="OUTPUT") from exc
    writer = WRITERS[fmt](str(out))
    try:
        writer.write_mesh(mesh)
    finally:
        writer.close()
    typer.echo(f"Wrote {mesh.vertex_count} vertices / {mesh.triangle_count} triangles → {out}")
    return out


def _generate(factory, output: Path, log_level: str, *args) -> None:
    _configure_logging(log_level)
    try:
        mesh = factory(*args)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    _write(mesh, output)


def _parse_point(text: str) -> tuple[float, float, float]:
    parts = [p for p in text.replace(" ", "").split(",") if p]
    if len(parts) != 3:
        raise typer.BadParameter(f"Control point '{text}' must be 'x,y,z'.", param_hint="--control-point")
    try:
        x, y, z = (float(p) for p in parts)
    except ValueError as exc:
        raise typer.BadParameter(f"Control point '{text}' is not numeric.", param_hint="--control-point") from exc
    return (x, y, z)


@app.command("build")
def build(
    config: Path = typer.Argument(..., exists=True, readable=True, help="Path to YAML scene configuration."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Override output path (extension sets format)."),
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level (e.g. INFO, DEBUG)."),
) -> None:
    """Build the scene described by a YAML config."""

    _configure_logging(log_level)
    try:
        result = build_from_config(config, output=output)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    stats = result.stats
    typer.echo(
        f"Built {stats['parts']} part(s): {stats['vertices']} vertices / "
        f"{stats['triangles']} triangles → {result.output_path}"
    )


@app.command("box")
def box_cli(
    output: Path = typer.Argument(..., help="Output mesh path (.ply/.obj/.npz)."),
    width: float = typer.Option(1.0, "--width", help="Extent along X."),
    height: float = typer.Option(1.0, "--height", help="Extent along Y."),
    depth: float = typer.Option(1.0, "--depth", help="Extent along Z."),
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level (e.g. INFO, DEBUG)."),
) -> None:
    """Closed box with outward normals."""

    _generate(box_mesh, output, log_level, width, height, depth)


@app.command("room")
def room_cli(
    output: Path = typer.Argument(..., help="Output mesh path (.ply/.obj/.npz)."),
    width: float = typer.Option(3.0, "--width", help="Extent along X."),
    height: float = typer.Option(3.0, "--height", help="Extent along Y."),
    depth: float = typer.Option(3.0, "--depth", help="Extent along Z."),
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level (e.g. INFO, DEBUG)."),
) -> None:
    """Open-front colored room with inward normals."""

    _generate(room_mesh, output, log_level, width, height, depth)


@app.command("cylinder")
def cylinder_cli(
    output: Path = typer.Argument(..., help="Output mesh path (.ply/.obj/.npz)."),
    segments: int = typer.Option(18, "--segments", help="Angular segments (>= 3)."),
    height: float = typer.Option(1.5, "--height", help="Height along Y."),
    radius: float = typer.Option(0.2, "--radius", help="Radius."),
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level (e.g. INFO, DEBUG)."),
) -> None:
    """Capped cylinder around the Y axis."""

    _generate(cylinder_mesh, output, log_level, segments, height, radius)


@app.command("sphere")
def sphere_cli(
    output: Path = typer.Argument(..., help="Output mesh path (.ply/.obj/.npz)."),
    longitude: int = typer.Option(18, "--longitude", help="Longitude segments (>= 3)."),
    latitude: int = typer.Option(8, "--latitude", help="Latitude segments (>= 2)."),
    radius: float = typer.Option(0.24, "--radius", help="Radius."),
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level (e.g. INFO, DEBUG)."),
) -> None:
    """UV sphere centered at the origin."""

    _generate(sphere_mesh, output, log_level, longitude, latitude, radius)


@app.command("tube")
def tube_cli(
    output: Path = typer.Argument(..., help="Output mesh path (.ply/.obj/.npz)."),
    control_point: List[str] = typer.Option(..., "--control-point", "-p", help="Bezier control point 'x,y,z' (repeat, >= 2)."),
    segments: int = typer.Option(18, "--segments", help="Cross-section segments (>= 3)."),
    bezier_segments: int = typer.Option(42, "--bezier-segments", help="Path subdivisions (>= 1)."),
    radius: float = typer.Option(0.2, "--radius", help="Tube radius."),
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level (e.g. INFO, DEBUG)."),
) -> None:
    """Capped tube swept along a Bezier curve."""

    points = [_parse_point(p) for p in control_point]
    _generate(tube_mesh, output, log_level, segments, points, bezier_segments, radius)


@app.command("preset")
def preset_cli(
    name: str = typer.Argument(..., help="Scene preset (cornell, primitives)."),
    output: Path = typer.Argument(..., help="Output mesh path (.ply/.obj/.npz)."),
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level (e.g. INFO, DEBUG)."),
) -> None:
    """Generate a named demo scene."""

    _generate(build_preset, output, log_level, name)


def main() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
