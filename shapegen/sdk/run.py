from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Union

from ..config import SceneConfig, load_config
from ..core.meshdata import merge_meshes
from ..core.utils import get_logger
from ..runtime.builders import build_parts, build_writer, format_for_path

_log = get_logger()


@dataclass(frozen=True)
class BuildResult:
    """Summary of a mesh build driven by a configuration file."""

    stats: Dict[str, int]
    output_path: Path
    config: SceneConfig


def build_from_config(
    config: Union[str, Path, SceneConfig],
    *,
    output: Optional[Path] = None,
) -> BuildResult:
    """Generate the scene described by a configuration file or object and write it.

    Parameters
    ----------
    config:
        Path to a YAML file or a pre-loaded :class:`~shapegen.config.schema.SceneConfig`.
    output:
        Optional override for the output file. The extension drives the
        format (``.ply``, ``.obj`` or ``.npz``).

    Returns
    -------
    BuildResult
        Vertex/triangle/part counts, the resolved output path, and the
        configuration object used for the build.
    """

    cfg = load_config(config) if not isinstance(config, SceneConfig) else config.model_copy(deep=True)

    if output is not None:
        out_path = Path(output).resolve()
        cfg.output.format = format_for_path(out_path)
        cfg.output.path = out_path
    else:
        cfg.output.path = Path(cfg.output.path).resolve()

    parts = build_parts(cfg)
    mesh = merge_meshes(parts)
    _log.debug("Built %d part(s): %d vertices, %d triangles", len(parts), mesh.vertex_count, mesh.triangle_count)

    writer = build_writer(cfg)
    try:
        writer.write_mesh(mesh)
    finally:
        writer.close()

    stats = {
        "parts": len(parts),
        "vertices": mesh.vertex_count,
        "triangles": mesh.triangle_count,
    }
    return BuildResult(stats=stats, output_path=Path(cfg.output.path), config=cfg)
