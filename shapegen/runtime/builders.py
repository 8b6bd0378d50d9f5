from __future__ import annotations

from pathlib import Path
from typing import List

from ..config import SceneConfig
from ..config.schema import PlacementConfig
from ..core.exporter import WRITERS
from ..core.meshdata import MeshData
from ..core.transform import model_matrix
from ..examples.presets import build_preset
from ..primitives import box_mesh, cylinder_mesh, room_mesh, sphere_mesh, tube_mesh


def build_part(part_cfg: PlacementConfig) -> MeshData:
    kind = getattr(part_cfg, "kind", None)
    if kind == "box":
        mesh = box_mesh(part_cfg.width, part_cfg.height, part_cfg.depth)
    elif kind == "room":
        mesh = room_mesh(part_cfg.width, part_cfg.height, part_cfg.depth)
    elif kind == "cylinder":
        mesh = cylinder_mesh(part_cfg.segments, part_cfg.height, part_cfg.radius)
    elif kind == "sphere":
        mesh = sphere_mesh(part_cfg.longitude_segments, part_cfg.latitude_segments, part_cfg.radius)
    elif kind == "tube":
        mesh = tube_mesh(part_cfg.segments, part_cfg.control_points, part_cfg.bezier_segments, part_cfg.radius)
    else:
        raise ValueError(f"Unsupported part kind: {kind}")

    identity = (
        part_cfg.translate == (0.0, 0.0, 0.0)
        and part_cfg.rotate_deg == (0.0, 0.0, 0.0)
        and part_cfg.scale == 1.0
    )
    if identity:
        return mesh
    return mesh.transformed(model_matrix(part_cfg.translate, part_cfg.rotate_deg, part_cfg.scale))


def build_parts(cfg: SceneConfig) -> List[MeshData]:
    if cfg.preset is not None:
        return [build_preset(cfg.preset)]
    return [build_part(p) for p in cfg.parts]


def build_writer(cfg: SceneConfig):
    out_cfg = cfg.output
    format_lower = out_cfg.format.lower()
    writer_cls = WRITERS.get(format_lower)
    if writer_cls is None:
        raise ValueError(f"Unsupported output format: {out_cfg.format}")
    return writer_cls(str(out_cfg.path))


def format_for_path(path: Path) -> str:
    ext = Path(path).suffix.lower().lstrip(".")
    if ext not in WRITERS:
        raise ValueError(f"Unsupported output extension '.{ext}'")
    return ext
