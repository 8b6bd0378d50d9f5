from __future__ import annotations

from typing import Callable, Dict, List

from ..core.meshdata import MeshData, merge_meshes
from ..core.transform import model_matrix
from ..primitives import box_mesh, cylinder_mesh, room_mesh, sphere_mesh, tube_mesh

CORNELL_TUBE_CONTROL_POINTS = [
    (-0.3, 0.6, 0.0),
    (0.0, 1.6, 0.0),
    (1.4, 0.3, 0.0),
    (0.0, 0.3, 0.0),
    (0.0, -0.5, 0.0),
]


def _cornell() -> List[MeshData]:
    return [
        room_mesh(3.0, 3.0, 3.0),
        box_mesh(0.34, 0.34, 0.34).transformed(model_matrix((-0.5, -0.8, 0.0), (0.0, 45.0, 0.0))),
        sphere_mesh(18, 8, 0.24).transformed(model_matrix((0.5, -0.8, 0.0))),
        tube_mesh(18, CORNELL_TUBE_CONTROL_POINTS, 42, 0.2).transformed(model_matrix((0.5, 0.0, 0.0))),
        cylinder_mesh(18, 1.5, 0.2).transformed(model_matrix((-0.5, 0.3, 0.0))),
    ]


def _primitives() -> List[MeshData]:
    return [
        box_mesh(1.0, 1.0, 1.0).transformed(model_matrix((-3.0, 0.0, 0.0))),
        cylinder_mesh(24, 1.0, 0.5).transformed(model_matrix((-1.5, 0.0, 0.0))),
        sphere_mesh(24, 12, 0.5),
        tube_mesh(16, [(0.0, -0.5, 0.0), (0.5, 0.5, 0.0), (1.0, -0.5, 0.0)], 24, 0.15)
        .transformed(model_matrix((1.0, 0.0, 0.0))),
    ]


PRESETS: Dict[str, Callable[[], List[MeshData]]] = {
    "cornell": _cornell,
    "primitives": _primitives,
}


def build_preset(name: str) -> MeshData:
    key = name.lower()
    if key not in PRESETS:
        raise ValueError(f"Unknown scene preset '{name}'. Available: {sorted(PRESETS)}")
    return merge_meshes(PRESETS[key]())
