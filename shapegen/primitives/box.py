from __future__ import annotations

import numpy as np

from ..core.meshdata import MeshData
from ..core.utils import get_logger

_log = get_logger()

# Corner sign patterns, 4 per face, counter-clockwise seen from outside.
_FACE_CORNERS = np.array([
    # front (+Z)
    [-1, -1, 1], [1, -1, 1], [1, 1, 1], [-1, 1, 1],
    # back (-Z)
    [1, -1, -1], [-1, -1, -1], [-1, 1, -1], [1, 1, -1],
    # right (+X)
    [1, -1, 1], [1, -1, -1], [1, 1, -1], [1, 1, 1],
    # left (-X)
    [-1, -1, -1], [-1, -1, 1], [-1, 1, 1], [-1, 1, -1],
    # top (+Y)
    [-1, 1, -1], [-1, 1, 1], [1, 1, 1], [1, 1, -1],
    # bottom (-Y)
    [-1, -1, -1], [1, -1, -1], [1, -1, 1], [-1, -1, 1],
], dtype=np.float64)

_FACE_NORMALS = np.array([
    [0, 0, 1], [0, 0, -1], [1, 0, 0], [-1, 0, 0], [0, 1, 0], [0, -1, 0],
], dtype=np.float32)

_FACE_UVS = np.array([
    [0, 0], [1, 0], [1, 1], [0, 1],   # front
    [1, 1], [0, 1], [0, 0], [1, 0],   # back
    [0, 0], [1, 0], [1, 1], [0, 1],   # right
    [0, 0], [1, 0], [1, 1], [0, 1],   # left
    [0, 1], [0, 0], [1, 0], [1, 1],   # top
    [0, 0], [1, 0], [1, 1], [0, 1],   # bottom
], dtype=np.float32)

# Two triangles per quad (0,1,2) (2,3,0).
_QUAD = np.array([0, 1, 2, 2, 3, 0], dtype=np.int64)


def quad_indices(face_count: int, reverse: bool = False) -> np.ndarray:
    """Triangle indices for ``face_count`` consecutive 4-vertex quads."""
    quad = _QUAD[::-1] if reverse else _QUAD
    offsets = np.arange(face_count, dtype=np.int64)[:, None] * 4
    return (offsets + quad[None, :]).ravel()


def _check_dims(width: float, height: float, depth: float) -> None:
    if width <= 0.0 or height <= 0.0 or depth <= 0.0:
        raise ValueError(f"Box dimensions must be positive, got ({width}, {height}, {depth}).")


def box_mesh(width: float, height: float, depth: float) -> MeshData:
    """Axis-aligned box centered at the origin.

    Each face has its own 4 vertices so it carries a flat normal and a full
    0-1 UV square: 24 vertices, 12 triangles.
    """
    _check_dims(width, height, depth)
    half = np.array([width, height, depth], dtype=np.float64) / 2.0
    positions = _FACE_CORNERS * half
    normals = np.repeat(_FACE_NORMALS, 4, axis=0)
    mesh = MeshData(
        positions=positions,
        normals=normals,
        uvs=_FACE_UVS,
        indices=quad_indices(6),
    )
    _log.debug("box: %d vertices, %d triangles", mesh.vertex_count, mesh.triangle_count)
    return mesh
