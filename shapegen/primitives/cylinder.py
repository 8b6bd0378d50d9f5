from __future__ import annotations

import numpy as np

from ..core.meshdata import MeshData
from ..core.utils import get_logger

_log = get_logger()


def disc_uv(cos_t: np.ndarray, sin_t: np.ndarray) -> np.ndarray:
    """Map a unit circle into the unit UV square (center at 0.5, 0.5)."""
    return np.column_stack([cos_t * 0.5 + 0.5, sin_t * 0.5 + 0.5])


def cylinder_mesh(segments: int, height: float, radius: float) -> MeshData:
    """Closed cylinder around the Y axis, centered at the origin.

    Layout: vertex 0 is the bottom cap center, vertex 1 the top cap center.
    Every angular step ``i`` then adds four vertices starting at ``2 + 4*i``:
    bottom cap, bottom side, top cap, top side. Cap copies carry the flat
    +-Y normal, side copies the radial one, so shading has no seams between
    the caps and the wall. Result: ``2 + 4*segments`` vertices,
    ``4*segments`` triangles.
    """
    if segments < 3:
        raise ValueError(f"Cylinder needs at least 3 segments, got {segments}.")
    if height <= 0.0 or radius <= 0.0:
        raise ValueError(f"Cylinder height and radius must be positive, got ({height}, {radius}).")

    half = height / 2.0
    step = 2.0 * np.pi / segments
    angles = np.arange(segments) * step
    c, s = np.cos(angles), np.sin(angles)
    x, z = c * radius, s * radius
    zeros = np.zeros(segments)
    ones = np.ones(segments)

    bottom = np.column_stack([x, np.full(segments, -half), z])
    top = np.column_stack([x, np.full(segments, half), z])
    down = np.column_stack([zeros, -ones, zeros])
    up = np.column_stack([zeros, ones, zeros])
    radial = np.column_stack([c, zeros, s])
    cap_uv = disc_uv(c, s)
    u = angles / (2.0 * np.pi)
    side_uv_bottom = np.column_stack([u, zeros])
    side_uv_top = np.column_stack([u, ones])

    # (segments, 4, k) -> interleave per angular step
    ring_pos = np.stack([bottom, bottom, top, top], axis=1).reshape(-1, 3)
    ring_nrm = np.stack([down, radial, up, radial], axis=1).reshape(-1, 3)
    ring_uv = np.stack([cap_uv, side_uv_bottom, cap_uv, side_uv_top], axis=1).reshape(-1, 2)

    positions = np.vstack([[0.0, -half, 0.0], [0.0, half, 0.0], ring_pos])
    normals = np.vstack([[0.0, -1.0, 0.0], [0.0, 1.0, 0.0], ring_nrm])
    uvs = np.vstack([[0.5, 0.5], [0.5, 0.5], ring_uv])

    i = np.arange(segments, dtype=np.int64)
    nxt = (i + 1) % segments
    base, base_next = 2 + 4 * i, 2 + 4 * nxt
    bottom_cap, bottom_cap_next = base, base_next
    top_cap, top_cap_next = base + 2, base_next + 2
    bottom_side, bottom_side_next = base + 1, base_next + 1
    top_side, top_side_next = base + 3, base_next + 3

    tris = np.stack([
        np.stack([np.zeros_like(i), bottom_cap, bottom_cap_next], axis=1),
        np.stack([np.ones_like(i), top_cap_next, top_cap], axis=1),
        np.stack([bottom_side, top_side_next, bottom_side_next], axis=1),
        np.stack([top_side_next, bottom_side, top_side], axis=1),
    ], axis=1)   # (segments, 4, 3)

    mesh = MeshData(positions=positions, normals=normals, uvs=uvs, indices=tris.reshape(-1))
    _log.debug("cylinder: %d vertices, %d triangles", mesh.vertex_count, mesh.triangle_count)
    return mesh
