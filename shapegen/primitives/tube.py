from __future__ import annotations

from typing import Sequence

import numpy as np

from ..core.meshdata import MeshData
from ..core.utils import ensure_unit_vectors, get_logger
from ..curves.bezier import sample_bezier
from ..curves.frames import Frame, build_frames, frame_axes
from .cylinder import disc_uv

_log = get_logger()

MAX_V_STEP = 1.0


def _path_v(path: np.ndarray) -> np.ndarray:
    """Texture v per path sample: cumulative segment length, each step capped."""
    steps = np.minimum(np.linalg.norm(np.diff(path, axis=0), axis=1), MAX_V_STEP)
    return np.concatenate([[0.0], np.cumsum(steps)])


def _cap(frame: Frame, segments: int, radius: float, outward: np.ndarray, start: int, flip: bool):
    """Flat fan closing one tube end; returns (positions, normals, uvs, triangles)."""
    angles = np.arange(segments + 1) * 2.0 * np.pi / segments
    c, s = np.cos(angles), np.sin(angles)
    fan = frame.origin + radius * (c[:, None] * frame.right + s[:, None] * frame.up)
    positions = np.vstack([frame.origin, fan])
    normals = np.tile(outward, (segments + 2, 1))
    uvs = np.vstack([[0.5, 0.5], disc_uv(c, s)])

    k = np.arange(segments, dtype=np.int64)
    center = np.full(segments, start, dtype=np.int64)
    a, b = start + 1 + k, start + 2 + k
    tris = np.stack([center, b, a] if flip else [center, a, b], axis=1)
    return positions, normals, uvs, tris


def tube_mesh(
    segments: int,
    control_points: Sequence[Sequence[float]],
    bezier_segments: int,
    radius: float,
) -> MeshData:
    """Sweep a circle of ``radius`` along a Bezier path and cap both ends.

    The path is sampled into ``bezier_segments + 1`` points; each gets a ring
    of ``segments`` vertices oriented by :func:`build_frames`. Rings are
    stitched into a side wall, then the end and start of the path are closed
    with ``segments + 1``-vertex fans (the last fan vertex repeats the first).
    """
    if segments < 3:
        raise ValueError(f"Tube needs at least 3 segments, got {segments}.")
    if bezier_segments < 1:
        raise ValueError(f"Tube needs at least 1 path segment, got {bezier_segments}.")
    if radius <= 0.0:
        raise ValueError(f"Tube radius must be positive, got {radius}.")

    path = sample_bezier(control_points, bezier_segments)
    frames = build_frames(path)
    origins, forwards, rights, ups = frame_axes(frames)
    rings = len(path)

    angles = np.arange(segments) * 2.0 * np.pi / segments
    c, s = np.cos(angles), np.sin(angles)
    # (rings, segments, 3)
    offsets = radius * (c[None, :, None] * rights[:, None, :] + s[None, :, None] * ups[:, None, :])
    side_pos = (origins[:, None, :] + offsets).reshape(-1, 3)
    side_nrm = ensure_unit_vectors(offsets.reshape(-1, 3))
    u = np.arange(segments) / segments
    v = _path_v(path)
    uu, vv = np.meshgrid(u, v)
    side_uv = np.column_stack([uu.ravel(), vv.ravel()])

    k = np.arange(rings - 1, dtype=np.int64)[:, None] * segments
    i = np.arange(segments, dtype=np.int64)[None, :]
    i_next = (i + 1) % segments
    a, a_next = k + i, k + i_next
    b, b_next = a + segments, a_next + segments
    side_tris = np.stack([
        np.stack([a, a_next, b_next], axis=-1),
        np.stack([b_next, b, a], axis=-1),
    ], axis=2).reshape(-1, 3)

    n_side = rings * segments
    end_frame, start_frame = frames[-1], frames[0]
    end = _cap(end_frame, segments, radius, forwards[-1], start=n_side, flip=False)
    start = _cap(start_frame, segments, radius, -forwards[0], start=n_side + segments + 2, flip=True)

    mesh = MeshData(
        positions=np.vstack([side_pos, end[0], start[0]]),
        normals=np.vstack([side_nrm, end[1], start[1]]),
        uvs=np.vstack([side_uv, end[2], start[2]]),
        indices=np.vstack([side_tris, end[3], start[3]]).reshape(-1),
    )
    _log.debug("tube: %d path samples, %d vertices, %d triangles", rings, mesh.vertex_count, mesh.triangle_count)
    return mesh
