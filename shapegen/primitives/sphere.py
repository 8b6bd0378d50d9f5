from __future__ import annotations

import numpy as np

from ..core.meshdata import MeshData
from ..core.utils import get_logger

_log = get_logger()


def sphere_mesh(longitude_segments: int, latitude_segments: int, radius: float) -> MeshData:
    """UV sphere centered at the origin with poles on the Y axis.

    Vertex 0 is the north pole, vertex 1 the south pole; ring vertex
    ``(i, j)`` for ``i in [1, M-1]``, ``j in [0, L-1]`` sits at index
    ``2 + (i-1)*L + j`` with polar angle ``i*pi/M`` and azimuth ``j*2pi/L``.
    UVs are ``(azimuth / 2pi, polar / pi)``, so the texture seam is at u = 0.
    """
    L, M = longitude_segments, latitude_segments
    if L < 3:
        raise ValueError(f"Sphere needs at least 3 longitude segments, got {L}.")
    if M < 2:
        raise ValueError(f"Sphere needs at least 2 latitude segments, got {M}.")
    if radius <= 0.0:
        raise ValueError(f"Sphere radius must be positive, got {radius}.")

    polar = np.arange(1, M) * np.pi / M                     # (M-1,)
    azimuth = np.arange(L) * 2.0 * np.pi / L                # (L,)
    phi, theta = np.meshgrid(polar, azimuth, indexing="ij")  # (M-1, L)
    unit = np.stack([
        np.sin(phi) * np.cos(theta),
        np.cos(phi),
        np.sin(phi) * np.sin(theta),
    ], axis=-1).reshape(-1, 3)
    ring_uv = np.column_stack([(theta / (2.0 * np.pi)).ravel(), (phi / np.pi).ravel()])

    poles = np.array([[0.0, 1.0, 0.0], [0.0, -1.0, 0.0]])
    positions = np.vstack([poles * radius, unit * radius])
    normals = np.vstack([poles, unit])
    uvs = np.vstack([[0.0, 0.0], [0.0, 1.0], ring_uv])

    j = np.arange(L, dtype=np.int64)
    j_next = (j + 1) % L

    def ring(i: int, jj: np.ndarray) -> np.ndarray:
        return 2 + (i - 1) * L + jj

    parts = [
        # north fan
        np.stack([np.zeros_like(j), ring(1, j_next), ring(1, j)], axis=1),
        # south fan
        np.stack([ring(M - 1, j), ring(M - 1, j_next), np.ones_like(j)], axis=1),
    ]
    for i in range(2, M):
        upper, upper_next = ring(i - 1, j), ring(i - 1, j_next)
        lower, lower_next = ring(i, j), ring(i, j_next)
        quads = np.stack([
            np.stack([lower, upper_next, lower_next], axis=1),
            np.stack([upper_next, lower, upper], axis=1),
        ], axis=1)
        parts.append(quads.reshape(-1, 3))

    mesh = MeshData(positions=positions, normals=normals, uvs=uvs, indices=np.vstack(parts).reshape(-1))
    _log.debug("sphere: %d vertices, %d triangles", mesh.vertex_count, mesh.triangle_count)
    return mesh
