from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable
import numpy as np

from .utils import ensure_unit_vectors

_WHITE = (1.0, 1.0, 1.0)


def _empty_colors() -> np.ndarray:
    return np.zeros((0, 3), dtype=np.float32)


@dataclass(frozen=True, eq=False)
class MeshData:
    """Flat triangle mesh: index-aligned vertex attributes plus a triangle list.

    Arrays are converted to their GPU-facing dtypes (float32 attributes,
    uint32 indices) and frozen after validation. Fields cannot be reassigned;
    build a new record instead.
    """
    positions: np.ndarray                 # (N, 3)
    normals: np.ndarray                   # (N, 3)
    uvs: np.ndarray                       # (N, 2)
    indices: np.ndarray                   # (3T,)
    colors: np.ndarray = field(default_factory=_empty_colors)   # (N, 3) or (0, 3)

    def __post_init__(self) -> None:
        positions = np.array(self.positions, dtype=np.float32).reshape(-1, 3)
        normals = np.array(self.normals, dtype=np.float32).reshape(-1, 3)
        uvs = np.array(self.uvs, dtype=np.float32).reshape(-1, 2)
        colors = np.array(self.colors, dtype=np.float32).reshape(-1, 3)
        raw_indices = np.array(self.indices).reshape(-1)

        n = len(positions)
        if len(normals) != n:
            raise ValueError(f"normals length {len(normals)} != positions length {n}")
        if len(uvs) != n:
            raise ValueError(f"uvs length {len(uvs)} != positions length {n}")
        if len(colors) not in (0, n):
            raise ValueError(f"colors length {len(colors)} must be 0 or {n}")
        if len(raw_indices) % 3 != 0:
            raise ValueError(f"indices length {len(raw_indices)} is not a multiple of 3")
        if len(raw_indices):
            if raw_indices.min() < 0 or raw_indices.max() >= n:
                raise ValueError(f"indices must lie in [0, {n}), got range "
                                 f"[{raw_indices.min()}, {raw_indices.max()}]")

        for arr in (positions, normals, uvs, colors):
            arr.flags.writeable = False
        indices = raw_indices.astype(np.uint32)
        indices.flags.writeable = False

        object.__setattr__(self, "positions", positions)
        object.__setattr__(self, "normals", normals)
        object.__setattr__(self, "uvs", uvs)
        object.__setattr__(self, "colors", colors)
        object.__setattr__(self, "indices", indices)

    # -- shape info --
    @property
    def vertex_count(self) -> int:
        return len(self.positions)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    @property
    def has_colors(self) -> bool:
        return len(self.colors) > 0

    def triangles(self) -> np.ndarray:
        return self.indices.reshape(-1, 3)

    def face_normals(self) -> np.ndarray:
        """Unit normals implied by winding order (right-hand rule)."""
        tris = self.positions.astype(np.float64)[self.triangles()]
        n = np.cross(tris[:, 1] - tris[:, 0], tris[:, 2] - tris[:, 0])
        return ensure_unit_vectors(n)

    def bounds(self) -> tuple[float, float, float, float, float, float]:
        if self.vertex_count == 0:
            raise RuntimeError("Mesh has no vertices.")
        mn = self.positions.min(axis=0)
        mx = self.positions.max(axis=0)
        return (float(mn[0]), float(mx[0]), float(mn[1]), float(mx[1]), float(mn[2]), float(mx[2]))

    # -- derived records --
    def interleaved(self) -> np.ndarray:
        """Per-vertex rows in attribute order position, normal, uv[, color]."""
        cols = [self.positions, self.normals, self.uvs]
        if self.has_colors:
            cols.append(self.colors)
        return np.hstack(cols).astype(np.float32, copy=False)

    def transformed(self, matrix: np.ndarray) -> "MeshData":
        """Apply a 4x4 model matrix; normals go through the inverse-transpose.

        Mirroring matrices (negative determinant) reverse every triangle so
        winding keeps agreeing with the normals.
        """
        m = np.asarray(matrix, dtype=np.float64)
        if m.shape != (4, 4):
            raise ValueError(f"Model matrix must be 4x4, got {m.shape}")
        lin = m[:3, :3]
        positions = self.positions.astype(np.float64) @ lin.T + m[:3, 3]
        normal_matrix = np.linalg.inv(lin).T
        normals = ensure_unit_vectors(self.normals.astype(np.float64) @ normal_matrix.T)
        indices = self.triangles()[:, ::-1].reshape(-1) if np.linalg.det(lin) < 0.0 else self.indices
        return MeshData(
            positions=positions,
            normals=normals,
            uvs=self.uvs.copy(),
            indices=indices.copy(),
            colors=self.colors.copy(),
        )


def merge_meshes(parts: Iterable[MeshData]) -> MeshData:
    """Concatenate meshes into one record, offsetting each part's indices.

    If any part carries colors, parts without colors are filled with white.
    """
    parts = list(parts)
    if not parts:
        raise ValueError("merge_meshes requires at least one mesh.")
    any_colors = any(p.has_colors for p in parts)

    positions: list[np.ndarray] = []
    normals: list[np.ndarray] = []
    uvs: list[np.ndarray] = []
    colors: list[np.ndarray] = []
    indices: list[np.ndarray] = []
    offset = 0
    for part in parts:
        positions.append(part.positions)
        normals.append(part.normals)
        uvs.append(part.uvs)
        if any_colors:
            if part.has_colors:
                colors.append(part.colors)
            else:
                colors.append(np.tile(np.asarray(_WHITE, dtype=np.float32), (part.vertex_count, 1)))
        indices.append(part.indices.astype(np.int64) + offset)
        offset += part.vertex_count

    return MeshData(
        positions=np.vstack(positions),
        normals=np.vstack(normals),
        uvs=np.vstack(uvs),
        indices=np.concatenate(indices),
        colors=np.vstack(colors) if any_colors else _empty_colors(),
    )

