from __future__ import annotations
from typing import List
import numpy as np
import pathlib

from .meshdata import MeshData, merge_meshes
from .utils import get_logger

_log = get_logger()


class _BufferedMeshWriter:
    """Collects meshes and writes them once, merged, on close."""

    def __init__(self, path: str) -> None:
        self.path = path
        self._meshes: List[MeshData] = []

    def write_mesh(self, mesh: MeshData) -> None:
        self._meshes.append(mesh)

    def close(self) -> None:
        if not self._meshes:
            return
        path = pathlib.Path(self.path)
        path.parent.mkdir(parents=True, exist_ok=True)
        mesh = merge_meshes(self._meshes)
        self._write(path, mesh)
        self._meshes.clear()
        _log.info("Wrote %s (%d vertices, %d triangles)", path.name, mesh.vertex_count, mesh.triangle_count)

    def _write(self, path: pathlib.Path, mesh: MeshData) -> None:  # pragma: no cover - abstract
        raise NotImplementedError


class PlyWriter(_BufferedMeshWriter):
    """ASCII PLY with normals, texture coordinates and optional 8-bit colors."""

    def _write(self, path: pathlib.Path, mesh: MeshData) -> None:
        rgb = None
        if mesh.has_colors:
            rgb = np.clip(np.round(mesh.colors * 255.0), 0, 255).astype(np.uint8)
        with open(path, "w", encoding="utf-8") as f:
            f.write("ply\n")
            f.write("format ascii 1.0\n")
            f.write(f"element vertex {mesh.vertex_count}\n")
            f.write("property float x\nproperty float y\nproperty float z\n")
            f.write("property float nx\nproperty float ny\nproperty float nz\n")
            f.write("property float s\nproperty float t\n")
            if rgb is not None:
                f.write("property uchar red\nproperty uchar green\nproperty uchar blue\n")
            f.write(f"element face {mesh.triangle_count}\n")
            f.write("property list uchar uint vertex_indices\n")
            f.write("end_header\n")
            for idx, ((x, y, z), (nx, ny, nz), (s, t)) in enumerate(zip(mesh.positions, mesh.normals, mesh.uvs)):
                line = f"{x:.6f} {y:.6f} {z:.6f} {nx:.6f} {ny:.6f} {nz:.6f} {s:.6f} {t:.6f}"
                if rgb is not None:
                    r, g, b = rgb[idx]
                    line += f" {int(r)} {int(g)} {int(b)}"
                f.write(line + "\n")
            for tri in mesh.triangles():
                f.write(f"3 {tri[0]} {tri[1]} {tri[2]}\n")


class ObjWriter(_BufferedMeshWriter):
    """Wavefront OBJ; position, uv and normal share one 1-based index per corner."""

    def _write(self, path: pathlib.Path, mesh: MeshData) -> None:
        with open(path, "w", encoding="utf-8") as f:
            f.write(f"# {mesh.vertex_count} vertices, {mesh.triangle_count} triangles\n")
            for x, y, z in mesh.positions:
                f.write(f"v {x:.6f} {y:.6f} {z:.6f}\n")
            for s, t in mesh.uvs:
                f.write(f"vt {s:.6f} {t:.6f}\n")
            for nx, ny, nz in mesh.normals:
                f.write(f"vn {nx:.6f} {ny:.6f} {nz:.6f}\n")
            for tri in mesh.triangles().astype(np.int64) + 1:
                a, b, c = tri
                f.write(f"f {a}/{a}/{a} {b}/{b}/{b} {c}/{c}/{c}\n")


class NpzWriter(_BufferedMeshWriter):
    """Raw GPU-ready arrays: positions, normals, uvs, colors, indices."""

    def _write(self, path: pathlib.Path, mesh: MeshData) -> None:
        np.savez_compressed(
            path,
            positions=mesh.positions,
            normals=mesh.normals,
            uvs=mesh.uvs,
            colors=mesh.colors,
            indices=mesh.indices,
        )


WRITERS = {
    "ply": PlyWriter,
    "obj": ObjWriter,
    "npz": NpzWriter,
}
