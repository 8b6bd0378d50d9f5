from __future__ import annotations

import numpy as np

from ..core.meshdata import MeshData
from ..core.utils import get_logger
from .box import _FACE_CORNERS, _FACE_NORMALS, _FACE_UVS, _check_dims, quad_indices

_log = get_logger()

# Classic test-scene palette, indexed by label.
ROOM_PALETTE = {
    "left": (1.0, 0.0, 0.0),
    "right": (0.0, 1.0, 0.0),
    "top": (0.96, 0.93, 0.85),
    "bottom": (0.64, 0.64, 0.64),
    "back": (0.76, 0.74, 0.68),
}

# Box face slots reused by the room (front is open): back, right(+X), left(-X), top, bottom.
_ROOM_FACES = (1, 2, 3, 4, 5)
# +X wall takes the "right" entry and -X the "left" entry, as in the Cornell scene.
_ROOM_COLOR_KEYS = ("back", "right", "left", "top", "bottom")


def room_mesh(width: float, height: float, depth: float) -> MeshData:
    """Open-front box seen from inside, with per-face vertex colors.

    5 faces, 20 vertices, 10 triangles. Normals point into the room and the
    winding is reversed relative to :func:`box_mesh`.
    """
    _check_dims(width, height, depth)
    half = np.array([width, height, depth], dtype=np.float64) / 2.0

    slots = np.concatenate([np.arange(f * 4, f * 4 + 4) for f in _ROOM_FACES])
    positions = _FACE_CORNERS[slots] * half
    normals = -np.repeat(_FACE_NORMALS[list(_ROOM_FACES)], 4, axis=0)
    uvs = _FACE_UVS[slots]
    colors = np.repeat(np.array([ROOM_PALETTE[k] for k in _ROOM_COLOR_KEYS], dtype=np.float32), 4, axis=0)

    mesh = MeshData(
        positions=positions,
        normals=normals,
        uvs=uvs,
        indices=quad_indices(len(_ROOM_FACES), reverse=True),
        colors=colors,
    )
    _log.debug("room: %d vertices, %d triangles", mesh.vertex_count, mesh.triangle_count)
    return mesh
