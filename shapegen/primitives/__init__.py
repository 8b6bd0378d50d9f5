"""Parametric shape generators, one pure function per shape."""

from .box import box_mesh
from .room import room_mesh, ROOM_PALETTE
from .cylinder import cylinder_mesh
from .sphere import sphere_mesh
from .tube import tube_mesh

__all__ = ["box_mesh", "room_mesh", "ROOM_PALETTE", "cylinder_mesh", "sphere_mesh", "tube_mesh"]
