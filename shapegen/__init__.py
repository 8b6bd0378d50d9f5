"""shapegen – procedural triangle-mesh primitives packed as GPU-ready buffers.

This package contains:
- MeshData, the flat attribute + index record every generator returns (core.meshdata)
- Bezier evaluation and sweep frames (curves)
- Box, room, cylinder, sphere and Bezier-tube generators (primitives)
- PLY/OBJ/NPZ writers (core.exporter)
- Scene presets, YAML scene config and a config-driven build entry point

Generators are pure: same parameters, same arrays, no shared state.
"""

from .core.meshdata import MeshData, merge_meshes
from .core.transform import model_matrix
from .core.exporter import PlyWriter, ObjWriter, NpzWriter
from .curves import binomial, bezier_point, sample_bezier, Frame, build_frames
from .primitives import box_mesh, room_mesh, cylinder_mesh, sphere_mesh, tube_mesh, ROOM_PALETTE
from .examples.presets import build_preset
