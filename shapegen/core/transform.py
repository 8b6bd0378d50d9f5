from __future__ import annotations
from typing import Sequence
import numpy as np

from .utils import radians


def rotation_rpy(rpy_deg: Sequence[float]) -> np.ndarray:
    """3x3 rotation from roll/pitch/yaw in degrees (R = Rz @ Ry @ Rx)."""
    rx, ry, rz = radians(np.asarray(rpy_deg, dtype=float))
    cx, sx = np.cos(rx), np.sin(rx)
    cy, sy = np.cos(ry), np.sin(ry)
    cz, sz = np.cos(rz), np.sin(rz)
    Rx = np.array([[1,0,0],[0,cx,-sx],[0,sx,cx]])
    Ry = np.array([[cy,0,sy],[0,1,0],[-sy,0,cy]])
    Rz = np.array([[cz,-sz,0],[sz,cz,0],[0,0,1]])
    return (Rz @ Ry @ Rx).astype(float)


def model_matrix(
    translate: Sequence[float] = (0.0, 0.0, 0.0),
    rotate_deg: Sequence[float] = (0.0, 0.0, 0.0),
    scale: float = 1.0,
) -> np.ndarray:
    """4x4 model matrix T @ R @ S: scale first, then rotate, then translate."""
    if scale <= 0.0:
        raise ValueError("scale must be positive.")
    m = np.eye(4)
    m[:3, :3] = rotation_rpy(rotate_deg) * float(scale)
    m[:3, 3] = np.asarray(translate, dtype=float)
    return m
