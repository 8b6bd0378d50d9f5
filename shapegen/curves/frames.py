from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from ..core.utils import as_points, get_logger, normalize

_log = get_logger()

WORLD_Z = (0.0, 0.0, 1.0)
WORLD_Y = (0.0, 1.0, 0.0)
_PARALLEL_EPS = 1e-6
_SEGMENT_EPS = 1e-12


@dataclass(frozen=True, eq=False)
class Frame:
    """Orthonormal basis attached to one path sample."""

    origin: np.ndarray   # (3,)
    forward: np.ndarray  # (3,)
    right: np.ndarray    # (3,)
    up: np.ndarray       # (3,)


def _forward_directions(points: np.ndarray) -> np.ndarray:
    seg = np.diff(points, axis=0)                       # (K-1, 3)
    lengths = np.linalg.norm(seg, axis=1)
    valid = lengths > _SEGMENT_EPS
    if not np.any(valid):
        raise ValueError("Path has zero length; cannot derive a forward direction.")

    dirs = np.zeros_like(seg)
    dirs[valid] = seg[valid] / lengths[valid, None]
    # Coincident samples borrow the nearest preceding direction, else the next one.
    last = None
    for k in range(len(dirs)):
        if valid[k]:
            last = dirs[k]
        elif last is not None:
            dirs[k] = last
    first_valid = int(np.argmax(valid))
    dirs[:first_valid] = dirs[first_valid]

    # Point k looks at k+1; the final point continues the final segment.
    return np.vstack([dirs, dirs[-1]])


def _side_axis(reference: np.ndarray, fallback: np.ndarray, forward: np.ndarray) -> np.ndarray:
    right = np.cross(reference, forward)
    norm = np.linalg.norm(right)
    if norm < _PARALLEL_EPS:
        _log.debug("Forward %s parallel to reference axis; using fallback %s.", forward, fallback)
        right = np.cross(fallback, forward)
        norm = np.linalg.norm(right)
        if norm < _PARALLEL_EPS:
            raise ValueError("Forward direction is parallel to both reference and fallback axes.")
    return right / norm


def build_frames(
    points: Sequence[Sequence[float]],
    reference_axis: Sequence[float] = WORLD_Z,
    fallback_axis: Sequence[float] = WORLD_Y,
) -> List[Frame]:
    """Derive a forward/right/up basis for every point of a sampled path.

    forward: direction to the next point (direction from the previous point
        for the last one).
    right: ``normalize(reference_axis x forward)``; when forward is parallel
        to ``reference_axis`` the ``fallback_axis`` is used instead.
    up: ``normalize(forward x right)``.

    ``(right, up, forward)`` is right-handed, so a circle ``cos(t) right +
    sin(t) up`` winds counter-clockwise seen from ahead of the path.

    Paths that reverse direction (cusps) are not supported: right flips sign
    across the turn while up does not, so a swept tube folds inside out there.
    """
    pts = as_points(points, name="points")
    if len(pts) < 2:
        raise ValueError(f"A path needs at least 2 points to define a frame, got {len(pts)}.")
    reference = normalize(np.asarray(reference_axis, dtype=np.float64))
    fallback = normalize(np.asarray(fallback_axis, dtype=np.float64))

    forwards = _forward_directions(pts)
    frames: List[Frame] = []
    for origin, forward in zip(pts, forwards):
        right = _side_axis(reference, fallback, forward)
        up = normalize(np.cross(forward, right))
        frames.append(Frame(origin=origin.copy(), forward=forward.copy(), right=right, up=up))
    return frames


def frame_axes(frames: Sequence[Frame]) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Stack frames into ``(origins, forwards, rights, ups)``, each ``(K, 3)``."""
    origins = np.array([f.origin for f in frames], dtype=np.float64)
    forwards = np.array([f.forward for f in frames], dtype=np.float64)
    rights = np.array([f.right for f in frames], dtype=np.float64)
    ups = np.array([f.up for f in frames], dtype=np.float64)
    return origins, forwards, rights, ups
