from __future__ import annotations

from typing import Sequence

import numpy as np

from ..core.utils import as_points


def binomial(n: int, k: int) -> int:
    """Binomial coefficient C(n, k) via the multiplicative recurrence."""
    if k < 0 or k > n:
        return 0
    result = 1
    for i in range(1, k + 1):
        result = result * (n - i + 1) // i
    return result


def _control_array(control_points: Sequence[Sequence[float]]) -> np.ndarray:
    pts = as_points(control_points, name="control_points")
    if len(pts) < 2:
        raise ValueError(f"A Bezier curve needs at least 2 control points, got {len(pts)}.")
    return pts


def bezier_point(control_points: Sequence[Sequence[float]], t: float) -> np.ndarray:
    """Evaluate the Bezier curve of degree ``len(control_points) - 1`` at ``t``.

    Uses the Bernstein form ``sum C(n,i) t^i (1-t)^(n-i) P_i``. ``t`` is not
    clamped; values outside [0, 1] extrapolate.
    """
    pts = _control_array(control_points)
    n = len(pts) - 1
    point = np.zeros(3, dtype=np.float64)
    for i in range(n + 1):
        blend = binomial(n, i) * t ** i * (1.0 - t) ** (n - i)
        point += blend * pts[i]
    return point


def sample_bezier(control_points: Sequence[Sequence[float]], segments: int) -> np.ndarray:
    """Sample the curve at ``t = k / segments`` for ``k = 0..segments``.

    Returns a ``(segments + 1, 3)`` float64 array whose first and last rows are
    exactly the first and last control points.
    """
    pts = _control_array(control_points)
    if segments < 1:
        raise ValueError(f"segments must be >= 1, got {segments}.")
    n = len(pts) - 1

    t = np.arange(segments + 1, dtype=np.float64) / segments      # (S+1,)
    i = np.arange(n + 1)                                           # (n+1,)
    coeffs = np.array([binomial(n, k) for k in i], dtype=np.float64)
    weights = coeffs[None, :] * t[:, None] ** i[None, :] * (1.0 - t[:, None]) ** (n - i)[None, :]
    curve = weights @ pts

    # endpoints are exact
    curve[0] = pts[0]
    curve[-1] = pts[-1]
    return curve
