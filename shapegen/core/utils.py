from __future__ import annotations
import numpy as np
import logging

def get_logger(name: str = "shapegen") -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        fmt = logging.Formatter("[%(levelname)s] %(message)s")
        handler.setFormatter(fmt)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger

def ensure_unit_vectors(v: np.ndarray, eps: float = 1e-12) -> np.ndarray:
    norms = np.linalg.norm(v, axis=1, keepdims=True)
    norms = np.clip(norms, eps, None)
    return v / norms

def normalize(v: np.ndarray, eps: float = 1e-12) -> np.ndarray:
    """Unit vector along ``v``; raises for (near) zero-length input."""
    n = float(np.linalg.norm(v))
    if n < eps:
        raise ValueError("Cannot normalize a zero-length vector.")
    return v / n

def as_points(points, name: str = "points") -> np.ndarray:
    arr = np.asarray(points, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"{name} must have shape (N, 3), got {arr.shape}")
    return arr

def radians(deg: float | np.ndarray) -> float | np.ndarray:
    return np.deg2rad(deg)
