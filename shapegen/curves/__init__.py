"""Curve evaluation and sweep frames used by the tube generator."""

from .bezier import binomial, bezier_point, sample_bezier
from .frames import Frame, build_frames, frame_axes

__all__ = ["binomial", "bezier_point", "sample_bezier", "Frame", "build_frames", "frame_axes"]
