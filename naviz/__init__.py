"""Positions, colours, interpolation functions and keyframe timelines for atom animations."""

__version__ = "0.4.1"

__all__ = ["color", "interpolator", "position", "timeline", "to_float"]