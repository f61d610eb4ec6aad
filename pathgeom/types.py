"""Shared type definitions for thumbpath outlines.

Coordinates are screen-style: x grows right, y grows down.
"""
from typing import NamedTuple

Point = tuple[float, float]

class LineSeg(NamedTuple):
    to: Point

class ArcSeg(NamedTuple):
    center: Point; radius: float
    start_angle: float; end_angle: float
    clockwise: bool

Segment = LineSeg | ArcSeg

class IntersectionResult(NamedTuple):
    """Left and right hits of a line with a circle; equal points mean no hit."""
    first: Point; second: Point

class PathDescription(NamedTuple):
    """Closed outline to fill, then stroke."""
    start: Point
    segments: tuple[Segment, ...]
    fill_color: str; stroke_color: str
    stroke_width: float
