"""Shared types, geometry, and SVG utilities for outline paths."""

from .types import Point, LineSeg, ArcSeg, Segment, IntersectionResult, PathDescription
from .geometry import (
    GeometryError,
    dist, off_pt, find_intersection, ray_angle, normalize_arc_angle,
    arc_point, arc_start_point, arc_end_point, arc_sweep, arc_poly,
    pen_after, path_end_point, segment_polyline, path_polygon,
    poly_area, poly_bbox,
)
from .svg import path_d, render_path_svg
