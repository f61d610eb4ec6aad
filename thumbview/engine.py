"""Compute the thumb outline: anchors, thumb/top-edge intersection, and path assembly."""
import functools
import logging
import math
from typing import Callable, NamedTuple

from pathgeom.types import Point, LineSeg, ArcSeg, Segment, IntersectionResult, PathDescription
from pathgeom.geometry import find_intersection, ray_angle, normalize_arc_angle, path_end_point, dist
from thumbview.constants import (
    THUMB_RADIUS, THUMB_CIRCLE_OFFSET, CORNER_RADIUS, Y_OFFSET,
    WIDTH_INSET, HEIGHT_INSET, CIRCLE_X_OFFSET,
    STROKE_WIDTH, FILL_COLOR, STROKE_COLOR,
)

logger = logging.getLogger(__name__)

Trace = Callable[[str, object], None]


class Bounds(NamedTuple):
    width: float; height: float


class StyleParameters(NamedTuple):
    """Style inputs for one outline computation."""
    thumb_radius: float = THUMB_RADIUS
    thumb_circle_offset: float = THUMB_CIRCLE_OFFSET
    corner_radius: float = CORNER_RADIUS
    y_offset: float = Y_OFFSET
    width_inset: float = WIDTH_INSET
    height_inset: float = HEIGHT_INSET
    circle_x_offset: float = CIRCLE_X_OFFSET
    stroke_width: float = STROKE_WIDTH
    fill_color: str = FILL_COLOR
    stroke_color: str = STROKE_COLOR


class OutlineAnchors(NamedTuple):
    """Anchor points for the outline, in drawing order where it matters."""
    thumb_center: Point
    top_left_end: Point         # end of TL corner arc, path start
    top_right_start: Point      # start of TR corner arc
    bottom_right_start: Point
    bottom_left_start: Point
    top_left_return: Point      # start of TL corner arc
    center_top_right: Point
    center_bottom_right: Point
    center_bottom_left: Point
    center_top_left: Point
    thumb_radius: float         # clamped


_HALF_PI = math.pi / 2


def _log_trace(name: str, value: object) -> None:
    logger.debug("%s = %s", name, value)


# ============================================================
# Clamping and anchors
# ============================================================

def clamp_style(style: StyleParameters) -> StyleParameters:
    """Clamp thumb radius to >= 0, then offset to >= -radius."""
    r = style.thumb_radius if style.thumb_radius >= 0 else 0.0
    off = style.thumb_circle_offset
    if off + r < 0:
        off = -r
    return style._replace(thumb_radius=r, thumb_circle_offset=off)


def compute_anchors(bounds: Bounds, style: StyleParameters) -> OutlineAnchors:
    """Nine anchor points from the view size and (clamped) style."""
    s = clamp_style(style)
    w, h = bounds
    r, cr = s.thumb_radius, s.corner_radius
    wi, hi, yo = s.width_inset, s.height_inset, s.y_offset
    top = yo + hi
    return OutlineAnchors(
        thumb_center=(w/2 + s.circle_x_offset, r + s.thumb_circle_offset + hi + yo),
        top_left_end=(cr + wi, top),
        top_right_start=(w - wi - cr, top),
        bottom_right_start=(w - wi, h - cr - hi),
        bottom_left_start=(cr + wi, h - hi),
        top_left_return=(wi, h - cr - hi),
        center_top_right=(w - cr - wi, top + cr),
        center_bottom_right=(w - cr - wi, h - cr - hi),
        center_bottom_left=(cr + wi, h - cr - hi),
        center_top_left=(cr + wi, top + cr),
        thumb_radius=r,
    )


# ============================================================
# Path assembly
# ============================================================

def _thumb_segments(anchors: OutlineAnchors, hits: IntersectionResult, emit: Trace) -> list[Segment]:
    """Line to the left hit, then the thumb arc over the top. Empty when the thumb misses."""
    if hits.first[0] == hits.second[0]:
        return []
    c = anchors.thumb_center
    raw_start = ray_angle(c, hits.second)
    raw_end = ray_angle(c, hits.first)
    start = normalize_arc_angle(raw_start)
    end = normalize_arc_angle(raw_end)
    emit("start_angle", (raw_start, raw_start / math.pi))
    emit("end_angle", (raw_end, raw_end / math.pi))
    emit("start_radians", start)
    emit("end_radians", end)
    return [LineSeg(hits.first), ArcSeg(c, anchors.thumb_radius, start, end, True)]


def _corner_segments(anchors: OutlineAnchors, cr: float) -> list[Segment]:
    """Rest of the top edge, then each corner arc followed by the next edge, ending with the TL arc.

    Corner arcs are skipped when cr <= 0.
    """
    segs: list[Segment] = [LineSeg(anchors.top_right_start)]
    edges = [
        (anchors.center_top_right, 3*_HALF_PI, 0.0, anchors.bottom_right_start),
        (anchors.center_bottom_right, 0.0, _HALF_PI, anchors.bottom_left_start),
        (anchors.center_bottom_left, _HALF_PI, math.pi, anchors.top_left_return),
    ]
    for center, sa, ea, to in edges:
        if cr > 0:
            segs.append(ArcSeg(center, cr, sa, ea, True))
        segs.append(LineSeg(to))
    if cr > 0:
        segs.append(ArcSeg(anchors.center_top_left, cr, math.pi, 3*_HALF_PI, True))
    return segs


def build_path(bounds: Bounds, style: StyleParameters, trace: Trace | None = None) -> PathDescription:
    """Closed outline for the given view size and style.

    trace receives named diagnostics (anchors, angles); without it they go
    to this module's logger at DEBUG.
    """
    emit = trace or _log_trace
    s = clamp_style(style)
    a = compute_anchors(bounds, s)
    emit("thumb_radius", s.thumb_radius)
    emit("thumb_circle_offset", s.thumb_circle_offset)
    emit("y_offset", s.y_offset)
    emit("height_inset", s.height_inset)
    for name in ("thumb_center", "top_left_end", "top_right_start",
                 "bottom_right_start", "bottom_left_start", "top_left_return"):
        emit(name, getattr(a, name))

    hits = find_intersection(a.top_left_end, a.top_right_start, a.thumb_center, a.thumb_radius)
    emit("first_intersection", hits.first)
    emit("second_intersection", hits.second)

    segs = _thumb_segments(a, hits, emit)
    segs += _corner_segments(a, s.corner_radius)

    path = PathDescription(
        start=a.top_left_end, segments=tuple(segs),
        fill_color=s.fill_color, stroke_color=s.stroke_color,
        stroke_width=s.stroke_width,
    )
    # close: line back to start unless the TL arc already landed there
    if dist(path_end_point(path), a.top_left_end) > 1e-9:
        path = path._replace(segments=path.segments + (LineSeg(a.top_left_end),))
    return path


@functools.lru_cache(maxsize=128)
def build_path_cached(bounds: Bounds, style: StyleParameters) -> PathDescription:
    """build_path memoised on exact (bounds, style) equality."""
    return build_path(bounds, style)
