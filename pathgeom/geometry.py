"""Pure geometry functions, arc handling, and polygon utilities."""
import math
from .types import Point, LineSeg, ArcSeg, Segment, IntersectionResult, PathDescription

# ============================================================
# Error Type
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible geometry operations."""

# ============================================================
# Geometry Utilities
# ============================================================
def dist(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return math.sqrt((p2[0]-p1[0])**2+(p2[1]-p1[1])**2)

def off_pt(p: Point, n: Point, d: float) -> Point:
    """Offset point p by distance d along unit direction n."""
    return (p[0]+d*n[0], p[1]+d*n[1])

def find_intersection(start: Point, end: Point, center: Point, radius: float) -> IntersectionResult:
    """Intersections of the line through start/end with a circle.

    The line is treated as infinite; hits are not clipped to the segment.
    first is at the smaller parameter along start → end, second at the larger.
    Tangency, a miss, or start == end all return (start, start).
    """
    L = dist(start, end)
    if L == 0:
        return IntersectionResult(start, start)
    D = ((end[0]-start[0])/L, (end[1]-start[1])/L)
    # closest point E on the line to the circle center
    t = D[0]*(center[0]-start[0]) + D[1]*(center[1]-start[1])
    E = off_pt(start, D, t)
    dist_e = dist(E, center)
    if dist_e < radius:
        dt = math.sqrt(radius**2 - dist_e**2)
        return IntersectionResult(off_pt(start, D, t-dt), off_pt(start, D, t+dt))
    return IntersectionResult(start, start)

def ray_angle(center: Point, p: Point) -> float:
    """atan2 angle of the ray center → p, in (-pi, pi]."""
    return math.atan2(p[1]-center[1], p[0]-center[0])

def normalize_arc_angle(raw: float) -> float:
    """Map a raw y-down atan2 angle onto the clockwise sweep used for the thumb arc.

    (1 + |raw/pi|) * pi, i.e. pi + |raw|. For hits above the center this
    mirrors the angle about the vertical axis, which is what lets the arc
    run second → first clockwise over the top of the circle.
    """
    return (1 + abs(raw / math.pi)) * math.pi

# ============================================================
# Arc Helpers
# ============================================================
def arc_point(center: Point, r: float, ang: float) -> Point:
    """Point on a circle at angle ang (radians, y-down)."""
    return (center[0]+r*math.cos(ang), center[1]+r*math.sin(ang))

def arc_start_point(seg: ArcSeg) -> Point:
    return arc_point(seg.center, seg.radius, seg.start_angle)

def arc_end_point(seg: ArcSeg) -> Point:
    return arc_point(seg.center, seg.radius, seg.end_angle)

def arc_sweep(seg: ArcSeg) -> float:
    """Signed sweep of an arc in radians; positive for clockwise (increasing angle in y-down)."""
    if seg.clockwise:
        return (seg.end_angle - seg.start_angle) % (2*math.pi)
    return -((seg.start_angle - seg.end_angle) % (2*math.pi))

def arc_poly(cx: float, cy: float, r: float, sa: float, ea: float, n: int = 60) -> list[Point]:
    """Generate n+1 points along a circular arc from angle sa to ea (radians)."""
    if r < 0:
        raise GeometryError(f"Negative arc radius: r={r}")
    if n < 1:
        raise GeometryError(f"Arc needs at least one step: n={n}")
    return [(cx+r*math.cos(sa+(ea-sa)*i/n), cy+r*math.sin(sa+(ea-sa)*i/n))
            for i in range(n+1)]

# ============================================================
# Path Operations
# ============================================================
def pen_after(seg: Segment, pen: Point) -> Point:
    """Current point after drawing seg from pen."""
    if isinstance(seg, LineSeg):
        return seg.to
    return arc_end_point(seg)

def path_end_point(path: PathDescription) -> Point:
    """Where the pen rests after the last segment."""
    pen = path.start
    for seg in path.segments:
        pen = pen_after(seg, pen)
    return pen

def segment_polyline(seg: Segment, pen: Point, n_pts: int = 20) -> list[Point]:
    """Convert a segment drawn from pen to a polyline, pen first.

    Arcs include the implicit connecting line from pen to the arc start.
    """
    if isinstance(seg, LineSeg):
        return [pen, seg.to]
    sa = seg.start_angle
    poly = arc_poly(seg.center[0], seg.center[1], seg.radius, sa, sa + arc_sweep(seg), n_pts)
    return [pen] + poly

def path_polygon(path: PathDescription, n_pts: int = 20) -> list[Point]:
    """Flatten a closed path description into a polygon vertex list."""
    polygon = [path.start]
    pen = path.start
    for seg in path.segments:
        for p in segment_polyline(seg, pen, n_pts)[1:]:
            if dist(p, polygon[-1]) > 1e-9:
                polygon.append(p)
        pen = pen_after(seg, pen)
    if len(polygon) > 1 and dist(polygon[-1], polygon[0]) <= 1e-9:
        polygon.pop()  # remove closing point (= polygon[0])
    return polygon

def poly_area(verts: list[Point]) -> float:
    """Polygon area via the shoelace formula. Works for either winding order."""
    n = len(verts); a = 0
    for i in range(n):
        j = (i+1)%n; a += verts[i][0]*verts[j][1]-verts[j][0]*verts[i][1]
    return abs(a)/2

def poly_bbox(verts: list[Point]) -> tuple[float, float, float, float]:
    """(min_x, min_y, max_x, max_y) of a vertex list."""
    xs = [p[0] for p in verts]; ys = [p[1] for p in verts]
    return min(xs), min(ys), max(xs), max(ys)
