"""Tests for pathgeom/geometry.py pure functions."""
import math
import pytest
from pathgeom.geometry import (
    GeometryError,
    dist, off_pt, find_intersection, ray_angle, normalize_arc_angle,
    arc_point, arc_start_point, arc_end_point, arc_sweep, arc_poly,
    pen_after, path_end_point, segment_polyline, path_polygon,
    poly_area, poly_bbox,
)
from pathgeom.types import LineSeg, ArcSeg, PathDescription


def _square_path(side=10.0):
    return PathDescription(
        start=(0.0, 0.0),
        segments=(LineSeg((side, 0.0)), LineSeg((side, side)),
                  LineSeg((0.0, side)), LineSeg((0.0, 0.0))),
        fill_color="#fff", stroke_color="#000", stroke_width=1.0,
    )


# --- dist / off_pt ---

def test_dist_345():
    assert abs(dist((0, 0), (3, 4)) - 5.0) < 1e-12


def test_off_pt():
    p = off_pt((3, 4), (0, 1), 2.0)
    assert abs(p[0] - 3.0) < 1e-12
    assert abs(p[1] - 6.0) < 1e-12


# --- find_intersection ---

def test_find_intersection_two_hits():
    hits = find_intersection((0, 0), (100, 0), (50, 10), 15)
    dx = math.sqrt(15**2 - 10**2)
    assert abs(hits.first[0] - (50 - dx)) < 1e-10
    assert abs(hits.second[0] - (50 + dx)) < 1e-10
    assert abs(hits.first[1]) < 1e-12
    assert abs(hits.second[1]) < 1e-12
    assert hits.first[0] < hits.second[0]


def test_find_intersection_symmetric_about_center():
    hits = find_intersection((0, 0), (100, 0), (50, 10), 15)
    assert abs((hits.first[0] + hits.second[0]) / 2 - 50.0) < 1e-10


def test_find_intersection_tangent_sentinel():
    hits = find_intersection((0, 0), (100, 0), (50, 15), 15)
    assert hits.first == (0, 0)
    assert hits.second == (0, 0)


def test_find_intersection_miss_sentinel():
    hits = find_intersection((0, 0), (100, 0), (50, 20), 5)
    assert hits == ((0, 0), (0, 0))


def test_find_intersection_zero_length_line():
    hits = find_intersection((7, 7), (7, 7), (7, 7), 5)
    assert hits == ((7, 7), (7, 7))


def test_find_intersection_zero_radius():
    # center on the line, r=0: distE == radius → tangent
    hits = find_intersection((0, 0), (10, 0), (5, 0), 0)
    assert hits.first == hits.second == (0, 0)


def test_find_intersection_infinite_line():
    # both hits lie beyond the end point; no clipping to the segment
    hits = find_intersection((0, 0), (10, 0), (50, 0), 5)
    assert abs(hits.first[0] - 45.0) < 1e-10
    assert abs(hits.second[0] - 55.0) < 1e-10


def test_find_intersection_vertical_line():
    # order follows the start → end direction
    hits = find_intersection((0, 0), (0, 100), (3, 50), 5)
    assert abs(hits.first[1] - 46.0) < 1e-10
    assert abs(hits.second[1] - 54.0) < 1e-10


# --- ray_angle / normalize_arc_angle ---

def test_ray_angle_up_is_negative_in_y_down():
    assert abs(ray_angle((0, 0), (0, -1)) - (-math.pi / 2)) < 1e-12


def test_ray_angle_left():
    assert abs(ray_angle((0, 0), (-1, 0)) - math.pi) < 1e-12


@pytest.mark.parametrize("raw,expected", [
    (0.0, math.pi),
    (-math.pi / 6, 7 * math.pi / 6),
    (-5 * math.pi / 6, 11 * math.pi / 6),
    (math.pi / 2, 3 * math.pi / 2),
    (math.pi, 2 * math.pi),
])
def test_normalize_arc_angle(raw, expected):
    assert abs(normalize_arc_angle(raw) - expected) < 1e-12


# --- arcs ---

def test_arc_point_quarter():
    p = arc_point((1, 1), 2.0, math.pi / 2)
    assert abs(p[0] - 1.0) < 1e-12
    assert abs(p[1] - 3.0) < 1e-12


def test_arc_start_end_points():
    seg = ArcSeg((0, 0), 1.0, 0.0, math.pi / 2, True)
    s = arc_start_point(seg); e = arc_end_point(seg)
    assert abs(s[0] - 1.0) < 1e-12 and abs(s[1]) < 1e-12
    assert abs(e[0]) < 1e-12 and abs(e[1] - 1.0) < 1e-12


def test_arc_sweep_clockwise_wraps():
    seg = ArcSeg((0, 0), 1.0, 3 * math.pi / 2, 0.0, True)
    assert abs(arc_sweep(seg) - math.pi / 2) < 1e-12


def test_arc_sweep_counterclockwise_negative():
    seg = ArcSeg((0, 0), 1.0, 0.0, 3 * math.pi / 2, False)
    assert abs(arc_sweep(seg) - (-math.pi / 2)) < 1e-12


def test_arc_poly_count():
    poly = arc_poly(0, 0, 1.0, 0.0, math.pi, 10)
    assert len(poly) == 11
    assert abs(poly[-1][0] + 1.0) < 1e-12


def test_arc_poly_negative_radius_raises():
    with pytest.raises(GeometryError, match="Negative arc radius"):
        arc_poly(0, 0, -1.0, 0.0, math.pi)


def test_arc_poly_zero_steps_raises():
    with pytest.raises(GeometryError, match="at least one step"):
        arc_poly(0, 0, 1.0, 0.0, math.pi, 0)


# --- pen tracking ---

def test_pen_after_line():
    assert pen_after(LineSeg((4, 5)), (0, 0)) == (4, 5)


def test_pen_after_arc():
    p = pen_after(ArcSeg((0, 0), 2.0, 0.0, math.pi, True), (2, 0))
    assert abs(p[0] + 2.0) < 1e-12


def test_path_end_point_square():
    assert path_end_point(_square_path()) == (0.0, 0.0)


# --- segment_polyline / path_polygon ---

def test_segment_polyline_line():
    poly = segment_polyline(LineSeg((1, 1)), (0, 0))
    assert poly == [(0, 0), (1, 1)]


def test_segment_polyline_arc_includes_pen():
    seg = ArcSeg((0, 0), 1.0, 0.0, math.pi / 2, True)
    poly = segment_polyline(seg, (5, 5), 20)
    assert len(poly) == 22
    assert poly[0] == (5, 5)
    assert abs(poly[1][0] - 1.0) < 1e-12
    assert abs(poly[-1][1] - 1.0) < 1e-12


def test_path_polygon_square():
    poly = path_polygon(_square_path())
    assert poly == [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)]


def test_path_polygon_drops_repeated_points():
    path = _square_path()._replace(segments=(
        LineSeg((10.0, 0.0)), LineSeg((10.0, 0.0)), LineSeg((10.0, 10.0)),
        LineSeg((0.0, 10.0)), LineSeg((0.0, 0.0))))
    assert len(path_polygon(path)) == 4


# --- poly_area / poly_bbox ---

def test_poly_area_unit_square():
    sq = [(0, 0), (1, 0), (1, 1), (0, 1)]
    assert abs(poly_area(sq) - 1.0) < 1e-12


def test_poly_area_triangle():
    tri = [(0, 0), (4, 0), (0, 3)]
    assert abs(poly_area(tri) - 6.0) < 1e-12


def test_poly_area_half_disc():
    path = PathDescription((1.0, 0.0), (ArcSeg((0, 0), 1.0, 0.0, math.pi, True),
                                        LineSeg((1.0, 0.0))), "#fff", "#000", 1.0)
    area = poly_area(path_polygon(path, 400))
    assert abs(area - math.pi / 2) < 1e-3


def test_poly_bbox():
    assert poly_bbox([(1, 5), (-2, 3), (4, -1)]) == (-2, -1, 4, 5)
