"""
===============================================================================
GEOMETRY AND TRANSFORMS - Verification Tests
===============================================================================

Checks the primitive operations the mirrors are built on:

- line/line and line/circle intersections, including the degenerate cases
- points at a distance / relative position along a line
- reflection transforms (round trip law)
- local coordinate systems (global -> local -> global)

USAGE
-----
    pytest developer_tests/test_geometry.py -v
    python developer_tests/test_geometry.py

===============================================================================
"""

import math
import sys

from _helpers import assert_close, assert_point_close, run_tests

from mirror_diagrams.core.geometry import (
    geometry, Point, Line, ParallelLinesError,
)
from mirror_diagrams.core.transform import AffineTransform, CoordinateSystem


# =============================================================================
# Intersections
# =============================================================================

def test_lines_intersection():
    """Two crossing lines meet at the expected point."""
    print("\nTest: lines_intersection")
    l1 = geometry.line(Point(0, 0), Point(3, 4))
    l2 = geometry.line(Point(0, 4), Point(3, 0))
    p = geometry.lines_intersection(l1, l2)
    assert_point_close(p, Point(1.5, 2.0), msg="Intersection")
    print(f"  PASS: {p}")


def test_parallel_lines_raise():
    """Parallel lines raise instead of returning a point at infinity."""
    print("\nTest: parallel lines")
    l1 = geometry.line(Point(0, 0), Point(1, 1))
    l2 = geometry.line(Point(0, 1), Point(2, 3))
    try:
        geometry.lines_intersection(l1, l2)
    except ParallelLinesError:
        print("  PASS: ParallelLinesError raised")
        return
    raise AssertionError("Expected ParallelLinesError for parallel lines")


def test_line_circle_intersections():
    """A secant gives two points ordered along the line, a miss gives none."""
    print("\nTest: line_circle_intersections")
    circle = geometry.circle(Point(0, 0), 1.0)

    hits = geometry.line_circle_intersections(geometry.line(Point(-5, 0), Point(5, 0)), circle)
    assert len(hits) == 2, f"Expected 2 intersections, got {len(hits)}"
    assert_point_close(hits[0], Point(1, 0), msg="Point further along the line")
    assert_point_close(hits[1], Point(-1, 0), msg="Point nearer the line start")

    misses = geometry.line_circle_intersections(geometry.line(Point(-5, 2), Point(5, 2)), circle)
    assert misses == [], f"Expected no intersection, got {misses}"

    tangent = geometry.line_circle_intersections(geometry.line(Point(-5, 1), Point(5, 1)), circle)
    assert len(tangent) == 2
    assert_point_close(tangent[0], tangent[1], msg="Tangent points coincide")
    print("  PASS")


# =============================================================================
# Points on lines
# =============================================================================

def test_point_at_and_rel_point():
    """point_at uses arc length, rel_point uses the p1 -> p2 parameter."""
    print("\nTest: point_at / rel_point")
    l1 = geometry.line(Point(1, 1), Point(4, 5))  # length 5
    assert_point_close(geometry.point_at(l1, 10), Point(7, 9), msg="point_at 10")
    assert_point_close(geometry.point_at(l1, -5), Point(-2, -3), msg="point_at -5")
    assert_point_close(geometry.rel_point(l1, 0.5), Point(2.5, 3), msg="rel_point 0.5")
    assert_point_close(geometry.rel_point(l1, 2), Point(7, 9), msg="rel_point 2")
    print("  PASS")


def test_perpendicular_line():
    """The perpendicular line is rotated +90 degrees and passes through the point."""
    print("\nTest: perpendicular_line_through_point")
    l1 = geometry.line(Point(0, 0), Point(2, 0))
    perp = geometry.perpendicular_line_through_point(l1, Point(1, 1))
    assert_close(geometry.dot(geometry.direction(l1), geometry.direction(perp)), 0.0, msg="Dot")
    assert_point_close(geometry.direction(perp), Point(0, 1), msg="Direction")
    assert_point_close(perp.p1, Point(1, 1), msg="Through point")
    print("  PASS")


def test_parallel_line():
    """The parallel line keeps the direction of the original and passes through the point."""
    print("\nTest: parallel_line_through_point")
    l1 = geometry.line(Point(1, 1), Point(4, 5))
    par = geometry.parallel_line_through_point(l1, Point(-2, 0))
    assert_point_close(par.p1, Point(-2, 0), msg="Through point")
    assert_point_close(geometry.direction(par), Point(0.6, 0.8), msg="Direction")
    assert_close(geometry.point_line_distance(Point(1, 4), par), 0.0, msg="On line")
    print("  PASS")


def test_normalize_zero_vector_raises():
    print("\nTest: normalize_vec of zero vector")
    try:
        geometry.normalize_vec(Point(0, 0))
    except ValueError:
        print("  PASS: ValueError raised")
        return
    raise AssertionError("Expected ValueError")


# =============================================================================
# Transforms
# =============================================================================

def test_reflection_round_trip():
    """Reflecting twice across the same line returns the original point."""
    print("\nTest: reflection round trip")
    lines = [
        geometry.line(Point(0, 0), Point(1, 0)),
        geometry.line(Point(1, 2), Point(3, 7)),
        geometry.line(Point(-2, 5), Point(-2, -1)),
    ]
    points = [Point(0, 5), Point(-3.5, 2.25), Point(10, -7), Point(1, 2)]
    for l1 in lines:
        reflection = AffineTransform.reflection(l1)
        for p in points:
            back = reflection.apply(reflection.apply(p))
            assert_point_close(back, p, 1e-9, f"Round trip of {p} across {l1}")
    print("  PASS")


def test_reflection_known_values():
    """Reflection across the x axis flips y; points on the line stay put."""
    print("\nTest: reflection known values")
    reflection = AffineTransform.reflection(geometry.line(Point(-1, 0), Point(1, 0)))
    assert_point_close(reflection.apply(Point(3, 4)), Point(3, -4), msg="Across x axis")

    diagonal = AffineTransform.reflection(geometry.line(Point(0, 0), Point(1, 1)))
    assert_point_close(diagonal.apply(Point(2, 0)), Point(0, 2), msg="Across y = x")
    assert_point_close(diagonal.apply(Point(5, 5)), Point(5, 5), msg="Point on line")
    print("  PASS")


def test_transform_inverse_and_compose():
    print("\nTest: inverse and compose")
    t = AffineTransform.from_coefficients(2, 1, -1, 3, 4, -2)
    identity = t.compose(t.inverse())
    p = Point(1.25, -0.5)
    assert_point_close(identity.apply(p), p, msg="t * t^-1")
    print("  PASS")


def test_coordinate_system_round_trip():
    """A scaled, rotated system maps its axis points to unit coordinates."""
    print("\nTest: CoordinateSystem")
    cs = CoordinateSystem.from_axis(Point(4, 1), Point(0, 2), 3.0)
    assert_point_close(cs.to_local(Point(4, 1)), Point(0, 0), msg="Origin")
    assert_point_close(cs.to_local(Point(4, 4)), Point(1, 0), msg="One unit along x")
    # y axis is x rotated by +90 degrees
    assert_point_close(cs.to_local(Point(1, 1)), Point(0, 1), msg="One unit along y")

    for p in (Point(0, 0), Point(-7.5, 2.5), Point(3, -9)):
        assert_point_close(cs.to_global(cs.to_local(p)), p, 1e-9, "Round trip")

    angle = math.radians(30)
    rotated = CoordinateSystem.from_axis(Point(0, 0), Point(math.cos(angle), math.sin(angle)), 1.0)
    local = rotated.to_local(Point(math.cos(angle), math.sin(angle)))
    assert_point_close(local, Point(1, 0), msg="Rotated axis")
    print("  PASS")


def run_all_tests():
    print("=" * 78)
    print("GEOMETRY AND TRANSFORMS")
    print("=" * 78)
    return run_tests([
        ("lines_intersection()", test_lines_intersection),
        ("Parallel lines", test_parallel_lines_raise),
        ("line_circle_intersections()", test_line_circle_intersections),
        ("point_at() / rel_point()", test_point_at_and_rel_point),
        ("perpendicular_line_through_point()", test_perpendicular_line),
        ("parallel_line_through_point()", test_parallel_line),
        ("normalize_vec() zero vector", test_normalize_zero_vector_raises),
        ("Reflection round trip", test_reflection_round_trip),
        ("Reflection known values", test_reflection_known_values),
        ("Inverse and compose", test_transform_inverse_and_compose),
        ("CoordinateSystem", test_coordinate_system_round_trip),
    ])


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
