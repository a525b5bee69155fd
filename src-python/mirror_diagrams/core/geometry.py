"""
Copyright 2026 mirror-diagrams authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import math
from typing import List
from shapely.geometry import Point as ShapelyPoint

from .constants import MIN_VECTOR_LENGTH_SQUARED, PARALLEL_THRESHOLD


class GeometryError(ValueError):
    """Base class for degenerate geometric configurations."""


class ParallelLinesError(GeometryError):
    """Raised when two lines that should intersect are parallel."""


class NoIntersectionError(GeometryError):
    """Raised when a line misses a circle entirely."""


class Point:
    """
    A point in 2D space.
    Also used as a free vector (direction, offset) where the context needs one.
    Can be converted to/from Shapely Point objects.
    """

    def __init__(self, x: float, y: float):
        self.x = x
        self.y = y

    def to_shapely(self) -> ShapelyPoint:
        """Convert to Shapely Point."""
        return ShapelyPoint(self.x, self.y)

    @classmethod
    def from_shapely(cls, sp: ShapelyPoint) -> 'Point':
        """Create Point from Shapely Point."""
        return cls(sp.x, sp.y)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __repr__(self) -> str:
        return f"Point(x={self.x}, y={self.y})"


class Line:
    """
    A line in 2D space, defined by two points.
    Can represent a line, ray, or segment depending on context.
    - As a line: p1 and p2 are two distinct points on the line.
    - As a ray: p1 is the starting point and p2 is another point on the ray.
    - As a segment: p1 and p2 are the two endpoints.

    The direction p1 -> p2 is the parametrization direction used by
    Geometry.point_at and Geometry.rel_point.
    """

    def __init__(self, p1: Point, p2: Point):
        self.p1 = p1
        self.p2 = p2

    def __eq__(self, other) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return self.p1 == other.p1 and self.p2 == other.p2

    def __hash__(self) -> int:
        return hash((self.p1, self.p2))

    def __repr__(self) -> str:
        return f"Line(p1={self.p1}, p2={self.p2})"


class Circle:
    """
    A circle in 2D space, defined by a center point and a radius.
    """

    def __init__(self, c: Point, r: float):
        self.c = c
        self.r = r

    def __repr__(self) -> str:
        return f"Circle(c={self.c}, r={self.r})"


class Geometry:
    """
    Basic geometric figures and operations used by the mirror objects.
    """

    @staticmethod
    def point(x: float, y: float) -> Point:
        """
        Create a point.

        Args:
            x: The x-coordinate of the point.
            y: The y-coordinate of the point.

        Returns:
            Point object
        """
        return Point(x, y)

    @staticmethod
    def line(p1: Point, p2: Point) -> Line:
        """
        Create a line, which also represents a ray or a segment.

        Args:
            p1: First point
            p2: Second point

        Returns:
            Line object
        """
        return Line(p1, p2)

    @staticmethod
    def line_through(p1: Point, direction: Point) -> Line:
        """
        Create the line through p1 along a direction vector.

        Args:
            p1: Point on the line
            direction: Direction vector (need not be normalized)

        Returns:
            Line from p1 to p1 + direction
        """
        return Line(p1, Point(p1.x + direction.x, p1.y + direction.y))

    @staticmethod
    def circle(c: Point, r: float) -> Circle:
        """
        Create a circle.

        Args:
            c: The center point of the circle.
            r: The radius of the circle.

        Returns:
            Circle object
        """
        return Circle(c, r)

    @staticmethod
    def dot(p1: Point, p2: Point) -> float:
        """
        Calculate the dot product, where the two points are treated as vectors.
        """
        return p1.x * p2.x + p1.y * p2.y

    @staticmethod
    def cross(p1: Point, p2: Point) -> float:
        """
        Calculate the cross product (z-component), where the two points are treated as vectors.
        """
        return p1.x * p2.y - p1.y * p2.x

    @staticmethod
    def translate(p1: Point, v: Point, scale: float = 1.0) -> Point:
        """Return p1 + scale * v."""
        return Point(p1.x + scale * v.x, p1.y + scale * v.y)

    @staticmethod
    def vector(p1: Point, p2: Point) -> Point:
        """Return the vector from p1 to p2."""
        return Point(p2.x - p1.x, p2.y - p1.y)

    @staticmethod
    def direction(l1: Line) -> Point:
        """Unit direction vector of a line (p1 -> p2)."""
        return Geometry.normalize_vec(Geometry.vector(l1.p1, l1.p2))

    @staticmethod
    def lines_intersection(l1: Line, l2: Line) -> Point:
        """
        Calculate the intersection of two lines.

        Args:
            l1: First line
            l2: Second line

        Returns:
            Intersection point

        Raises:
            ParallelLinesError: If the lines are parallel or coincident
        """
        A = l1.p2.x * l1.p1.y - l1.p1.x * l1.p2.y
        B = l2.p2.x * l2.p1.y - l2.p1.x * l2.p2.y
        xa = l1.p2.x - l1.p1.x
        xb = l2.p2.x - l2.p1.x
        ya = l1.p2.y - l1.p1.y
        yb = l2.p2.y - l2.p1.y

        denominator = xa * yb - xb * ya

        if abs(denominator) < PARALLEL_THRESHOLD:
            raise ParallelLinesError(f"Lines {l1} and {l2} are parallel")

        x = (A * xb - B * xa) / denominator
        y = (A * yb - B * ya) / denominator

        return Geometry.point(x, y)

    @staticmethod
    def line_circle_intersections(l1: Line, c1: Circle) -> List[Point]:
        """
        Calculate the intersections of a line and a circle.

        Args:
            l1: Line
            c1: Circle

        Returns:
            List of intersection points: empty if the line misses the circle,
            otherwise two points (identical when the line is tangent). The
            first point lies further along the line direction.
        """
        xa = l1.p2.x - l1.p1.x
        ya = l1.p2.y - l1.p1.y
        cx = c1.c.x
        cy = c1.c.y
        r_sq = c1.r * c1.r

        # Normalize the line direction
        l = math.sqrt(xa * xa + ya * ya)
        ux = xa / l
        uy = ya / l

        # Project circle center onto line
        cu = (cx - l1.p1.x) * ux + (cy - l1.p1.y) * uy
        px = l1.p1.x + cu * ux
        py = l1.p1.y + cu * uy

        dist_sq = r_sq - (px - cx) * (px - cx) - (py - cy) * (py - cy)

        if dist_sq < 0:
            return []

        d = math.sqrt(dist_sq)

        return [
            Geometry.point(px + ux * d, py + uy * d),
            Geometry.point(px - ux * d, py - uy * d),
        ]

    @staticmethod
    def distance(p1: Point, p2: Point) -> float:
        """Calculate the distance between two points."""
        return math.sqrt(Geometry.distance_squared(p1, p2))

    @staticmethod
    def distance_squared(p1: Point, p2: Point) -> float:
        """Calculate the squared distance between two points."""
        dx = p1.x - p2.x
        dy = p1.y - p2.y
        return dx * dx + dy * dy

    @staticmethod
    def point_line_distance(p1: Point, l1: Line) -> float:
        """
        Distance from a point to an infinite line.

        Args:
            p1: Point
            l1: Line

        Returns:
            Perpendicular distance (always >= 0)
        """
        u = Geometry.direction(l1)
        return abs(Geometry.cross(u, Geometry.vector(l1.p1, p1)))

    @staticmethod
    def parallel_line_through_point(l1: Line, p1: Point) -> Line:
        """
        Calculate the line through p1 and parallel to l1 (same direction).
        """
        dx = l1.p2.x - l1.p1.x
        dy = l1.p2.y - l1.p1.y
        return Geometry.line(p1, Geometry.point(p1.x + dx, p1.y + dy))

    @staticmethod
    def perpendicular_line_through_point(l1: Line, p1: Point) -> Line:
        """
        Calculate the line through p1 and perpendicular to l1.

        The direction of the result is the direction of l1 rotated by +90 degrees.
        """
        dx = l1.p2.x - l1.p1.x
        dy = l1.p2.y - l1.p1.y
        return Geometry.line(p1, Geometry.point(p1.x - dy, p1.y + dx))

    @staticmethod
    def point_at(l1: Line, distance: float) -> Point:
        """
        Point at a signed distance from l1.p1 along the direction of l1.

        Args:
            l1: Line (p1 is the origin of the parametrization)
            distance: Signed arc length from p1

        Returns:
            Point on the line
        """
        return Geometry.translate(l1.p1, Geometry.direction(l1), distance)

    @staticmethod
    def rel_point(l1: Line, t: float) -> Point:
        """
        Point at relative position t on the line: p1 for t=0, p2 for t=1.
        """
        return Geometry.point(
            l1.p1.x + t * (l1.p2.x - l1.p1.x),
            l1.p1.y + t * (l1.p2.y - l1.p1.y)
        )

    @staticmethod
    def normalize_vec(p1: Point) -> Point:
        """
        Normalize the given point as if it were a vector.

        Raises:
            ValueError: If the vector has (near) zero length
        """
        len_sq = p1.x * p1.x + p1.y * p1.y
        if len_sq < MIN_VECTOR_LENGTH_SQUARED:
            raise ValueError(f"Cannot normalize zero-length vector {p1}")
        len_val = math.sqrt(len_sq)
        return Geometry.point(p1.x / len_val, p1.y / len_val)

    @staticmethod
    def rotate_vec(p1: Point, angle: float) -> Point:
        """
        Rotate the given point as if it were a vector by the given angle in radians.
        """
        return Geometry.point(
            p1.x * math.cos(angle) - p1.y * math.sin(angle),
            p1.x * math.sin(angle) + p1.y * math.cos(angle)
        )

    @staticmethod
    def angle_between(v1: Point, v2: Point) -> float:
        """
        Unsigned angle between two vectors in radians, in [0, pi].
        """
        return abs(math.atan2(Geometry.cross(v1, v2), Geometry.dot(v1, v2)))

    @staticmethod
    def signed_angle(v1: Point, v2: Point) -> float:
        """
        Signed angle from v1 to v2 in radians, in (-pi, pi]. Positive is counter-clockwise.
        """
        return math.atan2(Geometry.cross(v1, v2), Geometry.dot(v1, v2))


# Create a singleton instance for convenience
geometry = Geometry()
